"""Daily record commands."""

from datetime import date

import click
from eggledger.cli.error_handling import handle_domain_error, parse_or_exit
from eggledger.database.base import DEFAULT_RECENT_LIMIT
from eggledger.domain.entities import DailyRecord
from eggledger.domain.errors import DomainError
from eggledger.domain.records import RecordService
from eggledger.utils.amount_parser import parse_amount, parse_count
from eggledger.utils.date_parser import parse_date


def format_record_details(record: DailyRecord) -> list[str]:
    """Render a record as indented detail lines."""
    lines = [
        f"  Produced: {record.produced_eggs} eggs",
        f"  Breakages: {record.breakages} eggs",
        f"  Sold: {record.sold_eggs} eggs",
        f"  Remaining: {record.remaining_eggs} eggs",
        f"  Price: ${record.price_per_egg:.2f}/egg",
        f"  Cash Sales: ${record.cash_sales:.2f}",
    ]
    if record.credit_amount > 0:
        lines.append(f"  Credit: ${record.credit_amount:.2f}")
        if record.credit_name:
            lines.append(f"  Customer: {record.credit_name}")
    return lines


@click.group()
def record_group():
    """Manage daily records."""
    pass


@record_group.command("save")
@click.option(
    "--date",
    "date_str",
    default="today",
    show_default=True,
    help="Record date (YYYY-MM-DD or relative like 'today', 'yesterday')",
)
@click.option("--produced", help="Eggs produced (required)")
@click.option("--price", help="Price per egg (required)")
@click.option("--breakages", help="Broken eggs (default 0)")
@click.option("--sold", help="Eggs sold (default 0)")
@click.option("--credit-amount", help="Credit amount (default 0)")
@click.option("--credit-name", help="Customer name for the credit")
@click.option(
    "--no-overwrite",
    is_flag=True,
    help="Fail if a record for the date already exists instead of replacing it",
)
@click.pass_context
def save_record(
    ctx,
    date_str: str,
    produced: str | None,
    price: str | None,
    breakages: str | None,
    sold: str | None,
    credit_amount: str | None,
    credit_name: str | None,
    no_overwrite: bool,
):
    """Save the record for a day.

    An existing record for the same date is replaced entirely, including
    any credit added with 'credit add'.

    Examples:
        eggledger record save --produced 120 --price 0.25
        eggledger record save --date 2024-01-15 --produced 120 --breakages 3 --sold 100 --price 0.25
    """
    db = ctx.obj["db"]
    service = RecordService(db)

    record_date = parse_or_exit(ctx, parse_date, date_str, "date") or date.today()
    produced_eggs = parse_or_exit(ctx, parse_count, produced, "produced eggs")
    price_per_egg = parse_or_exit(ctx, parse_amount, price, "price per egg")
    breakages_count = parse_or_exit(ctx, parse_count, breakages, "breakages")
    sold_count = parse_or_exit(ctx, parse_count, sold, "sold eggs")
    credit = parse_or_exit(ctx, parse_amount, credit_amount, "credit amount")

    try:
        saved = service.save_daily_record(
            record_date=record_date,
            produced_eggs=produced_eggs,
            price_per_egg=price_per_egg,
            breakages=breakages_count,
            sold_eggs=sold_count,
            credit_amount=credit,
            credit_name=credit_name,
            overwrite=not no_overwrite,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    click.echo(f"Saved record for {saved.date_label} (ID: {saved.id})")
    for line in format_record_details(saved):
        click.echo(line)


@record_group.command("list")
@click.option(
    "--limit",
    type=int,
    default=DEFAULT_RECENT_LIMIT,
    show_default=True,
    help="Maximum number of records to show",
)
@click.pass_context
def list_records(ctx, limit: int):
    """List recent records, newest first."""
    db = ctx.obj["db"]
    service = RecordService(db)

    try:
        records = service.list_recent(limit=limit)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    if not records:
        click.echo("No records found.")
        return

    click.echo("\nRecent Records:")
    click.echo("-" * 100)
    for rec in records:
        line = (
            f"ID: {rec.id:4d} | {rec.date_label} | "
            f"Produced: {rec.produced_eggs:5d} | Broken: {rec.breakages:4d} | "
            f"Sold: {rec.sold_eggs:5d} | Remaining: {rec.remaining_eggs:5d} | "
            f"Cash: ${rec.cash_sales:,.2f}"
        )
        if rec.credit_amount > 0:
            line += f" | Credit: ${rec.credit_amount:,.2f}"
            if rec.credit_name:
                line += f" ({rec.credit_name})"
        click.echo(line)


@record_group.command("show")
@click.argument("date_str", metavar="DATE")
@click.pass_context
def show_record(ctx, date_str: str):
    """Show the record for a date.

    Examples:
        eggledger record show today
        eggledger record show 2024-01-15
    """
    db = ctx.obj["db"]
    service = RecordService(db)

    record_date = parse_or_exit(ctx, parse_date, date_str, "date") or date.today()
    try:
        rec = service.require_record(record_date)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    click.echo(f"{rec.date_label} (ID: {rec.id})")
    for line in format_record_details(rec):
        click.echo(line)


@record_group.command("delete")
@click.argument("record_id", metavar="ID", type=int)
@click.option("--yes", "-y", is_flag=True, help="Skip confirmation prompt")
@click.pass_context
def delete_record(ctx, record_id: int, yes: bool):
    """Delete a record by ID.

    Deleting an ID that does not exist is not an error.
    """
    db = ctx.obj["db"]
    service = RecordService(db)

    if not yes and not click.confirm(f"Are you sure you want to delete record {record_id}?"):
        click.echo("Deletion cancelled.")
        return

    try:
        deleted = service.delete_record(record_id)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    if deleted:
        click.echo(f"Deleted record {record_id}")
    else:
        click.echo(f"No record with ID {record_id}; nothing deleted")


def register_commands(cli):
    """Register record commands with main CLI."""
    cli.add_command(record_group, name="record")
