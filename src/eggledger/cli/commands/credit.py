"""Credit commands."""

from datetime import date

import click
from eggledger.cli.error_handling import handle_domain_error, parse_or_exit
from eggledger.domain.errors import DomainError
from eggledger.domain.records import RecordService
from eggledger.utils.amount_parser import parse_amount
from eggledger.utils.date_parser import parse_date


@click.group()
def credit_group():
    """Track money owed by customers."""
    pass


@credit_group.command("add")
@click.option(
    "--date",
    "date_str",
    default="today",
    show_default=True,
    help="Date the credit belongs to (YYYY-MM-DD or relative like 'today')",
)
@click.option("--amount", required=True, help="Credit amount (e.g., 12.50)")
@click.option("--name", required=True, help="Customer name")
@click.option("--yes", "-y", is_flag=True, help="Skip confirmation prompt")
@click.pass_context
def add_credit(ctx, date_str: str, amount: str, name: str, yes: bool):
    """Add a credit without changing production or sales.

    Credits for the same date accumulate: amounts are added and customer
    names are joined with commas.

    Examples:
        eggledger credit add --amount 12.50 --name "Alice"
        eggledger credit add --date yesterday --amount 5 --name "Bob" --yes
    """
    db = ctx.obj["db"]
    service = RecordService(db)

    record_date = parse_or_exit(ctx, parse_date, date_str, "date") or date.today()
    credit_amount = parse_or_exit(ctx, parse_amount, amount, "credit amount")

    if not yes and not click.confirm(f"Add credit of ${credit_amount or 0:.2f} for {name}?"):
        click.echo("Cancelled.")
        return

    try:
        updated = service.add_credit(record_date, credit_amount, name)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    click.echo(f"Added credit for {updated.date_label}")
    click.echo(f"  Credit: ${updated.credit_amount:.2f}")
    click.echo(f"  Customers: {updated.credit_name}")


def register_commands(cli):
    """Register credit commands with main CLI."""
    cli.add_command(credit_group, name="credit")
