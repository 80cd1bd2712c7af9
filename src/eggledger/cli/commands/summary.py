"""Summary command."""

import click
from eggledger.cli.error_handling import handle_domain_error
from eggledger.domain.errors import DomainError
from eggledger.domain.records import RecordService


@click.command("summary")
@click.pass_context
def summary(ctx):
    """Show totals over all records."""
    db = ctx.obj["db"]
    service = RecordService(db)

    try:
        totals = service.get_summary()
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    click.echo("\nTotal Summary:")
    click.echo("-" * 40)
    click.echo(f"{'Total Produced':20s} {totals.total_produced:>12d} eggs")
    click.echo(f"{'Total Breakages':20s} {totals.total_breakages:>12d} eggs")
    click.echo(f"{'Total Sold':20s} {totals.total_sold:>12d} eggs")
    click.echo(f"{'Remaining':20s} {totals.total_remaining:>12d} eggs")
    click.echo(f"{'Cash Sales':20s} {'$' + format(totals.total_cash_sales, ',.2f'):>12s}")
    click.echo(f"{'Total Credits':20s} {'$' + format(totals.total_credits, ',.2f'):>12s}")


def register_commands(cli):
    """Register summary command with main CLI."""
    cli.add_command(summary)
