"""Database reset command."""

import click
from eggledger.cli.error_handling import handle_domain_error
from eggledger.domain.errors import DomainError


@click.command("reset-db")
@click.option("--yes", "-y", is_flag=True, help="Skip confirmation prompt")
@click.pass_context
def reset_db(ctx, yes: bool):
    """Delete ALL records and recreate the table with the current schema."""
    db = ctx.obj["db"]

    if not yes and not click.confirm(
        "This will delete ALL data and recreate tables with the current schema. Continue?"
    ):
        click.echo("Reset cancelled.")
        return

    try:
        db.reset_schema()
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    click.echo("Database reset with current schema.")


def register_commands(cli):
    """Register reset command with main CLI."""
    cli.add_command(reset_db)
