"""Main CLI entry point."""

import logging

import click
from eggledger.database.factories import create_sqlite_database, DB_PATH_ENV_VAR
from eggledger.logging_setup import setup_logging

# Import and register all commands at module level
from eggledger.cli.commands import (
    record,
    credit,
    summary,
    export,
    reset,
    schema,
)


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help=f"Path to database file (overrides {DB_PATH_ENV_VAR} environment variable)",
    envvar=DB_PATH_ENV_VAR,
)
@click.option("-v", "--verbose", is_flag=True, help="Show debug logging")
@click.pass_context
def cli(ctx, db_path: str | None, verbose: bool):
    """Eggledger - Daily egg production ledger.

    Record eggs produced, broken and sold each day, track customer credit,
    and export everything as CSV.
    """
    ctx.ensure_object(dict)

    if verbose:
        logging.getLogger("eggledger").setLevel(logging.DEBUG)

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        db = create_sqlite_database(database_path=db_path)
        db.connect()
        report = db.initialize_schema()
        if not report.ok:
            click.echo(f"Warning: database schema may be incomplete: {report.error}", err=True)
        ctx.obj["db"] = db
        ctx.obj["schema_report"] = report
        ctx.call_on_close(db.disconnect)


# Register all commands
record.register_commands(cli)
credit.register_commands(cli)
summary.register_commands(cli)
export.register_commands(cli)
reset.register_commands(cli)
schema.register_commands(cli)


def main():
    """Main entry point for CLI."""
    setup_logging()
    cli()


if __name__ == "__main__":
    main()
