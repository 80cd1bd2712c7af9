"""Export command."""

import io

import click
from eggledger.cli.error_handling import handle_domain_error
from eggledger.domain.errors import DomainError
from eggledger.domain.export import ExportService


@click.command("export")
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, writable=True),
    help="Write CSV to this file instead of standard output",
)
@click.pass_context
def export_records(ctx, output: str | None):
    """Export all records as CSV, oldest first.

    Examples:
        eggledger export
        eggledger export --output eggs.csv
    """
    db = ctx.obj["db"]
    service = ExportService(db)

    try:
        if output is None:
            buffer = io.StringIO()
            if service.write_csv(buffer) == 0:
                click.echo("No data to export", err=True)
                return
            click.echo(buffer.getvalue(), nl=False)
            return

        count = service.export_to_file(output)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return
    except OSError as e:
        click.echo(f"Error: Could not write {output}: {e}", err=True)
        ctx.exit(1)

    if count == 0:
        click.echo(f"No data to export; wrote header only to {output}")
    else:
        click.echo(f"Exported {count} record{'s' if count != 1 else ''} to {output}")


def register_commands(cli):
    """Register export command with main CLI."""
    cli.add_command(export_records)
