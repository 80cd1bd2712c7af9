"""Schema inspection command."""

import click


@click.command("schema")
@click.pass_context
def show_schema(ctx):
    """Show the table columns, schema version and the migrations just applied."""
    db = ctx.obj["db"]
    report = ctx.obj["schema_report"]
    manager = db.schema_manager

    if report.created:
        click.echo("Created new table with full schema.")
    elif report.applied:
        click.echo(f"Applied migrations: {', '.join(report.applied)}")
    else:
        click.echo("Schema is up to date.")
    if not report.ok:
        click.echo(f"Warning: {report.error}", err=True)

    click.echo(f"Schema version: {manager.get_version()}")
    if not manager.table_exists():
        click.echo("Columns: table missing")
        return
    click.echo("Columns:")
    for name in sorted(manager.get_columns()):
        click.echo(f"  {name}")


def register_commands(cli):
    """Register schema command with main CLI."""
    cli.add_command(show_schema)
