"""CLI error handling helpers."""

from typing import Callable, Optional, TypeVar

import click

from eggledger.domain.errors import DomainError

T = TypeVar("T")


def handle_domain_error(ctx: click.Context, error: DomainError | ValueError) -> None:
    """Render a domain error and exit with failure."""
    click.echo(f"Error: {error}", err=True)
    ctx.exit(1)


def parse_or_exit(
    ctx: click.Context, parser: Callable[[str], T], value: Optional[str], label: str
) -> Optional[T]:
    """Parse an optional option value, or exit with a CLI error.

    Blank or missing values return None so the caller can apply its defaults.
    """
    if value is None or not value.strip():
        return None
    try:
        return parser(value)
    except ValueError as e:
        click.echo(f"Error: Invalid {label}: {e}", err=True)
        ctx.exit(1)
