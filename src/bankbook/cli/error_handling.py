"""CLI error handling helpers."""

import click

from bankbook.domain.errors import DomainError


def render_domain_error(error: DomainError, err: bool = False) -> None:
    """Print a domain error as a one-line message."""
    click.echo(f"Error: {error}", err=err)


def handle_domain_error(ctx: click.Context, error: DomainError) -> None:
    """Render a domain error to stderr and exit with failure."""
    render_domain_error(error, err=True)
    ctx.exit(1)
