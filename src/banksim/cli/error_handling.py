"""CLI error handling helpers."""

import click

from banksim.domain.errors import DomainError


def report_error(error: DomainError) -> None:
    """Render a recoverable domain error; the caller re-prompts."""
    click.echo(f"Error: {error}", err=True)


def handle_fatal_error(ctx: click.Context, error: DomainError) -> None:
    """Render a fatal error and exit with failure."""
    click.echo(f"Error: {error}", err=True)
    ctx.exit(1)
