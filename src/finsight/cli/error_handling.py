"""CLI error handling helpers."""

import click

from finsight.domain.errors import DomainError
from finsight.logger import get_logger

logger = get_logger("cli")


def handle_domain_error(ctx: click.Context, error: DomainError | ValueError) -> None:
    """Render a domain error and exit with failure."""
    logger.debug("Command failed: %s", error)
    click.echo(f"Error: {error}", err=True)
    ctx.exit(1)
