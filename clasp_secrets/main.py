"""CLI entry point for clasp-secrets."""

import click
import structlog

from clasp_secrets import __version__
from clasp_secrets.cli import (
    check_command,
    delete_command,
    export_command,
    restore_command,
    upload_command,
)
from clasp_secrets.utils.logging_config import configure_logging

log = structlog.get_logger(__name__)


@click.group()
@click.option(
    "--log-level",
    default="WARNING",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
    help="Logging level",
)
@click.version_option(__version__, prog_name="clasp-secrets")
def cli(log_level: str) -> None:
    """clasp-secrets: sync clasp credentials with GitHub Actions secrets."""
    configure_logging(log_level)
    log.debug("cli_started", log_level=log_level)


cli.add_command(check_command)
cli.add_command(upload_command)
cli.add_command(delete_command)
cli.add_command(export_command)
cli.add_command(restore_command)


if __name__ == "__main__":
    cli()
