"""CLI commands that write the clasp credentials file.

These run on CI runners, where ``clasp login`` is not possible:

    - export: build ~/.clasprc.json from CLASP_* environment variables
    - restore: decode the base64 CLASPRC_JSON secret into ~/.clasprc.json
"""

import os
import sys
from pathlib import Path

import click

from clasp_secrets.config.settings import ExportSettings
from clasp_secrets.credentials.exporter import CredentialExporter, restore_from_base64
from clasp_secrets.exceptions import ClaspSecretsError


@click.command(name="export")
@click.option(
    "--path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Output file (default: ~/.clasprc.json)",
)
def export_command(path: Path | None) -> None:
    """Write the credentials file from CLASP_* environment variables.

    Reads CLASP_ACCESS_TOKEN, CLASP_REFRESH_TOKEN, CLASP_SCOPE,
    CLASP_TOKEN_TYPE, CLASP_ID_TOKEN, CLASP_EXPIRY_DATE, CLASP_CLIENT_ID,
    CLASP_CLIENT_SECRET, CLASP_REDIRECT_URI and CLASP_IS_LOCAL_CREDS.
    """
    try:
        settings = ExportSettings.from_env()
        written = CredentialExporter(settings, path=path).export()
    except ClaspSecretsError as e:
        click.echo(click.style(f"Error: {e.message}", fg="red"), err=True)
        sys.exit(1)
    except OSError as e:
        click.echo(click.style(f"Error: cannot write credentials file: {e}", fg="red"), err=True)
        sys.exit(1)

    click.echo(click.style(f"✅ Wrote {written}", fg="green"))


@click.command(name="restore")
@click.option(
    "--path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Output file (default: ~/.clasprc.json)",
)
@click.option(
    "--from-env",
    "env_var",
    default="CLASPRC_JSON",
    show_default=True,
    help="Environment variable holding the base64 payload",
)
@click.option("--stdin", "from_stdin", is_flag=True, help="Read the base64 payload from standard input")
def restore_command(path: Path | None, env_var: str, from_stdin: bool) -> None:
    """Decode a base64 CLASPRC_JSON payload into the credentials file."""
    if from_stdin:
        payload = click.get_text_stream("stdin").read()
    else:
        payload = os.environ.get(env_var, "")

    if not payload.strip():
        source = "standard input" if from_stdin else f"${env_var}"
        click.echo(click.style(f"Error: no payload found in {source}", fg="red"), err=True)
        sys.exit(1)

    try:
        written = restore_from_base64(payload, path)
    except ClaspSecretsError as e:
        click.echo(click.style(f"Error: {e.message}", fg="red"), err=True)
        sys.exit(1)
    except OSError as e:
        click.echo(click.style(f"Error: cannot write credentials file: {e}", fg="red"), err=True)
        sys.exit(1)

    click.echo(click.style(f"✅ Wrote {written}", fg="green"))
