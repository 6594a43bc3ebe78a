"""CLI commands for GitHub secret synchronization.

Commands:
    - check: Verify the repository exists and is pushable
    - upload: Upload ~/.clasprc.json as the CLASPRC_JSON secret
    - delete: Remove the CLASPRC_JSON secret

Example:
    Upload credentials to a repository::

        $ clasp-secrets upload octocat/my-apps-script
        $ clasp-secrets delete octocat/my-apps-script --yes
"""

import re
import sys

import click
import structlog

from clasp_secrets.exceptions import ClaspSecretsError
from clasp_secrets.github.secrets import check_repo_access, delete_secrets, upload_secrets

log = structlog.get_logger(__name__)

REPO_PATTERN = re.compile(r"^[A-Za-z0-9_.-]+/[A-Za-z0-9_.-]+$")


def _validate_repo(ctx: click.Context, param: click.Parameter, value: str | None) -> str:
    """Prompt for a missing repository and check the owner/name shape."""
    if value is None:
        value = click.prompt("GitHub repository (owner/name)")
    value = value.strip()
    if not REPO_PATTERN.match(value):
        raise click.BadParameter(f"Invalid repository '{value}'. Expected format: owner/name")
    return value


def _fail(e: ClaspSecretsError) -> None:
    """Print a clasp-secrets error and exit with status 1."""
    click.echo(click.style(f"Error: {e.message}", fg="red"), err=True)
    suggestion = getattr(e, "suggestion", None)
    if suggestion:
        click.echo(click.style(f"Suggestion: {suggestion}", fg="yellow"), err=True)
    sys.exit(1)


repo_argument = click.argument("repo", required=False, callback=_validate_repo)


@click.command(name="check")
@repo_argument
def check_command(repo: str) -> None:
    """Check that REPO exists and you can push to it.

    Examples:

        clasp-secrets check octocat/my-apps-script
    """
    access = check_repo_access(repo)

    if access.error:
        click.echo(click.style(f"Error: {access.error}", fg="red"), err=True)
        sys.exit(1)
    if not access.can_push:
        click.echo(click.style(f"No push access to {repo}", fg="yellow"), err=True)
        sys.exit(1)

    click.echo(click.style(f"Push access to {repo} confirmed", fg="green"))


@click.command(name="upload")
@repo_argument
@click.option("--skip-check", is_flag=True, help="Do not verify repository access before uploading")
def upload_command(repo: str, skip_check: bool) -> None:
    """Upload ~/.clasprc.json to REPO as the CLASPRC_JSON secret.

    Examples:

        clasp-secrets upload octocat/my-apps-script
    """
    if not skip_check:
        access = check_repo_access(repo)
        if access.error:
            click.echo(click.style(f"Error: {access.error}", fg="red"), err=True)
            sys.exit(1)
        if not access.can_push:
            click.echo(click.style(f"Error: no push access to {repo}", fg="red"), err=True)
            sys.exit(1)

    try:
        upload_secrets(repo)
    except ClaspSecretsError as e:
        log.debug("upload_error", exc_info=True)
        _fail(e)


@click.command(name="delete")
@repo_argument
@click.confirmation_option("--yes", "-y", prompt="Delete CLASPRC_JSON from the repository?")
def delete_command(repo: str) -> None:
    """Delete the CLASPRC_JSON secret from REPO.

    A missing secret only produces a warning.
    """
    delete_secrets(repo)
