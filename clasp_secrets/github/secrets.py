"""Synchronize the clasp credentials file with GitHub Actions secrets.

All GitHub access goes through the ``gh`` CLI, so authentication, hosts
and proxies follow whatever ``gh auth login`` configured.

The three operations fail differently on purpose:
    - check_repo_access never raises; every failure is encoded in the result
    - upload_secrets raises, because a failed upload leaves CI with stale credentials
    - delete_secrets only warns, because the secret may already be gone

Example:
    >>> access = check_repo_access("owner/repo")
    >>> if access.can_push:
    ...     upload_secrets("owner/repo")
"""

import json
import sys
from dataclasses import dataclass
from typing import Any

import click
import structlog

from clasp_secrets.credentials.clasprc import clasprc_exists, get_clasprc_path, read_clasprc_bytes
from clasp_secrets.exceptions import ClaspSecretsError, ExecutableNotFoundError
from clasp_secrets.utils.encoding import encode_to_base64
from clasp_secrets.utils.process import run_gh

log = structlog.get_logger(__name__)

SECRET_NAME = "CLASPRC_JSON"

GH_MISSING = "gh command missing"
REPO_NOT_FOUND = "Repository not found"
INVALID_RESPONSE = "Invalid response from gh api"


@dataclass(frozen=True)
class RepoAccess:
    """Result of a repository access check.

    Attributes:
        exists: Whether the repository could be read
        can_push: Whether the authenticated user may push (and set secrets)
        error: Reason the check failed, None on success
    """

    exists: bool
    can_push: bool
    error: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Return the result with camelCase keys, omitting a None error."""
        data: dict[str, Any] = {"exists": self.exists, "canPush": self.can_push}
        if self.error is not None:
            data["error"] = self.error
        return data


def check_repo_access(repo: str) -> RepoAccess:
    """Check that a repository exists and the current gh user can push to it.

    Any non-zero exit from ``gh api`` counts as "not found"; auth and rate
    limit failures are not told apart.

    Args:
        repo: Repository identifier in owner/name form

    Returns:
        RepoAccess describing the outcome. Never raises.
    """
    try:
        result = run_gh("api", f"repos/{repo}")
    except ExecutableNotFoundError:
        log.warning("gh_missing", repo=repo)
        return RepoAccess(exists=False, can_push=False, error=GH_MISSING)
    except ClaspSecretsError as e:
        log.error("repo_access_invocation_failed", repo=repo, error=e.message)
        return RepoAccess(exists=False, can_push=False, error=f"gh invocation failed: {e.message}")

    if result.returncode != 0:
        log.info("repo_not_found", repo=repo, returncode=result.returncode, stderr=result.stderr)
        return RepoAccess(exists=False, can_push=False, error=REPO_NOT_FOUND)

    try:
        data = json.loads(result.stdout)
        permissions = data.get("permissions") or {}
        can_push = permissions.get("push") is True
    except (json.JSONDecodeError, AttributeError) as e:
        log.error("repo_access_bad_response", repo=repo, error=str(e))
        return RepoAccess(exists=False, can_push=False, error=INVALID_RESPONSE)

    log.debug("repo_access_checked", repo=repo, can_push=can_push)
    return RepoAccess(exists=True, can_push=can_push)


def upload_secrets(repo: str) -> None:
    """Upload the local credentials file as the CLASPRC_JSON secret.

    The file contents are base64-encoded and handed to ``gh secret set``
    on standard input, never on the command line.

    Args:
        repo: Repository identifier in owner/name form

    Raises:
        CommandFailedError: If ``gh secret set`` exits non-zero
        ExecutableNotFoundError: If ``gh`` is not installed
        InvocationError: If ``gh`` could not be started

    Note:
        A missing credentials file terminates the process with exit status 1.
    """
    clasprc_path = get_clasprc_path()
    if not clasprc_exists(clasprc_path):
        log.error("clasprc_missing", path=clasprc_path)
        click.echo(click.style(f"❌ {clasprc_path} not found. Run 'clasp login' first.", fg="red"), err=True)
        sys.exit(1)

    encoded = encode_to_base64(read_clasprc_bytes(clasprc_path))
    run_gh("secret", "set", SECRET_NAME, "-R", repo, input_text=encoded, check=True)

    log.info("secret_uploaded", repo=repo, secret=SECRET_NAME)
    click.echo(click.style(f"✅ Uploaded {SECRET_NAME} to {repo}", fg="green"))


def delete_secrets(repo: str) -> None:
    """Delete the CLASPRC_JSON secret from a repository.

    Failures are reported as a warning and otherwise ignored.

    Args:
        repo: Repository identifier in owner/name form
    """
    warning = f"❌ Failed to delete {SECRET_NAME} from GitHub Secrets (may not exist)"
    try:
        result = run_gh("secret", "delete", SECRET_NAME, "-R", repo)
    except ClaspSecretsError as e:
        log.warning("secret_delete_failed", repo=repo, error=e.message)
        click.echo(click.style(warning, fg="yellow"), err=True)
        return

    if result.returncode != 0:
        log.warning("secret_delete_failed", repo=repo, returncode=result.returncode, stderr=result.stderr)
        click.echo(click.style(warning, fg="yellow"), err=True)
        return

    log.info("secret_deleted", repo=repo, secret=SECRET_NAME)
    click.echo(click.style(f"🗑️  Deleted {SECRET_NAME} from {repo}", fg="green"))
