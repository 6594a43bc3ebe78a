"""GitHub Actions secret synchronization through the gh CLI."""

from clasp_secrets.github.secrets import (
    SECRET_NAME,
    RepoAccess,
    check_repo_access,
    delete_secrets,
    upload_secrets,
)

__all__ = [
    "SECRET_NAME",
    "RepoAccess",
    "check_repo_access",
    "upload_secrets",
    "delete_secrets",
]
