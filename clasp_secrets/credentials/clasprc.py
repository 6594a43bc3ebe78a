"""Access to the local clasp credentials file.

The file lives at ``<home>/.clasprc.json``. The home directory comes from
``USERPROFILE`` on Windows and ``HOME`` everywhere else. The path is
recomputed on every call so changes to the environment are picked up
immediately.

Example:
    >>> from clasp_secrets.credentials.clasprc import get_clasprc_path, clasprc_exists
    >>> path = get_clasprc_path()
    >>> if clasprc_exists(path):
    ...     data = read_clasprc(path)
"""

import json
import ntpath
import os
import posixpath
import sys
from pathlib import Path
from typing import Any

import structlog

from clasp_secrets.exceptions import CredentialFormatError, MissingCredentialsFileError

log = structlog.get_logger(__name__)

CLASPRC_FILENAME = ".clasprc.json"


def _home_env_var() -> str:
    return "USERPROFILE" if sys.platform == "win32" else "HOME"


def get_clasprc_path() -> str:
    """Compute the path of the clasp credentials file.

    Returns:
        Path string joined with the current platform's separator. An unset
        home variable yields the bare filename.

    Example:
        >>> # HOME=/fake/home on Linux
        >>> get_clasprc_path()
        '/fake/home/.clasprc.json'
    """
    home_dir = os.environ.get(_home_env_var(), "")
    pathmod = ntpath if sys.platform == "win32" else posixpath
    if not home_dir:
        return CLASPRC_FILENAME
    return pathmod.join(home_dir, CLASPRC_FILENAME)


def _resolve(path: str | Path | None) -> Path:
    return Path(path) if path is not None else Path(get_clasprc_path())


def clasprc_exists(path: str | Path | None = None) -> bool:
    """Check whether the credentials file exists."""
    return _resolve(path).exists()


def read_clasprc_bytes(path: str | Path | None = None) -> bytes:
    """Read the credentials file exactly as stored on disk.

    Raises:
        MissingCredentialsFileError: If the file does not exist
    """
    file_path = _resolve(path)
    try:
        return file_path.read_bytes()
    except FileNotFoundError as e:
        raise MissingCredentialsFileError(
            "Credentials file not found",
            path=str(file_path),
            suggestion="Run 'clasp login' first",
        ) from e


def read_clasprc_text(path: str | Path | None = None) -> str:
    """Read the credentials file as UTF-8 text.

    Raises:
        MissingCredentialsFileError: If the file does not exist
        CredentialFormatError: If the file is not valid UTF-8
    """
    file_path = _resolve(path)
    try:
        return read_clasprc_bytes(file_path).decode("utf-8")
    except UnicodeDecodeError as e:
        raise CredentialFormatError(f"Credentials file is not valid UTF-8: {e}", path=str(file_path)) from e


def read_clasprc(path: str | Path | None = None) -> dict[str, Any]:
    """Read and parse the credentials file.

    Raises:
        MissingCredentialsFileError: If the file does not exist
        CredentialFormatError: If the file is not valid JSON
    """
    file_path = _resolve(path)
    text = read_clasprc_text(file_path)
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise CredentialFormatError(f"Invalid JSON in credentials file: {e}", path=str(file_path)) from e


def write_clasprc(content: str, path: str | Path | None = None) -> Path:
    """Overwrite the credentials file with the given text.

    Args:
        content: Complete file contents
        path: Target path, defaults to get_clasprc_path()

    Returns:
        Path that was written
    """
    file_path = _resolve(path)
    file_path.write_text(content, encoding="utf-8")
    log.info("clasprc_written", path=str(file_path))
    return file_path
