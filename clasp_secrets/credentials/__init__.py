"""Local clasp credentials file: location, models, reading and writing."""

from clasp_secrets.credentials.clasprc import (
    CLASPRC_FILENAME,
    clasprc_exists,
    get_clasprc_path,
    read_clasprc,
    read_clasprc_bytes,
    read_clasprc_text,
    write_clasprc,
)
from clasp_secrets.credentials.exporter import CredentialExporter, restore_from_base64
from clasp_secrets.credentials.models import ClasprcCredentials, ClasprcToken, OAuth2ClientSettings

__all__ = [
    "CLASPRC_FILENAME",
    "get_clasprc_path",
    "clasprc_exists",
    "read_clasprc",
    "read_clasprc_bytes",
    "read_clasprc_text",
    "write_clasprc",
    "CredentialExporter",
    "restore_from_base64",
    "ClasprcCredentials",
    "ClasprcToken",
    "OAuth2ClientSettings",
]
