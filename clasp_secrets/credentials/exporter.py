"""Write the clasp credentials file from explicit settings.

Two ways to materialize ``.clasprc.json`` on a machine that never ran
``clasp login``, typically a CI runner:

    - CredentialExporter: build the record from individual ``CLASP_*``
      values (see ExportSettings)
    - restore_from_base64: decode the ``CLASPRC_JSON`` secret written by
      ``upload_secrets``

Example:
    >>> from clasp_secrets.config import ExportSettings
    >>> exporter = CredentialExporter(ExportSettings.from_env())
    >>> path = exporter.export()
"""

import json
from pathlib import Path

import structlog

from clasp_secrets.config.settings import ExportSettings
from clasp_secrets.credentials.clasprc import get_clasprc_path, write_clasprc
from clasp_secrets.credentials.models import ClasprcCredentials, ClasprcToken, OAuth2ClientSettings
from clasp_secrets.exceptions import CredentialFormatError
from clasp_secrets.utils.encoding import decode_from_base64

log = structlog.get_logger(__name__)


class CredentialExporter:
    """Builds and writes the credentials record.

    Attributes:
        settings: Credential values to export
        path: Target file; None means the default clasprc path at export time
    """

    def __init__(self, settings: ExportSettings, path: str | Path | None = None) -> None:
        self.settings = settings
        self.path = Path(path) if path is not None else None

    def build(self) -> ClasprcCredentials:
        """Assemble the credentials record from the settings."""
        s = self.settings
        return ClasprcCredentials(
            token=ClasprcToken(
                access_token=s.access_token,
                refresh_token=s.refresh_token,
                scope=s.scope,
                token_type=s.token_type,
                id_token=s.id_token,
                expiry_date=s.expiry_date,
            ),
            oauth2_client_settings=OAuth2ClientSettings(
                client_id=s.client_id,
                client_secret=s.client_secret,
                redirect_uri=s.redirect_uri,
            ),
            is_local_creds=s.is_local_creds,
        )

    def export(self) -> Path:
        """Write the credentials file, replacing any existing one.

        Returns:
            Path that was written
        """
        target = self.path or Path(get_clasprc_path())
        if self.settings.access_token is None:
            log.warning("export_missing_access_token", path=str(target))
        return write_clasprc(self.build().to_json(), target)


def restore_from_base64(payload: str, path: str | Path | None = None) -> Path:
    """Decode a base64 credentials payload and write it to disk.

    Args:
        payload: Base64 text as stored in the CLASPRC_JSON secret
        path: Target file, defaults to get_clasprc_path()

    Returns:
        Path that was written

    Raises:
        CredentialFormatError: If the payload is not base64 or not JSON.
            Nothing is written in that case.
    """
    content = decode_from_base64(payload)
    try:
        json.loads(content)
    except json.JSONDecodeError as e:
        raise CredentialFormatError(f"Decoded payload is not valid JSON: {e}") from e
    return write_clasprc(content, path)
