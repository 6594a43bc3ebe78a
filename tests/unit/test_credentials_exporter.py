"""Tests for clasp_secrets.credentials.exporter."""

import json

import pytest

from clasp_secrets.config.settings import ExportSettings
from clasp_secrets.credentials.clasprc import read_clasprc
from clasp_secrets.credentials.exporter import CredentialExporter, restore_from_base64
from clasp_secrets.exceptions import CredentialFormatError
from clasp_secrets.utils.encoding import encode_to_base64


@pytest.fixture(autouse=True)
def clean_clasp_env(monkeypatch):
    """Keep inherited CLASP_* variables out of ExportSettings()."""
    for var in [
        "CLASP_ACCESS_TOKEN",
        "CLASP_REFRESH_TOKEN",
        "CLASP_SCOPE",
        "CLASP_TOKEN_TYPE",
        "CLASP_ID_TOKEN",
        "CLASP_EXPIRY_DATE",
        "CLASP_CLIENT_ID",
        "CLASP_CLIENT_SECRET",
        "CLASP_REDIRECT_URI",
        "CLASP_IS_LOCAL_CREDS",
    ]:
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def settings() -> ExportSettings:
    return ExportSettings(
        access_token="ya29.access",
        refresh_token="1//refresh",
        scope="scope-a scope-b",
        token_type="Bearer",
        id_token="eyJid",
        expiry_date=1700000000000,
        client_id="client-id",
        client_secret="client-secret",
        redirect_uri="http://localhost",
        is_local_creds=False,
    )


class TestCredentialExporter:
    """Test building and writing the credentials record."""

    def test_build_maps_all_fields(self, settings):
        creds = CredentialExporter(settings).build()

        assert creds.token.access_token == "ya29.access"
        assert creds.token.expiry_date == 1700000000000
        assert creds.oauth2_client_settings.client_id == "client-id"
        assert creds.oauth2_client_settings.redirect_uri == "http://localhost"
        assert creds.is_local_creds is False

    def test_export_writes_clasprc_layout(self, settings, fake_home):
        """The file should use clasp's key names."""
        path = CredentialExporter(settings).export()

        assert path == fake_home / ".clasprc.json"
        data = read_clasprc()
        assert data == {
            "token": {
                "access_token": "ya29.access",
                "refresh_token": "1//refresh",
                "scope": "scope-a scope-b",
                "token_type": "Bearer",
                "id_token": "eyJid",
                "expiry_date": 1700000000000,
            },
            "oauth2ClientSettings": {
                "clientId": "client-id",
                "clientSecret": "client-secret",
                "redirectUri": "http://localhost",
            },
            "isLocalCreds": False,
        }

    def test_export_uses_two_space_indent(self, settings, tmp_path):
        target = tmp_path / "out.json"

        CredentialExporter(settings, path=target).export()

        assert target.read_text(encoding="utf-8").startswith('{\n  "token": {\n    "access_token"')

    def test_export_replaces_existing_file(self, settings, clasprc_file):
        CredentialExporter(settings).export()

        assert read_clasprc()["token"]["access_token"] == "ya29.access"

    def test_missing_values_are_omitted(self, tmp_path):
        """Unset strings are left out while expiry_date stays as null."""
        target = tmp_path / "out.json"

        CredentialExporter(ExportSettings(), path=target).export()

        data = json.loads(target.read_text(encoding="utf-8"))
        assert data == {"token": {"expiry_date": None}, "oauth2ClientSettings": {}, "isLocalCreds": False}

    def test_partial_settings_keep_set_fields(self, tmp_path):
        target = tmp_path / "out.json"

        CredentialExporter(ExportSettings(refresh_token="1//refresh", expiry_date=0), path=target).export()

        data = json.loads(target.read_text(encoding="utf-8"))
        assert data["token"] == {"refresh_token": "1//refresh", "expiry_date": 0}


class TestRestoreFromBase64:
    """Test recreating the file from the uploaded secret."""

    def test_restores_exact_contents(self, fake_home):
        original = '{\n  "token": {"access_token": "token"}\n}'

        path = restore_from_base64(encode_to_base64(original))

        assert path == fake_home / ".clasprc.json"
        assert path.read_text(encoding="utf-8") == original

    def test_rejects_non_json_payload_without_writing(self, fake_home):
        with pytest.raises(CredentialFormatError, match="not valid JSON"):
            restore_from_base64(encode_to_base64("plain text"))

        assert not (fake_home / ".clasprc.json").exists()

    def test_rejects_invalid_base64(self, tmp_path):
        target = tmp_path / "out.json"

        with pytest.raises(CredentialFormatError):
            restore_from_base64("%%%", target)

        assert not target.exists()
