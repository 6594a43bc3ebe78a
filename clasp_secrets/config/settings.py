"""
Export settings loaded from ``CLASP_*`` environment variables.

CI jobs receive the clasp OAuth token set as individual secrets exposed
through the environment. ``ExportSettings`` collects them once so the
exporter is constructed with explicit values instead of reading the
environment itself.
"""

from __future__ import annotations

from typing import Any

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from clasp_secrets.exceptions import ConfigurationError


class ExportSettings(BaseSettings):
    """Credential values for writing ``.clasprc.json``.

    Every field maps to ``CLASP_<FIELD>``, e.g. ``CLASP_ACCESS_TOKEN``.
    """

    model_config = SettingsConfigDict(
        env_prefix="CLASP_",
        case_sensitive=False,
        extra="ignore",
    )

    access_token: str | None = Field(default=None, description="OAuth access token")
    refresh_token: str | None = Field(default=None, description="OAuth refresh token")
    scope: str | None = Field(default=None, description="Space-separated OAuth scopes")
    token_type: str | None = Field(default=None, description="Token type, usually Bearer")
    id_token: str | None = Field(default=None, description="OpenID Connect ID token")
    expiry_date: int | None = Field(default=None, description="Expiry as epoch milliseconds")
    client_id: str | None = Field(default=None, description="OAuth client ID")
    client_secret: str | None = Field(default=None, description="OAuth client secret")
    redirect_uri: str | None = Field(default=None, description="OAuth redirect URI")
    is_local_creds: bool = Field(default=False, description="Project-local credentials flag")

    @field_validator("expiry_date", mode="before")
    @classmethod
    def parse_expiry_date(cls, v: Any) -> int | None:
        """Coerce the expiry to an integer.

        A blank value counts as 0. Non-numeric and non-finite values give None.
        """
        if v is None or isinstance(v, int):
            return v
        text = str(v).strip()
        if not text:
            return 0
        try:
            return int(float(text))
        except (ValueError, OverflowError):
            return None

    @field_validator("is_local_creds", mode="before")
    @classmethod
    def parse_is_local_creds(cls, v: Any) -> bool:
        """Only the literal string "true" enables the flag."""
        if isinstance(v, bool):
            return v
        return v == "true"

    @classmethod
    def from_env(cls) -> ExportSettings:
        """Load settings from the process environment.

        Raises:
            ConfigurationError: If the environment holds values that fail validation
        """
        try:
            return cls()
        except ValidationError as e:
            raise ConfigurationError(f"Invalid CLASP_* environment: {e}") from e
