"""Data models for the clasp credentials file.

The credentials file (``~/.clasprc.json``) mixes snake_case token fields,
as returned by Google's OAuth endpoint, with camelCase client settings.
The models below use aliases so the serialized form matches the file
byte-for-byte in key naming.

Example:
    >>> creds = ClasprcCredentials(
    ...     token=ClasprcToken(access_token="ya29.abc", expiry_date=1700000000000),
    ...     oauth2_client_settings=OAuth2ClientSettings(client_id="id.apps.googleusercontent.com"),
    ... )
    >>> write_clasprc(creds.to_json())
"""

import json

from pydantic import BaseModel, ConfigDict, Field


class ClasprcToken(BaseModel):
    """OAuth token set cached by clasp."""

    access_token: str | None = None
    refresh_token: str | None = None
    scope: str | None = None
    token_type: str | None = None
    id_token: str | None = None
    expiry_date: int | None = Field(default=None, description="Expiry as epoch milliseconds")


class OAuth2ClientSettings(BaseModel):
    """OAuth client used to mint the token."""

    model_config = ConfigDict(populate_by_name=True)

    client_id: str | None = Field(default=None, alias="clientId")
    client_secret: str | None = Field(default=None, alias="clientSecret")
    redirect_uri: str | None = Field(default=None, alias="redirectUri")


class ClasprcCredentials(BaseModel):
    """Complete contents of ``.clasprc.json``.

    Attributes:
        token: OAuth token set
        oauth2_client_settings: OAuth client configuration
        is_local_creds: Whether the credentials belong to a project-local login
    """

    model_config = ConfigDict(populate_by_name=True)

    token: ClasprcToken = Field(default_factory=ClasprcToken)
    oauth2_client_settings: OAuth2ClientSettings = Field(
        default_factory=OAuth2ClientSettings, alias="oauth2ClientSettings"
    )
    is_local_creds: bool = Field(default=False, alias="isLocalCreds")

    def to_json(self) -> str:
        """Serialize with file key names and two-space indentation.

        Unset string fields are left out. ``expiry_date`` is always written,
        as null when unknown.
        """
        data = self.model_dump(by_alias=True, exclude_none=True)
        data["token"]["expiry_date"] = self.token.expiry_date
        return json.dumps(data, indent=2)
