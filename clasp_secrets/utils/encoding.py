"""Base64 helpers for credential payloads."""

import base64
import binascii

from clasp_secrets.exceptions import CredentialFormatError


def encode_to_base64(content: str | bytes) -> str:
    """Encode raw bytes, or UTF-8 text, as a base64 string."""
    if isinstance(content, str):
        content = content.encode("utf-8")
    return base64.b64encode(content).decode("ascii")


def decode_from_base64(encoded: str) -> str:
    """Decode a base64 string back to UTF-8 text.

    Raises:
        CredentialFormatError: If the payload is not valid base64 or not UTF-8
    """
    try:
        return base64.b64decode(encoded.strip(), validate=True).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError) as e:
        raise CredentialFormatError(
            "Payload is not valid base64-encoded UTF-8 text",
            suggestion="Check that the secret was created with 'clasp-secrets upload'",
        ) from e
