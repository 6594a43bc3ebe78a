"""Tests for clasp_secrets.utils.encoding."""

import base64

import pytest

from clasp_secrets.exceptions import CredentialFormatError
from clasp_secrets.utils.encoding import decode_from_base64, encode_to_base64


class TestEncodeToBase64:
    def test_encodes_utf8_text(self):
        """Should match the standard base64 encoding of the UTF-8 bytes."""
        text = '{"token": {"access_token": "ya29.é"}}'

        assert encode_to_base64(text) == base64.b64encode(text.encode("utf-8")).decode("ascii")

    def test_empty_string(self):
        assert encode_to_base64("") == ""

    def test_encodes_raw_bytes(self):
        """Bytes should be encoded as-is, including carriage returns."""
        assert encode_to_base64(b'{"token": {}}\r\n') == "eyJ0b2tlbiI6IHt9fQ0K"


class TestDecodeFromBase64:
    def test_decodes_payload(self):
        """Should decode an encoded payload back to the original text."""
        assert decode_from_base64("eyJhIjogMX0=") == '{"a": 1}'

    def test_ignores_surrounding_whitespace(self):
        """Trailing newlines from secret stores should be tolerated."""
        assert decode_from_base64("eyJhIjogMX0=\n") == '{"a": 1}'

    def test_invalid_base64_raises(self):
        """Non-base64 input should raise CredentialFormatError."""
        with pytest.raises(CredentialFormatError, match="not valid base64"):
            decode_from_base64("not base64!!")

    def test_non_utf8_raises(self):
        """Binary payloads that are not UTF-8 should raise CredentialFormatError."""
        payload = base64.b64encode(b"\xff\xfe\xfd").decode("ascii")

        with pytest.raises(CredentialFormatError):
            decode_from_base64(payload)
