"""Shared helpers: subprocess execution, base64 encoding and logging setup."""

from clasp_secrets.utils.encoding import decode_from_base64, encode_to_base64
from clasp_secrets.utils.process import CommandResult, run_command, run_gh

__all__ = [
    "CommandResult",
    "run_command",
    "run_gh",
    "encode_to_base64",
    "decode_from_base64",
]
