"""Configuration for clasp-secrets."""

from clasp_secrets.config.settings import ExportSettings

__all__ = ["ExportSettings"]
