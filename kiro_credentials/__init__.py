"""Resolve kiro-cli credentials from its local SQLite store."""

from kiro_credentials.models import NormalizedCredential
from kiro_credentials.services import load_cli_credentials

__all__ = ["NormalizedCredential", "load_cli_credentials"]
