"""Credential data models."""

from .credentials import (
    AUTH_METHOD_BUILDER_ID,
    AUTH_METHOD_SOCIAL,
    PROVIDER_KIRO_CLI,
    NormalizedCredential,
    RawRegistrationRecord,
    RawTokenRecord,
)

__all__ = [
    "AUTH_METHOD_BUILDER_ID",
    "AUTH_METHOD_SOCIAL",
    "NormalizedCredential",
    "PROVIDER_KIRO_CLI",
    "RawRegistrationRecord",
    "RawTokenRecord",
]
