"""Service layer exports."""

from .credential_resolver import CredentialResolver
from .errors import (
    CredentialResolutionError,
    HomeDirectoryUnavailable,
    NoValidToken,
    StoreNotFound,
    StoreOpenFailed,
)
from .jwt_claims import extract_email_from_jwt
from .loader import load_cli_credentials
from .store_locator import StoreLocator

__all__ = [
    "CredentialResolutionError",
    "CredentialResolver",
    "HomeDirectoryUnavailable",
    "NoValidToken",
    "StoreLocator",
    "StoreNotFound",
    "StoreOpenFailed",
    "extract_email_from_jwt",
    "load_cli_credentials",
]
