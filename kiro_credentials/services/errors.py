"""Errors raised while locating or resolving stored credentials."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence


class CredentialResolutionError(Exception):
    """Base class for fatal credential resolution failures."""


class HomeDirectoryUnavailable(CredentialResolutionError):
    """Raised when the current user's home directory cannot be determined."""

    def __init__(self, message: str = "Failed to determine the home directory.") -> None:
        super().__init__(message)


class StoreNotFound(CredentialResolutionError):
    """Raised when the credential store file does not exist."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"kiro-cli database not found: {path}")


class StoreOpenFailed(CredentialResolutionError):
    """Raised when the credential store exists but cannot be opened."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"Failed to open database {path}: {reason}")


class NoValidToken(CredentialResolutionError):
    """Raised when none of the token keys yields a usable record."""

    def __init__(self, path: Path, attempted_keys: Sequence[str]) -> None:
        self.path = path
        self.attempted_keys = tuple(attempted_keys)
        super().__init__(
            "No valid token found in database "
            f"{path} (tried keys: {', '.join(self.attempted_keys)})"
        )


__all__ = [
    "CredentialResolutionError",
    "HomeDirectoryUnavailable",
    "NoValidToken",
    "StoreNotFound",
    "StoreOpenFailed",
]
