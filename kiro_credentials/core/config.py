"""
Settings for locating and reading the kiro-cli credential store.

Key priority lists live here rather than in the resolver so new credential
sources can be supported by configuration alone.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Annotated, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

DEFAULT_TOKEN_KEYS: tuple[str, ...] = (
    "kirocli:social:token",
    "kirocli:odic:token",
    "codewhisperer:odic:token",
)
DEFAULT_REGISTRATION_KEYS: tuple[str, ...] = (
    "kirocli:odic:device-registration",
    "codewhisperer:odic:device-registration",
)
DEFAULT_OIDC_TOKEN_KEYS: tuple[str, ...] = (
    "kirocli:odic:token",
    "codewhisperer:odic:token",
)
DEFAULT_STORE_PATHS: tuple[str, ...] = (
    ".local/share/kiro-cli/data.sqlite3",
    ".local/share/amazon-q/data.sqlite3",
)

KeyList = Annotated[tuple[str, ...], NoDecode]


class CredentialStoreSettings(BaseSettings):
    """Configuration for the credential store and its lookup order."""

    model_config = SettingsConfigDict(
        env_prefix="KIRO_CLI_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    db_path: Optional[str] = Field(
        None,
        description="Explicit store location; '~' is expanded. Probes defaults when unset.",
    )
    default_store_paths: KeyList = Field(
        DEFAULT_STORE_PATHS,
        description="Store locations relative to the home directory, in probe order.",
    )
    table_name: str = Field("auth_kv")
    token_keys: KeyList = Field(DEFAULT_TOKEN_KEYS)
    registration_keys: KeyList = Field(DEFAULT_REGISTRATION_KEYS)
    oidc_token_keys: KeyList = Field(
        DEFAULT_OIDC_TOKEN_KEYS,
        description="Token keys written by device-flow logins.",
    )
    default_region: str = Field("us-east-1")
    log_level: str = Field("INFO")

    @field_validator(
        "default_store_paths",
        "token_keys",
        "registration_keys",
        "oidc_token_keys",
        mode="before",
    )
    @classmethod
    def _split_keys(cls, value: str | tuple[str, ...] | list[str]) -> tuple[str, ...]:
        """Support providing key lists as a comma-separated string."""
        if isinstance(value, tuple):
            return value
        if isinstance(value, list):
            return tuple(value)
        return tuple(item.strip() for item in value.split(",") if item.strip())


@lru_cache()
def get_settings() -> CredentialStoreSettings:
    """Return a cached settings object."""
    return CredentialStoreSettings()


__all__ = [
    "CredentialStoreSettings",
    "DEFAULT_OIDC_TOKEN_KEYS",
    "DEFAULT_REGISTRATION_KEYS",
    "DEFAULT_STORE_PATHS",
    "DEFAULT_TOKEN_KEYS",
    "get_settings",
]
