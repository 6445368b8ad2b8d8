"""
Credential records read from the store and the normalized result.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

AUTH_METHOD_SOCIAL = "social"
AUTH_METHOD_BUILDER_ID = "builder-id"
PROVIDER_KIRO_CLI = "kiro-cli"

_REFRESH_WINDOW = timedelta(minutes=5)


def _none_to_empty(value: Any) -> Any:
    return "" if value is None else value


class RawTokenRecord(BaseModel):
    """Token payload as serialized by kiro-cli under a ``*:token`` key."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    access_token: str = Field(..., repr=False)
    refresh_token: str = Field("", repr=False)
    profile_arn: str = ""
    expires_at: str = ""
    region: str = ""
    scopes: List[str] = Field(default_factory=list)

    @field_validator(
        "refresh_token", "profile_arn", "expires_at", "region", mode="before"
    )
    @classmethod
    def _null_strings(cls, value: Any) -> Any:
        return _none_to_empty(value)

    @field_validator("scopes", mode="before")
    @classmethod
    def _null_scopes(cls, value: Any) -> Any:
        return [] if value is None else value


class RawRegistrationRecord(BaseModel):
    """OIDC device registration stored next to builder-id tokens."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    client_id: str
    client_secret: str = Field("", repr=False)
    region: str = ""

    @field_validator("client_secret", "region", mode="before")
    @classmethod
    def _null_strings(cls, value: Any) -> Any:
        return _none_to_empty(value)


class NormalizedCredential(BaseModel):
    """Provider-agnostic credential handed to downstream API clients."""

    model_config = ConfigDict(frozen=True)

    access_token: str = Field(..., repr=False)
    refresh_token: str = Field(..., repr=False)
    profile_arn: str = ""
    expires_at: str = ""
    auth_method: str = AUTH_METHOD_SOCIAL
    provider: str = PROVIDER_KIRO_CLI
    region: str
    client_id: Optional[str] = None
    client_secret: Optional[str] = Field(None, repr=False)
    email: str = ""
    source_key: Optional[str] = Field(
        None, description="Store key the token record was read from."
    )

    def expires_at_datetime(self) -> Optional[datetime]:
        """Parse ``expires_at`` as ISO-8601, assuming UTC for naive values."""
        if not self.expires_at:
            return None
        try:
            parsed = datetime.fromisoformat(self.expires_at.replace("Z", "+00:00"))
        except ValueError:
            return None
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=timezone.utc)
        return parsed

    def is_expired(
        self,
        now: Optional[datetime] = None,
        window: timedelta = _REFRESH_WINDOW,
    ) -> bool:
        """True when the token has expired or expires within ``window``.

        An unknown or unparseable expiry counts as expired.
        """
        expires = self.expires_at_datetime()
        if expires is None:
            return True
        current = now or datetime.now(timezone.utc)
        return expires <= current + window


__all__ = [
    "AUTH_METHOD_BUILDER_ID",
    "AUTH_METHOD_SOCIAL",
    "NormalizedCredential",
    "PROVIDER_KIRO_CLI",
    "RawRegistrationRecord",
    "RawTokenRecord",
]
