"""
Resolve a normalized credential from the kiro-cli SQLite store.

Token and device registration records are looked up independently, each
walking its own key priority list. Only a missing store or a missing token is
fatal; unreadable or malformed entries are skipped.
"""

from __future__ import annotations

import logging
import sqlite3
from pathlib import Path
from typing import Callable, Optional, Sequence, Tuple, Type, TypeVar

from pydantic import BaseModel, ValidationError

from kiro_credentials.clients import SQLiteKeyValueStore
from kiro_credentials.core.config import (
    DEFAULT_OIDC_TOKEN_KEYS,
    DEFAULT_REGISTRATION_KEYS,
    DEFAULT_TOKEN_KEYS,
    CredentialStoreSettings,
)
from kiro_credentials.models.credentials import (
    AUTH_METHOD_BUILDER_ID,
    AUTH_METHOD_SOCIAL,
    PROVIDER_KIRO_CLI,
    NormalizedCredential,
    RawRegistrationRecord,
    RawTokenRecord,
)
from kiro_credentials.services.errors import NoValidToken, StoreNotFound, StoreOpenFailed
from kiro_credentials.services.jwt_claims import extract_email_from_jwt

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)
EmailExtractor = Callable[[str], str]


class CredentialResolver:
    """Build a :class:`NormalizedCredential` from one credential store."""

    def __init__(
        self,
        *,
        token_keys: Sequence[str] = DEFAULT_TOKEN_KEYS,
        registration_keys: Sequence[str] = DEFAULT_REGISTRATION_KEYS,
        oidc_token_keys: Sequence[str] = DEFAULT_OIDC_TOKEN_KEYS,
        default_region: str = "us-east-1",
        table_name: str = "auth_kv",
        email_extractor: Optional[EmailExtractor] = extract_email_from_jwt,
    ) -> None:
        if not token_keys:
            raise ValueError("At least one token key is required.")
        self._token_keys = tuple(token_keys)
        self._registration_keys = tuple(registration_keys)
        self._oidc_token_keys = frozenset(oidc_token_keys)
        self._default_region = default_region
        self._table_name = table_name
        self._email_extractor = email_extractor

    @classmethod
    def from_settings(
        cls,
        settings: CredentialStoreSettings,
        *,
        email_extractor: Optional[EmailExtractor] = extract_email_from_jwt,
    ) -> "CredentialResolver":
        return cls(
            token_keys=settings.token_keys,
            registration_keys=settings.registration_keys,
            oidc_token_keys=settings.oidc_token_keys,
            default_region=settings.default_region,
            table_name=settings.table_name,
            email_extractor=email_extractor,
        )

    def resolve_credential(self, store_path: str | Path) -> NormalizedCredential:
        """Read the store at ``store_path`` and return the merged credential."""
        path = Path(store_path)
        try:
            exists = path.exists()
            is_file = path.is_file()
        except OSError as exc:
            raise StoreOpenFailed(path, str(exc)) from exc
        if not exists:
            raise StoreNotFound(path)
        if not is_file:
            raise StoreOpenFailed(path, "not a regular file")

        try:
            store = SQLiteKeyValueStore(path, table=self._table_name)
        except sqlite3.Error as exc:
            raise StoreOpenFailed(path, str(exc)) from exc

        with store:
            token_key, token = self._lookup(
                store, self._token_keys, RawTokenRecord, "token"
            )
            if token is None:
                raise NoValidToken(path, self._token_keys)
            _, registration = self._lookup(
                store,
                self._registration_keys,
                RawRegistrationRecord,
                "device registration",
            )

        credential = NormalizedCredential(
            access_token=token.access_token,
            refresh_token=token.refresh_token,
            profile_arn=token.profile_arn,
            expires_at=token.expires_at,
            auth_method=self._auth_method(token_key, registration),
            provider=PROVIDER_KIRO_CLI,
            region=self._region(token, registration),
            client_id=registration.client_id if registration else None,
            client_secret=registration.client_secret if registration else None,
            email=self._email(token.access_token),
            source_key=token_key,
        )

        logger.info("Successfully loaded kiro-cli credentials from: %s", path)
        return credential

    def _lookup(
        self,
        store: SQLiteKeyValueStore,
        keys: Sequence[str],
        model: Type[RecordT],
        label: str,
    ) -> Tuple[Optional[str], Optional[RecordT]]:
        """Return the first key whose value parses as ``model``."""
        for key in keys:
            try:
                value = store.get_value(key)
            except sqlite3.Error as exc:
                logger.debug("Error reading %s key %s: %s", label, key, exc)
                continue
            if value is None:
                continue

            try:
                record = model.model_validate_json(value)
            except ValidationError as exc:
                logger.debug(
                    "Error parsing %s data for key %s: %d validation error(s)",
                    label,
                    key,
                    exc.error_count(),
                )
                continue
            except UnicodeDecodeError as exc:
                logger.debug(
                    "Error decoding %s data for key %s: %s", label, key, exc.reason
                )
                continue

            logger.debug("Loaded %s from SQLite key: %s", label, key)
            return key, record

        return None, None

    def _auth_method(
        self,
        token_key: Optional[str],
        registration: Optional[RawRegistrationRecord],
    ) -> str:
        # Registrations only apply to device-flow tokens.
        if registration is not None and token_key in self._oidc_token_keys:
            return AUTH_METHOD_BUILDER_ID
        return AUTH_METHOD_SOCIAL

    def _region(
        self,
        token: RawTokenRecord,
        registration: Optional[RawRegistrationRecord],
    ) -> str:
        if registration is not None and registration.region:
            return registration.region
        if token.region:
            return token.region
        return self._default_region

    def _email(self, access_token: str) -> str:
        if self._email_extractor is None:
            return ""
        try:
            return self._email_extractor(access_token) or ""
        except Exception as exc:  # pragma: no cover - defensive
            logger.debug("Email extraction failed: %s", exc)
            return ""


__all__ = ["CredentialResolver", "EmailExtractor"]
