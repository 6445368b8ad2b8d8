"""Locate the credential store and resolve the credential it holds."""

from __future__ import annotations

from typing import Optional

from kiro_credentials.core.config import CredentialStoreSettings, get_settings
from kiro_credentials.models.credentials import NormalizedCredential
from kiro_credentials.services.credential_resolver import CredentialResolver
from kiro_credentials.services.store_locator import HomeProvider, StoreLocator, current_home


def load_cli_credentials(
    db_path: Optional[str] = None,
    *,
    settings: Optional[CredentialStoreSettings] = None,
    home_provider: HomeProvider = current_home,
) -> NormalizedCredential:
    """Resolve kiro-cli credentials from ``db_path`` or the configured defaults."""
    settings = settings or get_settings()
    locator = StoreLocator(
        candidates=settings.default_store_paths,
        home_provider=home_provider,
    )
    store_path = locator.resolve_store_path(db_path or settings.db_path)
    resolver = CredentialResolver.from_settings(settings)
    return resolver.resolve_credential(store_path)


__all__ = ["load_cli_credentials"]
