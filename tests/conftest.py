"""Pytest configuration shared across the suite."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable, Dict

try:
    from . import _bootstrap  # noqa: F401
except Exception:  # pragma: no cover - fallback for direct execution
    import _bootstrap  # type: ignore # noqa: F401

import jwt
import pytest

from kiro_credentials.clients import SQLiteKeyValueStore
from kiro_credentials.core.config import get_settings

StoreFactory = Callable[..., Path]

_SIGNING_KEY = "unit-test-signing-key-not-for-production"


@pytest.fixture(autouse=True)
def _reset_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def make_store(tmp_path: Path) -> StoreFactory:
    """Build a kiro-cli style store; dicts are JSON encoded, bytes stored as BLOBs."""

    def _make(
        entries: Dict[str, Any] | None = None,
        *,
        name: str = "data.sqlite3",
        table: str = "auth_kv",
    ) -> Path:
        path = tmp_path / name
        with SQLiteKeyValueStore(path, table=table, read_only=False) as store:
            for key, value in (entries or {}).items():
                raw = value if isinstance(value, (str, bytes)) else json.dumps(value)
                store.put_value(key, raw)
        return path

    return _make


@pytest.fixture
def make_jwt() -> Callable[..., str]:
    def _make(**claims: Any) -> str:
        return jwt.encode(claims, _SIGNING_KEY, algorithm="HS256")

    return _make
