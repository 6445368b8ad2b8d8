"""
Resolve the on-disk location of the kiro-cli credential store.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Optional, Sequence

from kiro_credentials.core.config import DEFAULT_STORE_PATHS
from kiro_credentials.services.errors import HomeDirectoryUnavailable

logger = logging.getLogger(__name__)

HomeProvider = Callable[[], Optional[Path]]


def current_home() -> Optional[Path]:
    """Return the invoking user's home directory, or ``None`` if unknown."""
    try:
        return Path.home()
    except (RuntimeError, KeyError):
        return None


class StoreLocator:
    """Pick the store path from an override or the known install locations."""

    def __init__(
        self,
        *,
        candidates: Sequence[str] = DEFAULT_STORE_PATHS,
        home_provider: HomeProvider = current_home,
    ) -> None:
        if not candidates:
            raise ValueError("At least one default store location is required.")
        self._candidates = tuple(candidates)
        self._home_provider = home_provider

    def _home(self) -> Path:
        home = self._home_provider()
        if home is None:
            raise HomeDirectoryUnavailable()
        return Path(home)

    def expand(self, path: str) -> Path:
        """Expand a leading ``~`` against the home directory."""
        if path == "~":
            return self._home()
        if path.startswith("~/"):
            return self._home() / path[2:]
        return Path(path)

    def resolve_store_path(self, candidate_override: Optional[str] = None) -> Path:
        """Return the store path to open.

        With no override, the first existing default location wins; when none
        exists the first default is returned so callers can report it.
        """
        if candidate_override:
            return self.expand(candidate_override)

        home = self._home()
        paths = [home / candidate for candidate in self._candidates]
        for path in paths:
            if path.exists():
                logger.debug("Found credential store at %s", path)
                return path

        logger.debug("No credential store found; defaulting to %s", paths[0])
        return paths[0]


__all__ = ["HomeProvider", "StoreLocator", "current_home"]
