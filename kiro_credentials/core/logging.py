"""
Logging setup for the credential diagnostic script.

Library modules only create module-level loggers; handlers are installed by
whichever entry point runs them.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

from kiro_credentials.core.config import get_settings

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def configure_logging(
    level: Optional[str] = None, stream: Optional[TextIO] = None
) -> None:
    """Configure root logging, defaulting the level to ``KIRO_CLI_LOG_LEVEL``.

    Logs go to stderr so the script's stdout stays machine-readable.
    """
    logging.basicConfig(
        level=(level or get_settings().log_level).upper(),
        format=LOG_FORMAT,
        stream=stream or sys.stderr,
    )


__all__ = ["LOG_FORMAT", "configure_logging"]
