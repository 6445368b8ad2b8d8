"""Report which kiro-cli credential would be used, without printing secrets.

Example usages::

    # Probe the default kiro-cli / Amazon Q locations.
    python -m scripts.check_credentials

    # Inspect a specific store and emit machine-readable output.
    python -m scripts.check_credentials --db-path ~/backup/data.sqlite3 --json
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import Any, Dict

from kiro_credentials.core.config import get_settings
from kiro_credentials.core.logging import configure_logging
from kiro_credentials.models import NormalizedCredential
from kiro_credentials.services import (
    HomeDirectoryUnavailable,
    NoValidToken,
    StoreNotFound,
    StoreOpenFailed,
    load_cli_credentials,
)

EXIT_OK = 0
EXIT_NO_TOKEN = 2
EXIT_STORE_ERROR = 3
EXIT_HOME_ERROR = 4


def _summarize(credential: NormalizedCredential) -> Dict[str, Any]:
    """Return the non-secret fields worth showing to an operator."""
    return {
        "provider": credential.provider,
        "auth_method": credential.auth_method,
        "region": credential.region,
        "email": credential.email or None,
        "profile_arn": credential.profile_arn or None,
        "expires_at": credential.expires_at or None,
        "expired": credential.is_expired(),
        "source_key": credential.source_key,
        "has_client_registration": credential.client_id is not None,
    }


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Resolve kiro-cli credentials and print a redacted summary."
    )
    parser.add_argument(
        "--db-path",
        default=None,
        help="Path to the credential store (default: probe known locations).",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (default: KIRO_CLI_LOG_LEVEL or INFO).",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Emit the summary as JSON.",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    settings = get_settings()
    configure_logging(args.log_level)

    try:
        credential = load_cli_credentials(args.db_path, settings=settings)
    except HomeDirectoryUnavailable as exc:
        print(str(exc), file=sys.stderr)
        return EXIT_HOME_ERROR
    except (StoreNotFound, StoreOpenFailed) as exc:
        print(str(exc), file=sys.stderr)
        return EXIT_STORE_ERROR
    except NoValidToken as exc:
        print(
            f"{exc}\nSign in again with kiro-cli to create a fresh token.",
            file=sys.stderr,
        )
        return EXIT_NO_TOKEN

    summary = _summarize(credential)
    if args.json:
        print(json.dumps(summary, indent=2))
    else:
        for key, value in summary.items():
            print(f"{key:>24}: {value}")
    return EXIT_OK


if __name__ == "__main__":  # pragma: no cover - script entry point
    sys.exit(main())
