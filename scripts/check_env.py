"""Show which database and Word Service the application will talk to.

Usage::

    python -m scripts.check_env

Exits with status 1 and lists the offending variables when the environment
does not validate.
"""

from __future__ import annotations

import sys
from pathlib import Path

from pydantic import ValidationError

sys.path.append(str(Path(__file__).resolve().parents[1]))
from app.client.word_client import WORD_PATH  # noqa: E402
from app.core.config import Settings, describe_settings_errors  # noqa: E402


def build_report(current: Settings) -> list[str]:
    return [
        f"Database:      {current.masked_database_uri}",
        f"Word Service:  {current.WORD_API_BASE_URL}{WORD_PATH}",
        f"Discard stale: {current.WORD_CLIENT_DISCARD_STALE}",
        f"Environment:   {current.ENVIRONMENT}",
    ]


def main() -> int:
    try:
        current = Settings()
    except ValidationError as exc:
        print("Environment validation failed:", file=sys.stderr)
        for line in describe_settings_errors(exc):
            print(f"  - {line}", file=sys.stderr)
        return 1

    print("Environment variables OK.")
    for line in build_report(current):
        print(f"- {line}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
