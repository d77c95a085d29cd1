"""Create the vocabulary table if needed and fill it with word pairs.

Usage::

    python -m scripts.seed_vocabulary
    python -m scripts.seed_vocabulary --file words.jsonl

Each line of the JSONL file holds ``{"english_word": ..., "german_word": ...}``.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parents[1]))
from app.db.base import Base  # noqa: E402
from app.db import session as db_session  # noqa: E402
from app.db.initial_data import seed_vocabulary  # noqa: E402

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def load_jsonl(path: Path) -> list[dict]:
    entries = []
    with open(path, "r", encoding="utf-8") as f:
        for line_number, line in enumerate(f, start=1):
            line = line.strip()
            if not line:
                continue
            try:
                entries.append(json.loads(line))
            except json.JSONDecodeError as exc:
                raise SystemExit(f"{path}:{line_number}: JSON invalide ({exc})") from exc
    return entries


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Seed the vocabulary table.")
    parser.add_argument("--file", type=Path, help="JSONL file of word pairs (defaults to the built-in list)")
    args = parser.parse_args(argv)

    entries = None
    if args.file:
        if not args.file.exists():
            logger.error("❌ Fichier non trouvé : %s", args.file)
            return 1
        entries = load_jsonl(args.file)

    logger.info("Vérification et création de la table vocabulary...")
    Base.metadata.create_all(bind=db_session.engine)

    with db_session.SessionLocal() as db:
        inserted = seed_vocabulary(db, entries)

    logger.info("✅ Seeding terminé (%s nouvelle(s) entrée(s)).", inserted)
    return 0


if __name__ == "__main__":
    sys.exit(main())
