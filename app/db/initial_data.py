import logging
from typing import Iterable, Mapping

from sqlalchemy.orm import Session

from app.crud import vocabulary_crud
from app.schemas.vocabulary_schema import VocabularyEntryCreate

logger = logging.getLogger(__name__)

DEFAULT_VOCABULARY = [
    ("Hello", "Hallo"),
    ("World", "Welt"),
    ("Goodbye", "Auf Wiedersehen"),
    ("cat", "Katze"),
    ("dog", "Hund"),
    ("house", "Haus"),
    ("tree", "Baum"),
    ("water", "Wasser"),
    ("bread", "Brot"),
    ("book", "Buch"),
    ("friend", "Freund"),
    ("school", "Schule"),
    ("thank you", "danke"),
    ("please", "bitte"),
    ("morning", "Morgen"),
    ("evening", "Abend"),
]


def seed_vocabulary(db: Session, entries: Iterable[tuple[str, str] | Mapping[str, str]] | None = None) -> int:
    """Insère les paires manquantes et renvoie le nombre d'entrées ajoutées.

    Each pair goes through ``VocabularyEntryCreate`` first, so blank words are
    rejected with a ``ValidationError`` before anything is written. Pairs that
    already exist (same English and German text) are skipped.
    """
    inserted = 0
    for raw in entries if entries is not None else DEFAULT_VOCABULARY:
        if isinstance(raw, Mapping):
            pair = VocabularyEntryCreate.model_validate(raw)
        else:
            english_word, german_word = raw
            pair = VocabularyEntryCreate(english_word=english_word, german_word=german_word)

        if vocabulary_crud.find_entry(db, pair.english_word, pair.german_word):
            continue

        vocabulary_crud.create_entry(db, pair.english_word, pair.german_word)
        inserted += 1

    db.commit()
    logger.info("%s entrée(s) de vocabulaire ajoutée(s).", inserted)
    return inserted
