# Fichier: app/crud/vocabulary_crud.py

import random
from typing import Optional

from sqlalchemy.orm import Session

from app.models.vocabulary_entry_model import VocabularyEntry


def count_entries(db: Session) -> int:
    """Compte les entrées du vocabulaire."""
    return db.query(VocabularyEntry).count()


def get_entry_at(db: Session, offset: int) -> Optional[VocabularyEntry]:
    """Renvoie l'entrée située à ``offset`` dans l'ordre des identifiants."""
    return db.query(VocabularyEntry)\
             .order_by(VocabularyEntry.id)\
             .offset(offset)\
             .limit(1)\
             .first()


def get_random_entry(db: Session, rng: random.Random | None = None) -> Optional[VocabularyEntry]:
    """Pick one entry uniformly at random over the whole table.

    Returns ``None`` when the table is empty, or when it shrank between the
    count and the fetch.
    """
    total = count_entries(db)
    if total == 0:
        return None
    offset = (rng or random).randrange(total)
    return get_entry_at(db, offset)


def find_entry(db: Session, english_word: str, german_word: str) -> Optional[VocabularyEntry]:
    return db.query(VocabularyEntry)\
             .filter(VocabularyEntry.english_word == english_word,
                     VocabularyEntry.german_word == german_word)\
             .first()


def create_entry(db: Session, english_word: str, german_word: str) -> VocabularyEntry:
    """Ajoute une entrée sans valider la transaction (l'appelant fait le commit)."""
    db_entry = VocabularyEntry(english_word=english_word, german_word=german_word)
    db.add(db_entry)
    db.flush([db_entry])
    return db_entry
