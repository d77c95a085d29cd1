from __future__ import annotations

import logging
import random
from dataclasses import dataclass

from sqlalchemy.exc import InterfaceError, OperationalError
from sqlalchemy.orm import Session

from app.crud import vocabulary_crud
from app.schemas.vocabulary_schema import MessageOut, VocabularyEntryOut

logger = logging.getLogger(__name__)

NO_DATA_MESSAGE = "No data found"
CONNECTION_ERROR_MESSAGE = "Database connection error."


@dataclass(slots=True)
class DatabaseConnectionError(Exception):
    """Raised when the vocabulary store cannot be reached."""

    detail: str
    status_code: int = 500

    def __str__(self) -> str:  # pragma: no cover - human readable message
        return self.detail


class WordService:
    """Serve random vocabulary entries from the store."""

    def __init__(self, db: Session, rng: random.Random | None = None):
        self.db = db
        self.rng = rng

    def get_random_word(self) -> VocabularyEntryOut | MessageOut:
        """Return one random entry, or a ``message`` payload when the store is empty.

        An empty store is a regular answer, not an error. Only an unreachable
        store raises :class:`DatabaseConnectionError`; its details are logged
        here and never forwarded to the caller.
        """
        try:
            entry = vocabulary_crud.get_random_entry(self.db, rng=self.rng)
        except (OperationalError, InterfaceError) as exc:
            logger.error("Database connection failed: %s", exc.orig if exc.orig is not None else exc)
            raise DatabaseConnectionError(str(exc)) from exc

        if entry is None:
            return MessageOut(message=NO_DATA_MESSAGE)
        return VocabularyEntryOut.model_validate(entry)
