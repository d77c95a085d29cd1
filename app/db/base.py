"""Import every SQLAlchemy model so ``Base.metadata`` knows the full schema."""

from app.db.base_class import Base
from app.models.vocabulary_entry_model import VocabularyEntry

__all__ = (
    "Base",
    "VocabularyEntry",
)
