# Fichier: app/models/vocabulary_entry_model.py

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column
from app.db.base_class import Base


class VocabularyEntry(Base):
    __tablename__ = "vocabulary"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)

    english_word: Mapped[str] = mapped_column(String(255), nullable=False)  # ex: "cat"
    german_word: Mapped[str] = mapped_column(String(255), nullable=False)  # ex: "Katze"

    def __repr__(self) -> str:
        return f"<VocabularyEntry id={self.id} {self.english_word!r}={self.german_word!r}>"
