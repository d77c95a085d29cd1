# Fichier: app/schemas/vocabulary_schema.py

from pydantic import BaseModel, ConfigDict, Field


class VocabularyEntryCreate(BaseModel):
    """Pair validated before it is written by the seeding tools."""

    model_config = ConfigDict(str_strip_whitespace=True)

    english_word: str = Field(..., min_length=1, max_length=255)
    german_word: str = Field(..., min_length=1, max_length=255)


class VocabularyEntryOut(BaseModel):
    id: int
    english_word: str
    german_word: str

    class Config:
        from_attributes = True


class MessageOut(BaseModel):
    message: str
