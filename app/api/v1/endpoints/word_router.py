# app/api/v1/endpoints/word_router.py

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.api.v1.dependencies import get_db
from app.schemas.vocabulary_schema import MessageOut, VocabularyEntryOut
from app.services.word_service import WordService

router = APIRouter()


@router.get(
    "/get-word",
    response_model=VocabularyEntryOut | MessageOut,
    summary="Random vocabulary entry",
)
def get_word(db: Session = Depends(get_db)):
    """
    Renvoie une paire anglais/allemand tirée au hasard dans toute la table.
    Une table vide donne `{"message": "No data found"}` avec un statut 200.
    """
    return WordService(db).get_random_word()


# Ancienne URL du backend PHP, conservée pour les clients existants.
legacy_router = APIRouter()
legacy_router.add_api_route(
    "/get-word.php",
    get_word,
    methods=["GET"],
    response_model=VocabularyEntryOut | MessageOut,
    include_in_schema=False,
)
