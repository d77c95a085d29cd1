"""Browser page and the word card fragment it loads."""

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from app.api.v1.dependencies import get_word_client
from app.client.word_client import WordClient, render_page, render_word_card

router = APIRouter()


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
def index() -> str:
    return render_page()


@router.get("/word-card", response_class=HTMLResponse, name="word_card")
def word_card(client: WordClient = Depends(get_word_client)) -> str:
    """Fetch a fresh pair and return the fragment swapped into the word container."""
    return render_word_card(client.fetch_word())
