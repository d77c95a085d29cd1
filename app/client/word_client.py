"""Word Client: fetch a random word pair and render the word card.

Every trigger (page load, "Next Word" click) goes through
:meth:`WordClient.fetch_word`, which walks the ``loading -> success | error``
state machine and never raises.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from enum import Enum
from typing import Optional

import requests

from app.client import templates
from app.core.config import settings

logger = logging.getLogger(__name__)

WORD_PATH = "/api/get-word"

SERVER_ERROR_MESSAGE = "Failed to fetch word. Server error."
CONNECTION_ERROR_MESSAGE = "Failed to load words. Please check your connection."


class CardStatus(str, Enum):
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class WordCardState:
    status: CardStatus
    english_word: Optional[str] = None
    german_word: Optional[str] = None
    message: Optional[str] = None

    @classmethod
    def loading(cls) -> "WordCardState":
        return cls(status=CardStatus.LOADING)

    @classmethod
    def success(cls, english_word: str, german_word: str) -> "WordCardState":
        return cls(status=CardStatus.SUCCESS, english_word=english_word, german_word=german_word)

    @classmethod
    def error(cls, message: str) -> "WordCardState":
        return cls(status=CardStatus.ERROR, message=message)


def render_word_card(state: WordCardState) -> str:
    """Render *state* as the HTML fragment placed inside the word container."""
    if state.status is CardStatus.LOADING:
        return templates.LOADING_HTML.render()
    if state.status is CardStatus.ERROR:
        return templates.ERROR_HTML.render(message=state.message)
    return templates.WORD_HTML.render(
        english_word=state.english_word,
        german_word=state.german_word,
    )


def render_page(card_url: str = "/word-card", title: str = "Language App") -> str:
    loading = render_word_card(WordCardState.loading())
    return templates.PAGE_HTML.render(
        title=title,
        card_url=card_url,
        loading=loading,
        connection_error=render_word_card(WordCardState.error(CONNECTION_ERROR_MESSAGE)),
        server_error=render_word_card(WordCardState.error(SERVER_ERROR_MESSAGE)),
    )


class WordClient:
    """Fetch word pairs from the Word Service.

    ``state`` holds the last completed card; it is ``LOADING`` only until the
    first response comes back. Rapid triggers are not cancelled: without
    ``discard_stale`` the response that arrives last wins, even if it belongs
    to an older request. With ``discard_stale`` a response is dropped when a
    newer request has already completed, and the caller gets that newer card.
    """

    def __init__(
        self,
        base_url: str | None = None,
        session: requests.Session | None = None,
        discard_stale: bool | None = None,
    ):
        self.base_url = (base_url or settings.WORD_API_BASE_URL).rstrip("/")
        self.session = session or requests.Session()
        if discard_stale is None:
            discard_stale = settings.WORD_CLIENT_DISCARD_STALE
        self.discard_stale = discard_stale
        self.state = WordCardState.loading()
        self._lock = threading.Lock()
        self._issued = 0
        self._applied = 0

    @property
    def word_url(self) -> str:
        return f"{self.base_url}{WORD_PATH}"

    def fetch_word(self) -> WordCardState:
        """Run one trigger and return the card to display for it.

        The returned state is never ``LOADING``.
        """
        with self._lock:
            self._issued += 1
            request_id = self._issued

        outcome = self._request_word()

        with self._lock:
            if self.discard_stale and request_id < self._applied:
                logger.debug("Réponse obsolète ignorée (requête %s < %s)", request_id, self._applied)
                return self.state
            self._applied = request_id
            self.state = outcome
            return outcome

    def _request_word(self) -> WordCardState:
        try:
            # Pas de timeout : une requête bloquée reste bloquée.
            response = self.session.get(self.word_url)
            data = response.json()
        except (requests.RequestException, ValueError) as exc:
            logger.error("Network or parsing error: %s", exc)
            return WordCardState.error(CONNECTION_ERROR_MESSAGE)

        if not response.ok:
            return WordCardState.error(SERVER_ERROR_MESSAGE)

        if not isinstance(data, dict):
            logger.error("Network or parsing error: unexpected payload %r", data)
            return WordCardState.error(CONNECTION_ERROR_MESSAGE)

        if data.get("message"):
            return WordCardState.error(str(data["message"]))

        return WordCardState.success(
            english_word=str(data.get("english_word", "")),
            german_word=str(data.get("german_word", "")),
        )
