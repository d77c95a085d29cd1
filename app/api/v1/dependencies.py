import logging
from functools import lru_cache

import requests

from app.client.word_client import WordClient
from app.db.session import get_db

log = logging.getLogger(__name__)

__all__ = ("get_db", "get_http_session", "get_word_client")


@lru_cache(maxsize=1)
def get_http_session() -> requests.Session:
    """Connection pool to the Word Service, shared by every request."""
    log.info("Session HTTP créée pour le Word Client")
    return requests.Session()


def get_word_client() -> WordClient:
    # One client per request: browsers never share card state or sequencing.
    return WordClient(session=get_http_session())
