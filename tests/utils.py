"""Utility helpers for test factories."""

from __future__ import annotations

import json

import requests

from app.models.vocabulary_entry_model import VocabularyEntry


def create_entry(db, english_word: str = "cat", german_word: str = "Katze", **kwargs) -> VocabularyEntry:
    entry = VocabularyEntry(english_word=english_word, german_word=german_word, **kwargs)
    db.add(entry)
    db.commit()
    db.refresh(entry)
    return entry


def make_response(status_code: int = 200, payload=None, body: bytes | None = None) -> requests.Response:
    response = requests.Response()
    response.status_code = status_code
    response._content = body if body is not None else json.dumps(payload).encode("utf-8")
    response.headers["Content-Type"] = "application/json"
    return response
