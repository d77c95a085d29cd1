"""Database engine and session utilities.

A single pooled engine is created per process. Request handlers never open
connections themselves: they receive a session from :func:`get_db`, which
returns the underlying connection to the pool once the request is done,
whatever the outcome.
"""

from __future__ import annotations

import logging
from time import perf_counter
from typing import Any, Iterator

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.engine.url import URL, make_url
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.config import settings

logger = logging.getLogger(__name__)


def _engine_options(url: URL) -> dict[str, Any]:
    """Return ``create_engine`` keyword arguments suited to *url*."""

    options: dict[str, Any] = {"pool_pre_ping": True}

    if url.get_backend_name() == "sqlite":
        options["connect_args"] = {"check_same_thread": False}
        if url.database in (None, "", ":memory:"):
            # Every pooled connection would otherwise see its own empty database.
            options["poolclass"] = StaticPool

    return options


# These globals are populated by ``configure_database``.
engine: Engine
SessionLocal: sessionmaker


def _install_slow_query_logger(target: Engine) -> None:
    """Attach callbacks that warn when queries exceed the configured budget."""

    threshold_ms = max(getattr(settings, "SQLALCHEMY_SLOW_QUERY_THRESHOLD_MS", 0) or 0, 0)
    if threshold_ms == 0:
        return

    marker = "_vocab_slow_query_hook"
    if getattr(target, marker, False):  # pragma: no cover - defensive guard
        return

    setattr(target, marker, True)

    def _before_cursor_execute(conn, cursor, statement, parameters, context, executemany):  # type: ignore[override]
        context._vocab_query_start = perf_counter()

    def _after_cursor_execute(conn, cursor, statement, parameters, context, executemany):  # type: ignore[override]
        start = getattr(context, "_vocab_query_start", None)
        if start is None:
            return

        elapsed_ms = (perf_counter() - start) * 1000.0
        if elapsed_ms < threshold_ms:
            return

        snippet = " ".join(statement.split()) if isinstance(statement, str) else str(statement)
        if len(snippet) > 200:
            snippet = snippet[:197] + "..."

        logger.warning("SQL lente (%.1f ms) - %s", elapsed_ms, snippet)

    event.listen(target, "before_cursor_execute", _before_cursor_execute)
    event.listen(target, "after_cursor_execute", _after_cursor_execute)


def configure_database(database_url: str | None = None) -> Engine:
    """Initialise the engine and the session factory.

    ``database_url`` defaults to the environment configuration. No connection
    is opened here: an unreachable database must only fail the requests that
    need it, never the application start-up.
    """

    global engine, SessionLocal

    url = make_url(str(database_url or settings.sqlalchemy_database_uri))
    logger.info("Configuration de la base de données: %s", url.render_as_string(hide_password=True))

    candidate_engine = create_engine(url, **_engine_options(url))
    _install_slow_query_logger(candidate_engine)

    engine = candidate_engine
    SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    return engine


# Initialise the engine at import time so the rest of the application can use
# it immediately.
configure_database()


# Dépendance FastAPI : une session par requête, toujours refermée.
def get_db() -> Iterator[Session]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
