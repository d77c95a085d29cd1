from unittest.mock import MagicMock

import pytest
from sqlalchemy import text
from sqlalchemy.engine.url import make_url
from sqlalchemy.exc import OperationalError
from sqlalchemy.pool import StaticPool

from app.core.config import settings
from app.db import session as session_module


@pytest.fixture(autouse=True)
def _restore_engine():
    yield
    session_module.configure_database()


def test_in_memory_sqlite_shares_one_connection():
    engine = session_module.configure_database("sqlite://")

    assert isinstance(engine.pool, StaticPool)
    assert session_module.SessionLocal.kw["bind"] is engine


def test_mysql_engine_options_only_enable_pre_ping():
    options = session_module._engine_options(make_url("mysql+pymysql://root@localhost/eng_deu_vocab"))
    assert options == {"pool_pre_ping": True}


def test_unreachable_database_does_not_fail_configuration(tmp_path):
    # Configuration must succeed; only the first query hits the error.
    engine = session_module.configure_database(f"sqlite:///{tmp_path / 'missing' / 'vocab.db'}")

    with pytest.raises(OperationalError):
        with engine.connect() as connection:
            connection.execute(text("SELECT 1"))


def test_get_db_closes_session_after_request(monkeypatch):
    db = MagicMock()
    monkeypatch.setattr(session_module, "SessionLocal", lambda: db)

    generator = session_module.get_db()
    assert next(generator) is db
    generator.close()

    db.close.assert_called_once()


def test_get_db_closes_session_when_request_fails(monkeypatch):
    db = MagicMock()
    monkeypatch.setattr(session_module, "SessionLocal", lambda: db)

    generator = session_module.get_db()
    next(generator)
    with pytest.raises(RuntimeError):
        generator.throw(RuntimeError("boom"))

    db.close.assert_called_once()


def test_slow_query_logger_is_skipped_when_disabled(monkeypatch):
    monkeypatch.setattr(settings, "SQLALCHEMY_SLOW_QUERY_THRESHOLD_MS", 0)
    engine = session_module.configure_database("sqlite://")
    assert not getattr(engine, "_vocab_slow_query_hook", False)


def test_slow_query_logger_is_installed_by_default():
    engine = session_module.configure_database("sqlite://")
    assert getattr(engine, "_vocab_slow_query_hook", False) is True
