"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import os

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("WORD_API_BASE_URL", "http://words.test")

from app.db.base import Base
from app.db.session import get_db
from app.main import app


def _make_engine(url: str = "sqlite://"):
    return create_engine(
        url,
        future=True,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )


@pytest.fixture()
def engine():
    engine = _make_engine()
    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture()
def db_session(engine) -> Session:
    SessionLocal = sessionmaker(bind=engine, future=True)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def unreachable_engine(tmp_path):
    # SQLite cannot open a database file inside a missing directory.
    engine = create_engine(f"sqlite:///{tmp_path / 'missing' / 'vocab.db'}", future=True)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture()
def override_db():
    """Route the ``get_db`` dependency to sessions bound to the given engine."""

    def _override(target_engine):
        SessionLocal = sessionmaker(bind=target_engine, future=True)

        def _get_db():
            db = SessionLocal()
            try:
                yield db
            finally:
                db.close()

        app.dependency_overrides[get_db] = _get_db

    try:
        yield _override
    finally:
        app.dependency_overrides.clear()


@pytest.fixture()
def client(engine, override_db) -> TestClient:
    override_db(engine)
    with TestClient(app) as test_client:
        yield test_client
