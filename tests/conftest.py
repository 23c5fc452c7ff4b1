"""
Shared fixtures: an in-memory SQLite database holding the `users` table.
"""

from __future__ import annotations

from collections.abc import Iterator

import pytest
from sqlalchemy import create_engine, func, select
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

import db.models  # noqa: F401 (registers all ORM models on Base.metadata)
from db.base import Base
from db.models.user import User


@pytest.fixture()
def engine() -> Iterator[Engine]:
    test_engine = create_engine(
        "sqlite+pysqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(test_engine)
    try:
        yield test_engine
    finally:
        test_engine.dispose()


@pytest.fixture()
def session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(
        bind=engine,
        class_=Session,
        autocommit=False,
        autoflush=False,
        expire_on_commit=False,
    )


@pytest.fixture()
def db(session_factory: sessionmaker[Session]) -> Iterator[Session]:
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def count_users(session_factory: sessionmaker[Session]):
    """Count committed users from a fresh session."""

    def _count() -> int:
        with session_factory() as session:
            return session.scalar(select(func.count()).select_from(User)) or 0

    return _count


@pytest.fixture()
def make_csv():
    """Join a header and data lines into CSV text."""

    def _make(rows: list[str], header: str = "name.firstName,name.lastName,age") -> str:
        return "\n".join([header, *rows]) + "\n"

    return _make
