"""
app/repositories/user_repository.py

Persistence layer for the `users` table.
"""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import delete, insert, select, text
from sqlalchemy.orm import Session

from app.domain.user_record import UserRow
from db.models.user import User


class UserRepository:
    """
    Repository for user inserts, listing, age reads and truncation.

    Transaction boundaries belong to the caller.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def insert_batch(self, rows: Sequence[UserRow]) -> int:
        """
        Insert all rows with one multi-row INSERT statement.
        """

        if not rows:
            return 0

        stmt = insert(User).values([row.as_payload() for row in rows])
        self._session.execute(stmt)
        return len(rows)

    def list_users(self) -> list[User]:
        stmt = select(User).order_by(User.id.asc())
        return list(self._session.scalars(stmt).all())

    def fetch_ages(self) -> list[int]:
        return list(self._session.scalars(select(User.age)).all())

    def clear(self) -> None:
        """
        Remove every user and reset the id sequence.

        SQLite reuses rowids from max(id) + 1, so an empty table restarts at 1.
        """

        if self._session.get_bind().dialect.name == "postgresql":
            self._session.execute(text(f"TRUNCATE TABLE {User.__tablename__} RESTART IDENTITY"))
        else:
            self._session.execute(delete(User))
