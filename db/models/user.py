"""
db/models/user.py

User row reconstructed from one CSV record.
"""

from __future__ import annotations

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from db.base import Base


class User(Base):
    """
    One persisted user.

    address and additional_info hold compact JSON text of the nested
    structures parsed from dot-notation CSV headers.
    """

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )
    name: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        comment="firstName and lastName joined by a single space",
    )
    age: Mapped[int] = mapped_column(Integer, nullable=False)
    address: Mapped[str | None] = mapped_column(
        Text,
        nullable=True,
        comment="Serialized address mapping",
    )
    additional_info: Mapped[str | None] = mapped_column(
        Text,
        nullable=True,
        comment="Serialized top-level fields other than name, age, address",
    )

    def __repr__(self) -> str:
        return f"<User id={self.id} name={self.name!r} age={self.age}>"
