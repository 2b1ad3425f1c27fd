# File: app/models/user.py

"""
User model.

Row representation of the single entity this service exposes. The table
is the only owner of user state; nothing is cached in-process.
"""

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.models.base import Base


class User(Base):
    __tablename__ = "users"
    # ids are never reissued after a delete (SQLite would reuse the max rowid)
    __table_args__ = {"sqlite_autoincrement": True}

    # SERIAL on PostgreSQL, INTEGER PRIMARY KEY AUTOINCREMENT on SQLite
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str | None] = mapped_column(Text, nullable=True)
    email: Mapped[str | None] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:
        return f"User(id={self.id!r}, name={self.name!r}, email={self.email!r})"
