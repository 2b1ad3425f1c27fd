# File: app/services/user_service.py

"""
User query adapter.

One function per CRUD operation. Each builds a parameterized statement,
runs it on the session it is handed, and maps the result to the User
schema or to ``UserNotFoundError``.

Database errors (``SQLAlchemyError``) are never caught for good here:
write paths roll back and re-raise, and the API layer turns them into 500.
"""

import logging
import re
from typing import List

from sqlalchemy import delete, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.errors import UserNotFoundError
from app.models.user import User
from app.schemas.user import UserRead, UserWrite

logger = logging.getLogger(__name__)

# users.id is a 32-bit SERIAL on PostgreSQL
_ID_MIN = -(2**31)
_ID_MAX = 2**31 - 1
_ID_PATTERN = re.compile(r"[+-]?[0-9]+")


def parse_user_id(raw: str) -> int:
    """
    Turn the opaque path segment into a bindable id.

    Anything the database could not bind as an integer key is reported as
    not found, same as a missing row.
    """
    if not _ID_PATTERN.fullmatch(raw):
        raise UserNotFoundError(raw)
    value = int(raw)
    if not _ID_MIN <= value <= _ID_MAX:
        raise UserNotFoundError(raw)
    return value


def list_users(db: Session) -> List[UserRead]:
    rows = db.scalars(select(User)).all()
    return [UserRead.model_validate(row) for row in rows]


def get_user(db: Session, user_id: str) -> UserRead:
    pk = parse_user_id(user_id)
    row = db.scalars(select(User).where(User.id == pk)).one_or_none()
    if row is None:
        logger.debug("User %s not found", user_id)
        raise UserNotFoundError(user_id)
    return UserRead.model_validate(row)


def create_user(db: Session, payload: UserWrite) -> UserRead:
    """
    Insert a new user and return it with the id the database assigned.
    """
    row = User(name=payload.name, email=payload.email)
    try:
        db.add(row)
        # INSERT ... RETURNING id happens here; read it before commit expires the row
        db.flush()
        created = UserRead.model_validate(row)
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        raise

    logger.info("Created user %s", created.id)
    return created


def update_user(db: Session, user_id: str, payload: UserWrite) -> UserRead:
    """
    Overwrite name and email of an existing user.

    ``RETURNING id`` tells us whether a row matched; the id itself never
    changes.
    """
    pk = parse_user_id(user_id)
    stmt = (
        update(User)
        .where(User.id == pk)
        .values(name=payload.name, email=payload.email)
        .returning(User.id)
    )
    try:
        updated_id = db.execute(stmt).scalar_one_or_none()
        if updated_id is None:
            db.rollback()
            raise UserNotFoundError(user_id)
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        raise

    logger.info("Updated user %s", updated_id)
    return UserRead(id=updated_id, name=payload.name, email=payload.email)


def delete_user(db: Session, user_id: str) -> None:
    """
    Delete a user by id.

    A single DELETE decides the outcome through its row count, so a row
    removed concurrently is reported as not found rather than raced.
    """
    pk = parse_user_id(user_id)
    try:
        result = db.execute(delete(User).where(User.id == pk))
        if result.rowcount == 0:
            db.rollback()
            raise UserNotFoundError(user_id)
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        raise

    logger.info("Deleted user %s", pk)
