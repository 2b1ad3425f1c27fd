# File: app/api/deps.py

"""
Request-scoped dependencies for the users routes.

``get_db`` hands each request its own session from the users engine, and
``read_user_body`` decodes the create/update payload.
"""

from collections.abc import Generator

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError
from sqlalchemy.orm import Session

from app.db.session import SessionLocal
from app.schemas.user import UserWrite


def get_db() -> Generator[Session, None, None]:
    """
    Session bound to the DATABASE_URL engine, closed (and so rolled back
    if still open) when the request ends.

    Tests swap it through ``app.dependency_overrides[get_db]``.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


async def read_user_body(request: Request) -> UserWrite:
    """
    Decode the request body as a User whatever the Content-Type says, so
    ``curl -d '{...}'`` (sent as form-urlencoded) works like a JSON post.

    Decode and validation failures surface as ``RequestValidationError``
    and are answered with 400.
    """
    raw = await request.body()
    try:
        return UserWrite.model_validate_json(raw)
    except ValidationError as exc:
        errors = [
            {**err, "loc": ("body", *err["loc"])}
            for err in exc.errors(include_url=False)
        ]
        raise RequestValidationError(errors, body=raw)
