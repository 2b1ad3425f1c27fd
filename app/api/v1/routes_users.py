# File: app/api/v1/routes_users.py

"""
CRUD routes for the ``users`` table.

Handlers only wire the path/body to the query adapter. Not-found and
database errors are turned into status codes by the handlers registered
in ``app.api.error_handlers``.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.api.deps import get_db, read_user_body
from app.schemas.user import UserRead, UserWrite
from app.services import user_service

router = APIRouter()

USER_DELETED = "User deleted"

# read_user_body parses the raw body, so the schema is declared by hand
USER_BODY_DOC = {
    "requestBody": {
        "required": True,
        "content": {"application/json": {"schema": UserWrite.model_json_schema()}},
    }
}


@router.get("", response_model=list[UserRead], summary="List users")
def list_users(db: Session = Depends(get_db)):
    return user_service.list_users(db)


@router.get("/{user_id}", response_model=UserRead, summary="Get user by id")
def get_user(user_id: str, db: Session = Depends(get_db)):
    return user_service.get_user(db, user_id)


@router.post("", response_model=UserRead, summary="Create user", openapi_extra=USER_BODY_DOC)
def create_user(
    payload: UserWrite = Depends(read_user_body),
    db: Session = Depends(get_db),
):
    """
    Create a user. Any ``id`` in the body is ignored; the response carries
    the id assigned by the database.
    """
    return user_service.create_user(db, payload)


@router.put(
    "/{user_id}", response_model=UserRead, summary="Update user", openapi_extra=USER_BODY_DOC
)
def update_user(
    user_id: str,
    payload: UserWrite = Depends(read_user_body),
    db: Session = Depends(get_db),
):
    return user_service.update_user(db, user_id, payload)


@router.delete("/{user_id}", response_model=str, summary="Delete user")
def delete_user(user_id: str, db: Session = Depends(get_db)):
    user_service.delete_user(db, user_id)
    return USER_DELETED
