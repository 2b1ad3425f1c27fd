# File: app/core/errors.py

"""
Request-scoped errors raised by the query adapter.

Infrastructure failures are not wrapped: they surface as
``sqlalchemy.exc.SQLAlchemyError`` and are mapped to 500 at the API edge.
"""


class UserNotFoundError(Exception):
    """No row in ``users`` matches the requested id (or the id is not one)."""

    def __init__(self, user_id: str):
        self.user_id = user_id
        super().__init__(f"User {user_id} not found")
