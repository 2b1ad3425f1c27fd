# File: app/schemas/user.py

from pydantic import BaseModel, ConfigDict, field_validator


class UserBase(BaseModel):
    name: str
    # Plain text: no uniqueness or format check at this layer
    email: str


class UserWrite(UserBase):
    """
    Request body for create and update.

    Any ``id`` sent by the client is dropped: identity is assigned by the
    database on insert and taken from the path on update.
    """

    model_config = ConfigDict(extra="ignore")

    @field_validator("name", "email")
    @classmethod
    def must_encode_as_utf8(cls, v: str) -> str:
        # JSON escapes can smuggle in lone surrogates the driver cannot bind
        try:
            v.encode("utf-8")
        except UnicodeEncodeError:
            raise ValueError("must be valid UTF-8 text")
        return v


class UserRead(UserBase):
    model_config = ConfigDict(from_attributes=True)

    id: int

    # Rows written by the original service may carry NULL name/email
    name: str | None = None
    email: str | None = None
