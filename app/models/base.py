# File: app/models/base.py

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """
    Declarative base for the users schema.

    Startup runs ``Base.metadata.create_all`` and does nothing else to the
    schema, so every table this service reads or writes must be declared
    on it (today only ``users``).
    """
    pass
