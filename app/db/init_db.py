"""
Database initialization helpers.

The bootstrap only makes sure the ``users`` table exists. There is no
migration story beyond that.
"""

import logging

from sqlalchemy.engine import Engine

from app.models.base import Base
from app.models import user  # noqa: F401  (registers the users table)

logger = logging.getLogger(__name__)


def init_db(bind: Engine) -> None:
    """
    Create the ``users`` table if it is missing.

    ``create_all`` checks for existence first, so this is safe on every
    start. Errors propagate: the caller must not serve requests without
    the table.
    """
    logger.info("Ensuring table 'users' exists on %s", bind.url.render_as_string(hide_password=True))
    Base.metadata.create_all(bind=bind)
