# File: app/core/logging.py

"""
Logging setup for the Users API.

Called once from the application lifespan. Modules log through
``logging.getLogger(__name__)``.
"""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s - %(message)s"


def setup_logging(level: str = "INFO") -> None:
    # basicConfig is a no-op when the root logger already has handlers
    # (uvicorn --log-config, pytest caplog), so only the level is forced.
    logging.basicConfig(format=LOG_FORMAT)
    logging.getLogger().setLevel(getattr(logging, level.upper(), logging.INFO))
