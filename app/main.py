# app/main.py

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from sqlalchemy.engine import Engine

from app.api.error_handlers import register_error_handlers
from app.api.v1.api import api_router
from app.core.config import settings
from app.core.logging import setup_logging
from app.db.init_db import init_db
from app.db.session import engine as default_engine

logger = logging.getLogger(__name__)


def create_application(bind: Engine | None = None) -> FastAPI:
    """
    Build the app. ``bind`` is the engine the startup bootstrap runs
    against; it defaults to the one configured by DATABASE_URL.
    """
    db_engine = bind if bind is not None else default_engine

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        setup_logging(settings.log_level)
        try:
            init_db(db_engine)
        except Exception:
            logger.critical("Schema bootstrap failed, refusing to serve", exc_info=True)
            raise
        logger.info("%s started", settings.PROJECT_NAME)
        yield
        logger.info("%s shutting down", settings.PROJECT_NAME)

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        lifespan=lifespan,
    )

    # ---------- ERROR HANDLERS ----------
    register_error_handlers(app)

    # ---------- ROUTERS ----------
    app.include_router(api_router)

    return app


app = create_application()


def run() -> None:
    uvicorn.run("app.main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
