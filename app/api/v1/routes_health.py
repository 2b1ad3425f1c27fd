# app/api/v1/routes_health.py

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.api.deps import get_db

router = APIRouter(tags=["health"])


@router.get("/healthz", summary="Liveness probe")
def health():
    return {"status": "ok"}


@router.get("/healthz/ready", summary="Readiness probe")
def ready(db: Session = Depends(get_db)):
    """
    Returns 503 while the database cannot answer ``SELECT 1``.
    """
    try:
        db.execute(text("SELECT 1"))
    except SQLAlchemyError:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "not_ready", "reason": "database_unavailable"},
        )
    return {"status": "ready"}
