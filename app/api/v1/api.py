from fastapi import APIRouter

from app.api.v1.routes_health import router as health_router
from app.api.v1.routes_users import router as users_router


api_router = APIRouter()

api_router.include_router(health_router)
api_router.include_router(users_router, prefix="/users", tags=["users"])
