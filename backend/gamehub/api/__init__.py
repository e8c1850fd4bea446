"""API router aggregator."""
from fastapi import APIRouter

from gamehub.api.routes import auth, history

api_router = APIRouter(prefix="/api")
api_router.include_router(auth.router)
api_router.include_router(history.router)

__all__ = ["api_router"]
