# Fichier: app/api/v1/api.py
from fastapi import APIRouter
from .endpoints import (
    word_router,
    frontend_router,
)

api_router = APIRouter()

api_router.include_router(word_router.router, prefix="/api", tags=["Words"])
api_router.include_router(word_router.legacy_router, tags=["Words"])
api_router.include_router(frontend_router.router, tags=["Frontend"])
