from fastapi import APIRouter, Request
from ...core.schemas import HealthResponse
import logging

logger = logging.getLogger(__name__)

router = APIRouter()

@router.get("/", include_in_schema=False)
async def root():
    """Root endpoint"""
    return {
        "message": "Welcome to the Songs API",
        "docs_url": "/docs",
        "redoc_url": "/redoc"
    }

@router.get("/health", response_model=HealthResponse)
async def health_check(request: Request):
    """Report liveness and how many songs the store holds"""
    store = request.app.state.song_store
    app_settings = request.app.state.settings
    return {
        "status": "healthy",
        "songs": len(store),
        "store_enabled": app_settings.SONGS_STORE_ENABLED
    }
