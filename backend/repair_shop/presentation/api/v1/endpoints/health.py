"""Health check endpoint — reports the active storage backend."""

from fastapi import APIRouter, Request

from repair_shop.config import get_settings

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check(request: Request) -> dict:
    """Returns the current application health status."""
    settings = get_settings()
    backend = getattr(request.app.state, "storage_backend", None)
    return {
        "status": "healthy",
        "version": settings.app_version,
        "environment": settings.app_env,
        "storage": backend.name if backend is not None else None,
    }
