"""V1 API router — aggregates all v1 endpoint routers."""

from fastapi import APIRouter

from repair_shop.presentation.api.v1.endpoints.health import router as health_router
from repair_shop.presentation.api.v1.endpoints.ipc import router as ipc_router

router = APIRouter(prefix="/v1")
router.include_router(health_router)
router.include_router(ipc_router)
