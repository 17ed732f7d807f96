"""Top-level API router: aggregates every endpoint router under ``/api``."""

from fastapi import APIRouter

from blockboard.presentation.api.endpoints.auth import router as auth_router
from blockboard.presentation.api.endpoints.blocks import router as blocks_router
from blockboard.presentation.api.endpoints.health import router as health_router
from blockboard.presentation.api.endpoints.images import router as images_router
from blockboard.presentation.api.endpoints.search_history import router as search_history_router
from blockboard.presentation.api.endpoints.users import router as users_router

router = APIRouter(prefix="/api")
router.include_router(health_router)
router.include_router(auth_router)
router.include_router(users_router)
router.include_router(blocks_router)
router.include_router(images_router)
router.include_router(search_history_router)
