"""API router configuration."""

from fastapi import APIRouter

from api.routes.health import router as health_router
from api.routes.notifications import router as notifications_router
from api.routes.pinata import router as pinata_router
from api.routes.profiles import router as profiles_router
from api.routes.telegram import router as telegram_router

router = APIRouter()
router.include_router(profiles_router)
router.include_router(pinata_router)
router.include_router(notifications_router)
router.include_router(telegram_router)
router.include_router(health_router)
