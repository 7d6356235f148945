"""Main FastAPI application entry point."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.dependencies.services import close_clients
from api.exception_handlers import setup_exception_handlers
from api.middleware.body_limit import BodySizeLimitMiddleware
from api.middleware.logging import RequestLoggingMiddleware
from api.middleware.request_id import RequestIDMiddleware
from api.middleware.security import SecurityHeadersMiddleware
from api.routes import router as api_router
from api.routes.root import ENDPOINTS
from api.routes.root import router as root_router
from core.config import settings
from core.logging import setup_logging

logger = structlog.get_logger()

# Initialize structured logging
setup_logging()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan manager for startup/shutdown tasks."""
    logger.info(
        "server_started",
        port=settings.port,
        environment=settings.app_env,
        endpoints=list(ENDPOINTS.values()),
    )
    if not settings.pinata_jwt:
        logger.warning("pinata_jwt_missing")
    yield
    await close_clients()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        lifespan=lifespan,
        title=settings.app_name,
        description=(
            "## Telegram / Pinata bridge\n\n"
            "Backend for a Telegram mini app.\n\n"
            "### Features\n"
            "- **Profiles**: Telegram login upsert, progress and activity history "
            "(in memory, reset on restart)\n"
            "- **Pinata**: pin base64 files to IPFS and read pinned JSON back\n"
            "- **Telegram**: chat lookups through the Bot API"
        ),
        version="1.0.0",
        debug=settings.debug,
        openapi_tags=[
            {"name": "meta", "description": "Service banner"},
            {"name": "health", "description": "Health check endpoints"},
            {"name": "profiles", "description": "Telegram auth, profiles and progress"},
            {"name": "notifications", "description": "Activity notification ingestion"},
            {"name": "pinata", "description": "IPFS pinning proxy"},
            {"name": "telegram", "description": "Telegram Bot API lookups"},
        ],
    )

    # Security & tracking middleware (LIFO order - last added = outermost)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(BodySizeLimitMiddleware, max_bytes=settings.max_body_bytes)
    app.add_middleware(RequestIDMiddleware)

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    setup_exception_handlers(app)

    app.include_router(root_router)
    app.include_router(api_router, prefix="/api")

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        reload=not settings.is_production,
    )
