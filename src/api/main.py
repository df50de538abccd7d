"""
FastAPI application factory

create_app() wires CORS, the exception handlers and every router under
/api/v1. It holds no session state: routes reach the session through
api.dependencies, so tests build an app per case with a fresh container.
"""

from typing import List, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.middleware.error_handler import register_exception_handlers
from api.routes import colors, config, export, system
from models.enums import LogCategory
from utils.logger import get_logger

log = get_logger().for_category(LogCategory.SYSTEM)

API_PREFIX = "/api/v1"
SERVICE_NAME = "auth-widget-configurator"

# Local front-end dev servers
DEFAULT_CORS_ORIGINS = [
    "http://localhost:3000",
    "http://localhost:5173",
    "http://127.0.0.1:3000",
    "http://127.0.0.1:5173",
]

ROUTERS = (config.router, export.router, colors.router, system.router)


def create_app(
    title: str = "Auth Widget Configurator",
    version: str = "1.0.0",
    docs_enabled: bool = True,
    cors_origins: Optional[List[str]] = None
) -> FastAPI:
    """
    Build the configurator API

    Args:
        title: API title (shown in docs)
        version: API version (also reported by /api/health)
        docs_enabled: Serve /docs, /redoc and /openapi.json
        cors_origins: Allowed origins (DEFAULT_CORS_ORIGINS when None)
    """
    app = FastAPI(
        title=title,
        description="Configure the auth widget and export its snippet / document",
        version=version,
        docs_url="/docs" if docs_enabled else None,
        redoc_url="/redoc" if docs_enabled else None,
        openapi_url="/openapi.json" if docs_enabled else None
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins if cors_origins is not None else DEFAULT_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    for router in ROUTERS:
        app.include_router(router, prefix=API_PREFIX)

    @app.get("/api/health", tags=["System"], summary="Health check")
    async def health_check():
        return {"status": "healthy", "service": SERVICE_NAME, "version": version}

    @app.get("/", include_in_schema=False)
    async def root():
        return {"message": title, "docs": "/docs", "health": "/api/health"}

    log.debug(
        f"FastAPI app created: {title} v{version}",
        routes=", ".join(API_PREFIX + router.prefix for router in ROUTERS)
    )
    return app
