import os
import sys
from typing import Optional
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

# Ensure local imports resolve
sys.path.append(os.path.dirname(__file__))

# Core
from core.config import settings
from core.config_validator import validate_config_on_startup
from core.logging_config import logger
from core.permission_helpers import build_permission_resolver
from core.permission_resolver import PermissionResolver

# -------------------------------------------------
# Routers
# -------------------------------------------------
from routers.roles import router as roles_router
from routers.health import router as health_router


# -------------------------------------------------
# Create the Application
# -------------------------------------------------
def create_app(permission_resolver: Optional[PermissionResolver] = None) -> FastAPI:
    app = FastAPI(
        title=settings.PROJECT_NAME,
        version="1.0.0",
        description="PropFlow API, role-based access control for facility management",
    )

    # -------------------------------------------------
    # Permission resolver: one per process, shared by all requests
    # -------------------------------------------------
    app.state.permission_resolver = permission_resolver or build_permission_resolver()

    # -------------------------------------------------
    # CORS
    # -------------------------------------------------
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.BACKEND_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # -------------------------------------------------
    # Startup validation + logging
    # -------------------------------------------------
    @app.on_event("startup")
    async def on_startup():
        logger.info("🚀 Starting PropFlow API")
        validate_config_on_startup(require_store=settings.ENV == "production")
        for route in app.routes:
            path = getattr(route, "path", None)
            if path is None:
                continue
            methods = ",".join(getattr(route, "methods", None) or [])
            logger.debug(f"Route {methods:10s} {path}")

    # -------------------------------------------------
    # Error handling
    # -------------------------------------------------
    @app.exception_handler(StarletteHTTPException)
    async def handle_http(request: Request, exc: StarletteHTTPException):
        if exc.status_code in (401, 403, 500):
            logger.warning(
                f"HTTP {exc.status_code} at {request.url}: {exc.detail}"
            )
        return JSONResponse(
            status_code=exc.status_code,
            content={"detail": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def handle_unhandled(request: Request, exc: Exception):
        logger.error("Unhandled error at %s", request.url, exc_info=exc)
        return JSONResponse(
            status_code=500,
            content={"detail": "Internal server error"},
        )

    # -------------------------------------------------
    # Register Routers
    # -------------------------------------------------
    app.include_router(roles_router)
    app.include_router(health_router)

    return app


# Create the global FastAPI instance
app = create_app()
