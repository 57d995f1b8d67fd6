"""
Name: FastAPI Application Entry Point

Responsibilities:
  - Initialize FastAPI application with metadata (title, version)
  - Configure middleware (CORS, request context)
  - Mount auth and user directory routers
  - Expose health check endpoint

Collaborators:
  - FastAPI: ASGI web framework
  - CORSMiddleware: Cross-Origin Resource Sharing handler
  - RequestContextMiddleware: Request ID and logging context
  - auth_routes.router, user_routes.router

Constraints:
  - CORS configurable via ALLOWED_ORIGINS env var (comma-separated)
  - Health check validates the user store only

Notes:
  - /healthz follows Kubernetes health check convention
  - Env validation enforced at startup (via lifespan, not import time)
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from .application.dev_seed_user import ensure_dev_user
from .auth_routes import router as auth_router
from .config import get_settings
from .container import get_user_repository
from .exception_handlers import register_exception_handlers
from .infrastructure.db.pool import close_pool, init_pool
from .logger import logger
from .middleware import RequestContextMiddleware
from .user_routes import router as users_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle. Validates settings and initializes pool."""
    # This will raise ValidationError if env vars are missing/invalid
    settings = get_settings()
    uses_postgres = settings.user_repository == "postgres"

    # R: Initialize connection pool
    if uses_postgres:
        init_pool(
            database_url=settings.database_url,
            min_size=settings.db_pool_min_size,
            max_size=settings.db_pool_max_size,
        )

    ensure_dev_user(settings, get_user_repository())

    logger.info(
        "User API starting up",
        extra={
            "app_env": settings.app_env,
            "user_repository": settings.user_repository,
            "token_denylist_backend": settings.token_denylist_backend,
            "jwt_ttl_minutes": settings.jwt_ttl_minutes,
        },
    )

    yield

    # R: Close pool on shutdown
    if uses_postgres:
        close_pool()
    logger.info("User API shutting down")


app = FastAPI(
    title="User Directory API",
    version="0.1.0",
    lifespan=lifespan,
    openapi_tags=[
        {"name": "auth", "description": "Registration and bearer tokens (JWT)"},
        {"name": "users", "description": "User directory (requires bearer token)"},
    ],
)

# R: Middleware order (bottom = first to execute):
# 1. CORSMiddleware - handles preflight
# 2. RequestContextMiddleware - sets request_id
app.add_middleware(RequestContextMiddleware)

_cors_settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=_cors_settings.get_allowed_origins_list(),
    allow_credentials=_cors_settings.cors_allow_credentials,
    allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization", "X-Request-Id"],
)

app.include_router(auth_router)
app.include_router(users_router)

# R: Register exception handlers for envelope error responses
register_exception_handlers(app)


@app.get("/healthz")
def healthz(request: Request):
    """
    R: Health check that verifies the user store.

    Returns:
        ok: True if the store answers
        db: "connected" or "disconnected"
        request_id: Correlation ID for this request
    """
    db_status = "disconnected"
    try:
        if get_user_repository().ping():
            db_status = "connected"
    except Exception as e:
        logger.warning("Health check: DB unavailable", extra={"error": str(e)})

    return {
        "ok": db_status == "connected",
        "db": db_status,
        "request_id": getattr(request.state, "request_id", None),
    }
