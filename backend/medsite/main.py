"""
Medsite Backend — FastAPI Application Factory
==============================================

What:  Creates and configures the FastAPI application instance.
How:   create_app() registers middleware, exception handlers and routers;
       the lifespan opens the database pool and disposes it on shutdown.
Who:   uvicorn (`uvicorn medsite.main:app`) or the `medsite` console script.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────┐ ┌─────────┐ ┌──────┐ ┌──────┐         │
    │  │  Req ID  │→│ Logging │→│ GZip │→│ CORS │         │
    │  └──────────┘ └─────────┘ └──────┘ └──────┘         │
    │                                                     │
    │  Routes:                                            │
    │  /admin/*  (require_admin except admins & signin)   │
    │  /countries  /colleges  /blogs  /customers  /health │
    │                                                     │
    │  Exception Handlers:                                │
    │  Validation/Conflict→400 │ Auth→401/403 │ 404 │ 500 │
    └─────────────────────────────────────────────────────┘

Lifecycle:
    Startup:  configure logging → open pool → (optional) create tables
    Shutdown: dispose pool
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse

from medsite import __version__
from medsite.config import settings
from medsite.database import Database
from medsite.exceptions import (
    AuthError,
    ConflictError,
    DatabaseError,
    NotFoundError,
    ValidationError,
)
from medsite.middleware.logging import RequestLoggingMiddleware
from medsite.middleware.request_id import RequestIDMiddleware, request_id_var
from medsite.routes import admins, blogs, colleges, countries, customers, health

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    Called once during startup, before anything else logs.
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # Third-party loggers that are noisy at INFO
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("passlib").setLevel(logging.ERROR)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Opens the process-wide pool on startup and disposes it on shutdown."""
    # ── Startup ───────────────────────────────────────────────────────────
    setup_logging()
    logger.info("Medsite Backend %s starting up...", __version__)

    db: Optional[Database] = getattr(app.state, "db", None)
    if db is None:
        db = Database.from_settings(settings)
        app.state.db = db

    if settings.create_tables:
        await db.create_all()
        logger.info("Database tables ensured")

    logger.info("Server ready at http://%s:%d", settings.host, settings.port)

    yield

    # ── Shutdown ──────────────────────────────────────────────────────────
    logger.info("Medsite Backend shutting down...")
    await db.dispose()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Map exception types to HTTP status codes and the ErrorResponse body.

    Handler hierarchy:
        ValidationError, RequestValidationError → 400 validation_error
        ConflictError                           → 400 conflict
        AuthError                               → 401 / 403 (per subclass)
        NotFoundError                           → 404 not_found
        DatabaseError                           → 500 server_error
        Exception (fallback)                    → 500 internal_server_error

    Responses never carry stack traces, SQL, or exception context; those
    are logged server-side with the request ID.
    """

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        rid = request_id_var.get("")
        logger.info("[%s] Validation error: %s", rid, exc.message)
        return JSONResponse(
            status_code=400,
            content={
                "error": "validation_error",
                "message": exc.message,
                "details": exc.context,
                "request_id": rid,
            },
        )

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(request: Request, exc: RequestValidationError):
        """Malformed JSON, wrong field types, non-integer path ids."""
        rid = request_id_var.get("")
        logger.info("[%s] Malformed request on %s", rid, request.url.path)
        return JSONResponse(
            status_code=400,
            content={
                "error": "validation_error",
                "message": "Request body or parameters are invalid",
                "details": {"errors": jsonable_encoder(exc.errors())},
                "request_id": rid,
            },
        )

    @app.exception_handler(ConflictError)
    async def handle_conflict(request: Request, exc: ConflictError):
        rid = request_id_var.get("")
        logger.info("[%s] Conflict: %s | Context: %s", rid, exc.message, exc.context)
        return JSONResponse(
            status_code=400,
            content={"error": "conflict", "message": exc.message, "request_id": rid},
        )

    @app.exception_handler(AuthError)
    async def handle_auth_error(request: Request, exc: AuthError):
        rid = request_id_var.get("")
        logger.warning(
            "[%s] Auth failure (%d) on %s: %s",
            rid, exc.status_code, request.url.path, exc.context,
        )
        headers = {"WWW-Authenticate": "Bearer"} if exc.status_code == 401 else None
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.error_code, "message": exc.message, "request_id": rid},
            headers=headers,
        )

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        rid = request_id_var.get("")
        return JSONResponse(
            status_code=404,
            content={"error": "not_found", "message": exc.message, "request_id": rid},
        )

    @app.exception_handler(DatabaseError)
    async def handle_database_error(request: Request, exc: DatabaseError):
        rid = request_id_var.get("")
        logger.error("[%s] Database error: %s | Context: %s", rid, exc.message, exc.context)
        return JSONResponse(
            status_code=500,
            content={
                "error": "server_error",
                "message": "Internal server error",
                "request_id": rid,
            },
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        rid = request_id_var.get("")
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        return JSONResponse(
            status_code=500,
            content={
                "error": "internal_server_error",
                "message": "Internal server error",
                "request_id": rid,
            },
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(database: Optional[Database] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        database: Pre-built gateway to use instead of opening one from
                  settings at startup (tests pass a SQLite-backed one).
    """
    app = FastAPI(
        title="Medsite API",
        description=(
            "Backend for the medical-college website: countries, colleges, blogs, "
            "customer leads, and token-authenticated admin management."
        ),
        version=__version__,
        lifespan=lifespan,
    )
    if database is not None:
        app.state.db = database

    # ── Register Middleware ───────────────────────────────────────────────
    # Last added runs first: RequestID → Logging → GZip → CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(GZipMiddleware, minimum_size=500)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(health.router)
    app.include_router(admins.router)
    app.include_router(countries.router)
    app.include_router(countries.admin_router)
    app.include_router(colleges.router)
    app.include_router(colleges.admin_router)
    app.include_router(blogs.router)
    app.include_router(blogs.admin_router)
    app.include_router(customers.router)
    app.include_router(customers.admin_router)

    return app


app = create_app()


def run() -> None:
    """Console entry point: serve `app` with uvicorn on HOST:PORT."""
    import uvicorn

    uvicorn.run(
        "medsite.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
