# Main application entry point
import os
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from . import __version__
from .api import auth_router, categories_router, health_router, home_router, notes_router
from .config import get_settings
from .core.exceptions import errors_from_detail
from .core.logging import LoggingMiddleware, get_logger, setup_logging
from .core.redis_client import get_redis_client
from .database import create_tables, dispose_engine

# Setup logging first
setup_logging()
logger = get_logger("main")

settings = get_settings()

_REQUEST_ROOTS = {"body", "query", "path", "header", "cookie"}


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    # Startup
    logger.info(
        "Starting Notekeeper application",
        extra={"version": __version__, "environment": settings.environment, "debug": settings.debug},
    )

    # Redis only backs token revocation
    redis_client = get_redis_client()
    try:
        await redis_client.connect()
        logger.info("Redis connection established")
    except Exception as e:
        logger.warning(f"Redis connection failed: {e}. Continuing without token blacklist...")

    # Allow tests to skip touching the real DB (e.g., when using SQLite in-memory)
    if os.getenv("NOTEKEEPER_SKIP_LIFESPAN_DB") == "1":
        logger.info("Skipping DB table creation due to NOTEKEEPER_SKIP_LIFESPAN_DB=1")
    else:
        try:
            await create_tables()
            logger.info("Database tables created/verified")
        except Exception as e:
            logger.error("Failed to create database tables", exc_info=e)
            raise

    Path(settings.upload_dir).mkdir(parents=True, exist_ok=True)

    yield

    # Shutdown
    logger.info("Shutting down Notekeeper application")
    try:
        await redis_client.disconnect()
        logger.info("Redis connection closed")
    except Exception as e:
        logger.warning(f"Redis disconnect failed: {e}")
    await dispose_engine()


app = FastAPI(
    title=settings.app_name,
    description="Personal notes with colors, categories, attachments and sharing",
    version=__version__,
    lifespan=lifespan,
)

# Add logging middleware
app.add_middleware(LoggingMiddleware)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=["*"],
    allow_headers=["*"],
)


def error_response(status_code: int, errors: dict, headers=None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "errors": errors},
        headers=headers,
    )


def validation_field(loc) -> str:
    """Name of the offending field from a pydantic error location."""
    names = [part for part in loc if isinstance(part, str)]
    if len(names) > 1 and names[0] in _REQUEST_ROOTS:
        names = names[1:]
    return names[-1] if names else "request"


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return error_response(
        exc.status_code,
        errors_from_detail(exc.status_code, exc.detail),
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = {}
    for error in exc.errors():
        field = validation_field(error.get("loc", ()))
        message = str(error.get("msg", "Invalid value"))
        errors.setdefault(field, message.removeprefix("Value error, "))
    return error_response(400, errors)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.error(
        f"Unhandled error on {request.method} {request.url.path}: {exc}",
        exc_info=exc,
    )
    return error_response(500, {"server": "Something went wrong!"})


# Include routers
app.include_router(auth_router, prefix="/api")
app.include_router(categories_router, prefix="/api")
app.include_router(notes_router, prefix="/api")
app.include_router(health_router, prefix="/api")
app.include_router(home_router, prefix="/api")

# Uploaded attachments
app.mount(
    settings.uploads_url_prefix,
    StaticFiles(directory=settings.upload_dir, check_dir=False),
    name="uploads",
)


# Root endpoint
@app.get("/")
async def root():
    return {"message": settings.app_name, "version": __version__}


# Basic unprefixed liveness endpoint
@app.get("/health")
async def basic_health():
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("notekeeper.main:app", host=settings.host, port=settings.port, reload=settings.debug)
