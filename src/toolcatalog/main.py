"""
Tool Catalog API: FastAPI REST + Strawberry GraphQL

Supports:
- Dev mode: SQLite, debug enabled
- Prod mode: PostgreSQL via DATABASE_URL

Both modes auto-create tables and seed the sample tools on first startup.
Uploaded images are served from UPLOAD_DIR under UPLOAD_URL_PREFIX.

Usage:
    # Development (default)
    uvicorn toolcatalog.main:app --reload

    # Production (via module)
    python -m toolcatalog.main --mode prod --host 0.0.0.0 --port 3001
"""
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path
from typing import TypedDict

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from sqlalchemy.exc import SQLAlchemyError

from toolcatalog.core.init_settings import settings, args
from toolcatalog.core.database import engine
from toolcatalog.core.exceptions import CatalogError, StoreError, ValidationError
from toolcatalog.core.logging_config import configure_logging
from toolcatalog.db.seed import seed_if_empty
from toolcatalog.graphql.schema import graphql_router
from toolcatalog.rest.router import router as rest_router
from toolcatalog.models import Base

configure_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)


class State(TypedDict):
    """Lifespan state."""
    pass


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[State]:
    """Startup and shutdown logic."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    if settings.SEED_ON_STARTUP and await seed_if_empty():
        logger.info("[%s] Database seeded with sample tools", settings.ENV_MODE)

    db_location = settings.async_db_url.split("@")[-1]
    logger.info("[%s] Server starting (database: %s)", settings.ENV_MODE, db_location)

    yield {}

    await engine.dispose()
    logger.info("[%s] Server stopped", settings.ENV_MODE)


app = FastAPI(
    title=settings.APP_NAME,
    description="Tool catalog REST + GraphQL API",
    version=settings.APP_VERSION,
    lifespan=lifespan,
    debug=settings.DEBUG,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# Error handlers
# =============================================================================

def error_response(exc: CatalogError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail, "code": exc.code},
    )


@app.exception_handler(CatalogError)
async def catalog_error_handler(request: Request, exc: CatalogError):
    logger.warning("%s %s -> %s: %s", request.method, request.url.path, exc.code, exc.detail)
    return error_response(exc)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    problems = "; ".join(
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in exc.errors()
    )
    return error_response(ValidationError(f"Invalid request: {problems}"))


@app.exception_handler(SQLAlchemyError)
async def store_error_handler(request: Request, exc: SQLAlchemyError):
    logger.exception("Store failure on %s %s", request.method, request.url.path)
    return error_response(StoreError(str(exc.__cause__ or exc)))


# =============================================================================
# Routes
# =============================================================================

app.include_router(graphql_router, prefix="/graphql")
app.include_router(rest_router)

# StaticFiles refuses to mount a missing directory
Path(settings.UPLOAD_DIR).mkdir(parents=True, exist_ok=True)
app.mount(
    settings.UPLOAD_URL_PREFIX,
    StaticFiles(directory=settings.UPLOAD_DIR),
    name="uploads",
)


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {
        "status": "ok",
        "mode": settings.ENV_MODE,
        "version": settings.APP_VERSION,
    }


# Allow running as module: python -m toolcatalog.main --mode prod
if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "toolcatalog.main:app",
        host=args.host,
        port=args.port,
        reload=settings.is_dev,
    )
