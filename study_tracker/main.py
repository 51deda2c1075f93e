"""FastAPI application main module."""
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from study_tracker import __version__
from study_tracker.api.v1 import api_router
from study_tracker.core.config import get_settings
from study_tracker.core.errors import register_exception_handlers
from study_tracker.utils.logging import add_request_logging, setup_logging

settings = get_settings()
logger = setup_logging(settings.log_level)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info("Starting up %s...", settings.project_name)
    yield
    logger.info("Shutting down %s...", settings.project_name)


app = FastAPI(
    title=settings.project_name,
    version=__version__,
    lifespan=lifespan,
    docs_url="/docs" if settings.debug else None,
    redoc_url="/redoc" if settings.debug else None,
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.backend_cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

add_request_logging(app, logger)
register_exception_handlers(app)

# Schema is managed by Alembic (see alembic/), not create_all.
app.include_router(api_router, prefix="/api/v1")


@app.get("/health")
async def health_check():
    return {"status": "ok"}
