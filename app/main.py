"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from app.core.config import settings
from app.core.logging import get_logger, setup_logging
from app.api.v1.router import api_router
from app.sync.errors import InvalidTransition, ReadFailure, SyncError, UploadFailure, WriteFailure

setup_logging()
logger = get_logger(__name__)

app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    description="Profiles for football players and scouts.",
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json")

# Include API router
app.include_router(api_router, prefix="/api/v1")

# Uploaded media, served from the local blob store
app.mount("/media", StaticFiles(directory=settings.MEDIA_ROOT, check_dir=False), name="media")

_SYNC_ERROR_STATUS: dict[type, int] = {
    UploadFailure: status.HTTP_502_BAD_GATEWAY,
    ReadFailure: status.HTTP_503_SERVICE_UNAVAILABLE,
    WriteFailure: status.HTTP_409_CONFLICT,
    InvalidTransition: status.HTTP_409_CONFLICT,
}


@app.exception_handler(SyncError)
async def sync_error_handler(request: Request, exc: SyncError):
    """Turn upload/write failures into a notification the client can show."""
    status_code = _SYNC_ERROR_STATUS.get(type(exc), status.HTTP_500_INTERNAL_SERVER_ERROR)
    logger.warning("%s %s failed: %s: %s", request.method, request.url.path, exc.title, exc.detail)
    return JSONResponse(status_code=status_code, content={"title": exc.title, "detail": exc.detail})


@app.get("/")
async def root():
    """Root endpoint - health check."""
    return {
        "message": "Pitchside API",
        "version": settings.VERSION,
        "status": "healthy"
    }


@app.get("/health")
async def health_check():
    """Health check endpoint for monitoring."""
    return {
        "status": "healthy",
        "service": "pitchside-api",
        "version": settings.VERSION
    }


@app.get("/info")
async def info():
    return {
        "project name": settings.PROJECT_NAME,
        "version": settings.VERSION,
        "authors": settings.AUTHORS,
        "project url": settings.PROJECT_URL
    }
