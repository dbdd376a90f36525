"""Main FastAPI application for the dirlistd daemon.

Mounts the configured data directory and serves HTML or JSON listings of it.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from dirlist_library.version import __version__

from .dependencies import get_settings
from .routers import browse_router
from .routers import status_router

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager.

    Args:
        app: FastAPI application instance
    """
    config = get_settings()
    logger.info(f"Starting dirlistd on {config.host}:{config.port}")
    logger.info(f"Data root: {config.data_path}")

    yield

    logger.info("Shutting down dirlistd")


app = FastAPI(
    title="dirlistd",
    description="HTML and JSON directory listings over HTTP",
    version=__version__,
    lifespan=lifespan,
)

app.include_router(browse_router)
app.include_router(status_router)


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint.

    Returns:
        API information
    """
    return {
        "name": "dirlistd",
        "version": __version__,
        "description": "HTML and JSON directory listings over HTTP",
        "browse": "/api/v1/browse/",
        "docs": "/docs",
    }
