"""API routers for the dirlistd daemon."""

from .browse import router as browse_router
from .status import router as status_router

__all__ = [
    "browse_router",
    "status_router",
]
