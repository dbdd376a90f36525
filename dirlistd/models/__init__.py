"""API models for the dirlistd daemon."""

from .errors import ErrorResponse
from .responses import StatusResponse

__all__ = [
    "ErrorResponse",
    "StatusResponse",
]
