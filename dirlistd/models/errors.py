"""Error models for dirlistd API."""

from pydantic import Field

from dirlist_library.models import CamelCaseModel


class ErrorResponse(CamelCaseModel):
    """Standard error response.

    Attributes:
        detail: Error message
    """

    detail: str = Field(..., description="Error message")
