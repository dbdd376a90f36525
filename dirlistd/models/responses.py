"""Response models for dirlistd API."""

from pydantic import Field

from dirlist_library.models import CamelCaseModel


class StatusResponse(CamelCaseModel):
    """Response for daemon status.

    Attributes:
        status: Status string (e.g., 'running')
        version: Daemon version
        uptime_seconds: Uptime in seconds
        data_path: Directory exposed for browsing
        data_path_available: Whether data_path is currently a directory
    """

    status: str = Field(..., description="Daemon status")
    version: str = Field(..., description="Daemon version")
    uptime_seconds: float = Field(..., description="Uptime in seconds")
    data_path: str = Field(..., description="Directory exposed for browsing")
    data_path_available: bool = Field(..., description="Whether data_path is currently a directory")
