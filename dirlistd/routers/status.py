"""Liveness and configuration status of the listing daemon."""

import time
from pathlib import Path

from fastapi import APIRouter
from fastapi import Depends

from dirlist_library.config import DirlistSettings
from dirlist_library.version import __version__

from ..dependencies import get_settings
from ..models import StatusResponse

router = APIRouter(prefix="/api/v1", tags=["status"])

_start_time = time.time()


@router.get("/status", response_model=StatusResponse)
async def get_status(settings: DirlistSettings = Depends(get_settings)) -> StatusResponse:
    """Report version, uptime and whether the data directory can be listed."""
    return StatusResponse(
        status="running",
        version=__version__,
        uptime_seconds=time.time() - _start_time,
        data_path=settings.data_path,
        data_path_available=Path(settings.data_path).is_dir(),
    )


@router.get("/health")
async def health_check() -> dict[str, str]:
    return {"status": "healthy"}
