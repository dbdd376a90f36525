"""Shared dependency factories for FastAPI endpoints."""

from functools import lru_cache

from fastapi import Depends

from dirlist_library.config import DirlistSettings
from dirlist_library.config import load_config
from dirlist_library.writer import DefaultDirectoryWriter

from .services.listing_service import ListingService


@lru_cache(maxsize=1)
def get_settings() -> DirlistSettings:
    """Get settings, loaded once per process."""
    return load_config()


def get_listing_service(settings: DirlistSettings = Depends(get_settings)) -> ListingService:
    """Get listing service for the configured data path.

    Returns:
        ListingService instance
    """
    writer = DefaultDirectoryWriter(server_info=settings.server_info, escape_html=settings.escape_html)
    return ListingService(settings.data_path, writer=writer, include_parent=settings.include_parent)
