"""Services backing the dirlistd routers."""

from .listing_service import ListingService

__all__ = ["ListingService"]
