"""Listing construction and display formatting."""

from .builder import PARENT_NAME
from .builder import build_listing
from .formatting import render_size
from .formatting import render_timestamp

__all__ = [
    "PARENT_NAME",
    "build_listing",
    "render_size",
    "render_timestamp",
]
