"""Directory listing core.

Builds an immutable, sorted model of one directory level and renders it
as an HTML page or a JSON document.

Public Interface:
    - build_listing: Build a Listing from a directory
    - render_html: Render a Listing as an HTML page
    - render_json: Render a Listing as a JSON document
    - DefaultDirectoryWriter: Build and render in one call
"""

from .errors import DirlistError
from .errors import FilesystemAccessError
from .errors import InvalidInputError
from .errors import SerializationError
from .listing import build_listing
from .models import Entry
from .models import Listing
from .rendering import render_html
from .rendering import render_json
from .version import __version__
from .writer import DefaultDirectoryWriter
from .writer import DirectoryWriter

__all__ = [
    "__version__",
    "DefaultDirectoryWriter",
    "DirectoryWriter",
    "DirlistError",
    "Entry",
    "FilesystemAccessError",
    "InvalidInputError",
    "Listing",
    "SerializationError",
    "build_listing",
    "render_html",
    "render_json",
]
