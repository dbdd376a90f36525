"""Directory writers.

A writer turns a directory plus the URL it is mounted at into a complete
HTML or JSON document.
"""

import os
from abc import ABC
from abc import abstractmethod
from pathlib import Path

from .listing import build_listing
from .rendering import SERVER_INFO
from .rendering import render_html
from .rendering import render_json


class DirectoryWriter(ABC):
    """Abstract class for directory writers."""

    @abstractmethod
    def to_html(self, directory: str | os.PathLike[str], request_url: str, include_parent: bool) -> str:
        """Render a directory as an HTML page.

        Args:
            directory: Directory to list
            request_url: URL at which the directory is externally mounted
            include_parent: Whether to add a link to the parent directory

        Returns:
            HTML document
        """

    @abstractmethod
    def to_json(self, directory: str | os.PathLike[str], request_url: str, include_parent: bool) -> str:
        """Render a directory as a JSON document.

        Args:
            directory: Directory to list
            request_url: URL at which the directory is externally mounted
            include_parent: Whether to add a link to the parent directory

        Returns:
            JSON document
        """


class DefaultDirectoryWriter(DirectoryWriter):
    """Writer backed by build_listing and the bundled renderers."""

    def __init__(self, server_info: str = SERVER_INFO, escape_html: bool = True) -> None:
        self.server_info = server_info
        self.escape_html = escape_html

    def to_html(self, directory: str | os.PathLike[str], request_url: str, include_parent: bool) -> str:
        listing = build_listing(directory, request_url, include_parent)
        # Title is the directory's own name, "/" for the filesystem root
        title = Path(os.path.abspath(directory)).name or os.sep
        return render_html(listing, title, server_info=self.server_info, escape=self.escape_html)

    def to_json(self, directory: str | os.PathLike[str], request_url: str, include_parent: bool) -> str:
        return render_json(build_listing(directory, request_url, include_parent))
