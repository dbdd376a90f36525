"""Listing service for the data directory."""

import logging
import os
from pathlib import Path

from dirlist_library.errors import InvalidInputError
from dirlist_library.writer import DefaultDirectoryWriter
from dirlist_library.writer import DirectoryWriter

logger = logging.getLogger(__name__)


class ListingService:
    """Renders listings of directories below one data root.

    Security-critical: All paths are validated to prevent directory traversal.
    """

    def __init__(
        self,
        data_path: str | os.PathLike[str],
        writer: DirectoryWriter | None = None,
        include_parent: bool = True,
    ) -> None:
        """Initialize with the data root.

        Args:
            data_path: Directory exposed for browsing
            writer: Writer producing HTML and JSON (default: DefaultDirectoryWriter)
            include_parent: Default for the "../" row when a request doesn't choose
        """
        self.root = Path(data_path).resolve()
        self.writer = writer or DefaultDirectoryWriter()
        self.include_parent = include_parent

    def render(
        self,
        relative_path: str,
        request_url: str,
        as_json: bool = False,
        include_parent: bool | None = None,
    ) -> str:
        """Render the listing of a directory below the root.

        The root itself never gets a parent row.

        Args:
            relative_path: Path relative to root ("" for root)
            request_url: URL the directory was requested at
            as_json: Render JSON instead of HTML
            include_parent: Override the default parent toggle

        Returns:
            Rendered document

        Raises:
            InvalidInputError: If the path is invalid, escapes root or isn't a directory, or the URL is invalid
            FileNotFoundError: If the path doesn't exist
            FilesystemAccessError: If metadata can't be read
            SerializationError: If JSON encoding fails
        """
        dir_path = self._validate_and_resolve_path(relative_path)

        if not dir_path.exists():
            raise FileNotFoundError(f"Path not found: {relative_path}")

        if include_parent is None:
            include_parent = self.include_parent
        include_parent = include_parent and dir_path != self.root

        if as_json:
            return self.writer.to_json(dir_path, request_url, include_parent)
        return self.writer.to_html(dir_path, request_url, include_parent)

    def _validate_and_resolve_path(self, relative_path: str) -> Path:
        """Validate and resolve path (security-critical).

        Args:
            relative_path: Path relative to root

        Returns:
            Resolved absolute Path within root

        Raises:
            InvalidInputError: If path is invalid or escapes root
        """
        if "\x00" in relative_path:
            raise InvalidInputError(f"Path contains a NUL character: {relative_path!r}")

        path = Path(relative_path)

        if path.is_absolute():
            raise InvalidInputError(f"Path must be relative: {relative_path}")

        if any(part == ".." for part in path.parts):
            raise InvalidInputError(f"Path cannot contain '..': {relative_path}")

        full_path = (self.root / path).resolve()

        # relative_to raises ValueError if full_path is outside root
        try:
            full_path.relative_to(self.root)
        except ValueError:
            raise InvalidInputError(f"Path escapes root: {relative_path}") from None

        return full_path
