"""Build a Listing from a live directory.

Contract:
- Inputs: Directory path, external request URL, parent toggle
- Outputs: Frozen Listing with sorted directories and files
- Side Effects: None (reads filesystem metadata only)
"""

import logging
import os
import stat
from pathlib import Path
from urllib.parse import urlsplit

from ..errors import FilesystemAccessError
from ..errors import InvalidInputError
from ..models import Entry
from ..models import Listing

logger = logging.getLogger(__name__)

PARENT_NAME = "../"
SEPARATOR = "/"


def build_listing(directory: str | os.PathLike[str], request_url: str, include_parent: bool) -> Listing:
    """Build the listing of one directory level.

    Args:
        directory: Directory to list
        request_url: URL at which the directory is externally mounted
        include_parent: Whether to add a "../" entry for the parent directory

    Returns:
        Listing with directories and files each sorted by name

    Raises:
        InvalidInputError: If directory is not a directory or request_url is invalid
        FilesystemAccessError: If metadata for the directory or a child can't be read

    Example:
        >>> listing = build_listing("/srv/data/logs", "http://host/browse/logs", True)
        >>> listing.parent.url
        'http://host/browse'
    """
    path = Path(directory)
    _check_directory(path)
    _check_request_url(request_url)

    base_url = request_url if request_url.endswith(SEPARATOR) else request_url + SEPARATOR

    parent = None
    if include_parent:
        absolute = Path(os.path.abspath(path))
        # The filesystem root is its own parent
        if absolute.parent != absolute:
            parent = Entry(
                name=PARENT_NAME,
                url=parent_url(request_url),
                **_metadata(absolute.parent),
            )

    directories: list[Entry] = []
    files: list[Entry] = []
    for child in _scan(path):
        try:
            is_dir = child.is_dir()
        except OSError as e:
            raise FilesystemAccessError(f"Unable to read type of {child.path}: {e}") from e

        name = display_name(child.name)
        if is_dir:
            name += SEPARATOR
            directories.append(Entry(name=name, url=base_url + name, **_metadata(Path(child.path))))
        else:
            files.append(Entry(name=name, url=base_url + name, **_metadata(Path(child.path))))

    directories.sort(key=lambda entry: entry.name)
    files.sort(key=lambda entry: entry.name)

    logger.debug(f"Listed {path}: {len(directories)} directories, {len(files)} files")

    return Listing(parent=parent, directories=tuple(directories), files=tuple(files))


def parent_url(request_url: str) -> str:
    """Remove the final path segment from a request URL.

    One trailing "/" is dropped first, then everything from the last
    remaining "/" onwards. An empty result becomes "/".

    The cut is textual, not a URL parse: a request URL whose path is
    already "/" (e.g. "http://host/") yields "http:/". Callers mounting a
    directory at the URL root should not ask for a parent entry.

    Example:
        >>> parent_url("http://host/a/b/")
        'http://host/a'
    """
    url = request_url[:-1] if request_url.endswith(SEPARATOR) else request_url
    url = url[: url.rfind(SEPARATOR)] if SEPARATOR in url else url
    return url or SEPARATOR


def _check_directory(path: Path) -> None:
    try:
        mode = path.stat().st_mode
    except (FileNotFoundError, NotADirectoryError, ValueError) as e:
        raise InvalidInputError(f"Input directory is not a valid directory: {path}") from e
    except OSError as e:
        raise FilesystemAccessError(f"Unable to read directory {path}: {e}") from e

    if not stat.S_ISDIR(mode):
        raise InvalidInputError(f"Input directory is not a valid directory: {path}")


def _check_request_url(request_url: str) -> None:
    if not request_url or not request_url.strip():
        raise InvalidInputError("No request url entered")

    if any(char.isspace() or not char.isprintable() for char in request_url):
        raise InvalidInputError(f"Request url contains whitespace or control characters: {request_url!r}")

    try:
        parts = urlsplit(request_url)
    except ValueError as e:
        raise InvalidInputError(f"Invalid request url: {request_url!r}") from e

    if parts.scheme:
        if not parts.netloc:
            raise InvalidInputError(f"Request url has no host: {request_url!r}")
    elif not request_url.startswith(SEPARATOR):
        raise InvalidInputError(f"Request url must be absolute: {request_url!r}")


def _scan(path: Path) -> list[os.DirEntry[str]]:
    try:
        with os.scandir(path) as it:
            return list(it)
    except PermissionError as e:
        logger.warning(f"Permission denied listing {path}, treating as empty: {e}")
        return []
    except OSError as e:
        raise FilesystemAccessError(f"Unable to list directory {path}: {e}") from e


def _metadata(path: Path) -> dict[str, int]:
    try:
        st = path.stat()
    except OSError as e:
        raise FilesystemAccessError(f"Unable to read metadata of {path}: {e}") from e
    return {"size": st.st_size, "last_modified": st.st_mtime_ns // 1_000_000}


def display_name(name: str) -> str:
    """Turn a file name into text that is valid UTF-8.

    Names that aren't valid UTF-8 come back from os.scandir with surrogate
    escapes; those bytes are shown as U+FFFD.

    Example:
        >>> display_name("bad\\udcff.txt")
        'bad\\ufffd.txt'
    """
    return os.fsencode(name).decode("utf-8", "replace")
