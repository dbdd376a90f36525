"""Error kinds raised by the listing core."""


class DirlistError(Exception):
    """Base class for listing errors."""


class InvalidInputError(DirlistError, ValueError):
    """The path is not a directory or the request URL is blank or malformed."""


class FilesystemAccessError(DirlistError, OSError):
    """Metadata for the directory or one of its children could not be read."""


class SerializationError(DirlistError):
    """The listing could not be encoded as JSON."""
