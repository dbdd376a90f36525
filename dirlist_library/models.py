"""Listing models.

Contract:
- Entry: one child of a directory, or the parent pseudo-entry
- Listing: parent entry plus sorted directories and files
- Both are frozen; JSON keys are camelCase (lastModified)
"""

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field
from pydantic.alias_generators import to_camel


class CamelCaseModel(BaseModel):
    """Model serialized with camelCase keys, also accepting field names."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class FrozenCamelCaseModel(CamelCaseModel):
    """Immutable CamelCaseModel."""

    model_config = ConfigDict(frozen=True)


class Entry(FrozenCamelCaseModel):
    """A file, directory or parent link within a listing.

    Attributes:
        name: Display name, directories end with "/", the parent is "../"
        url: URL at which the entry is reachable
        size: Size in bytes at listing time
        last_modified: Modification time in milliseconds since the epoch
    """

    name: str = Field(..., min_length=1, description="Display name")
    url: str = Field(..., min_length=1, description="URL of the entry")
    size: int = Field(..., ge=0, description="Size in bytes")
    last_modified: int = Field(..., description="Last modification, epoch milliseconds")


class Listing(FrozenCamelCaseModel):
    """Contents of one directory level.

    Attributes:
        parent: Link to the parent directory, if requested
        directories: Subdirectories sorted by name
        files: Non-directory children sorted by name
    """

    parent: Entry | None = Field(default=None, description="Parent directory entry")
    directories: tuple[Entry, ...] = Field(default=(), description="Subdirectories sorted by name")
    files: tuple[Entry, ...] = Field(default=(), description="Files sorted by name")
