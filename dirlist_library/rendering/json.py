"""JSON rendering of a Listing.

Sizes and timestamps are emitted as raw integers, unlike the HTML page.
"""

import logging

from pydantic_core import PydanticSerializationError

from ..errors import SerializationError
from ..models import Listing

logger = logging.getLogger(__name__)


def render_json(listing: Listing) -> str:
    """Serialize a listing with camelCase keys.

    Args:
        listing: Listing to serialize

    Returns:
        JSON object with parent, directories and files

    Raises:
        SerializationError: If the listing can't be encoded
    """
    try:
        return listing.model_dump_json(by_alias=True)
    except (PydanticSerializationError, ValueError, TypeError) as e:
        logger.error(f"Failed to serialize listing: {e}")
        raise SerializationError(f"Unable to serialize listing: {e}") from e
