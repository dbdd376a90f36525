"""Directory browsing endpoint."""

import logging

from fastapi import APIRouter
from fastapi import Depends
from fastapi import HTTPException
from fastapi import Query
from fastapi import Request
from fastapi.responses import HTMLResponse
from fastapi.responses import Response

from dirlist_library.errors import DirlistError
from dirlist_library.errors import InvalidInputError

from ..dependencies import get_listing_service
from ..models import ErrorResponse
from ..services.listing_service import ListingService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/browse", tags=["browse"])

JSON_MEDIA_TYPE = "application/json"


@router.get(
    "/{path:path}",
    response_class=HTMLResponse,
    responses={
        200: {"content": {JSON_MEDIA_TYPE: {}}},
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def browse(
    request: Request,
    path: str,
    include_parent: bool | None = Query(default=None, description="Show a link to the parent directory"),
    service: ListingService = Depends(get_listing_service),
) -> Response:
    """List one directory below the data root.

    Returns JSON when the Accept header asks for application/json, HTML otherwise.

    Args:
        request: Incoming request, its URL becomes the base of entry links
        path: Relative path from data root ("" for root)
        include_parent: Override the configured parent toggle
        service: Injected service instance

    Raises:
        400: Invalid path (absolute, contains '..', escapes root, or not a directory)
        404: Path doesn't exist
        500: Filesystem, serialization or unexpected error
    """
    as_json = JSON_MEDIA_TYPE in request.headers.get("accept", "")
    request_url = str(request.url.replace(query=""))

    try:
        content = service.render(path, request_url, as_json=as_json, include_parent=include_parent)
    except FileNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    except InvalidInputError as e:
        logger.warning(f"Invalid listing request for {path}: {e}")
        raise HTTPException(status_code=400, detail=str(e)) from e
    except DirlistError as e:
        logger.error(f"Failed to list {path}: {e}")
        raise HTTPException(status_code=500, detail="Internal server error") from e
    except Exception as e:
        logger.error(f"Unexpected error listing {path}: {e}")
        raise HTTPException(status_code=500, detail="Internal server error") from e

    if as_json:
        return Response(content=content, media_type=JSON_MEDIA_TYPE)
    return HTMLResponse(content=content)
