import logging
import mimetypes
from pathlib import Path
from fastapi import APIRouter, Depends, Request
from fastapi.responses import Response

from wiki.common.exceptions import (
    AssetReadException,
    InvalidPathException,
    internal_error_response,
)
from wiki.config import Settings, get_settings
from wiki.pages.title import TITLE_PATTERN

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/static", tags=["Static"])

ASSET_EXTENSIONS = ("css", "js", "jpg", "png")


@router.get("/{name}.{extension}", responses={**internal_error_response})
def get_static_asset(
    request: Request,
    name: str,
    extension: str,
    settings: Settings = Depends(get_settings),
) -> Response:
    if not TITLE_PATTERN.fullmatch(name) or extension not in ASSET_EXTENSIONS:
        raise InvalidPathException(request.url.path)

    asset_path = Path(settings.STATIC_DIR) / f"{name}.{extension}"
    try:
        content = asset_path.read_bytes()
    except OSError as e:
        raise AssetReadException(asset_path.name, str(e)) from e

    media_type, _ = mimetypes.guess_type(asset_path.name)
    logger.debug(f"Serving {asset_path} as {media_type}")
    return Response(
        content=content, media_type=media_type or "application/octet-stream"
    )
