import logging
from urllib.parse import parse_qsl
from fastapi import Depends, Request

from wiki.config import Settings, get_settings
from wiki.pages.renderer import TemplateRenderer
from wiki.pages.service import PageService
from wiki.pages.store.backend import get_page_store_backend
from wiki.pages.store.base import PageStore
from wiki.pages.title import parse_path

logger = logging.getLogger(__name__)


def valid_title(request: Request) -> str:
    logger.info(f"Handling URL: {request.url.path}")
    _, title = parse_path(request.url.path)
    return title


def get_renderer(request: Request) -> TemplateRenderer:
    return request.app.state.renderer


def get_page_store(settings: Settings = Depends(get_settings)) -> PageStore:
    return get_page_store_backend(settings)


def get_page_service(
    page_store: PageStore = Depends(get_page_store),
    renderer: TemplateRenderer = Depends(get_renderer),
    settings: Settings = Depends(get_settings),
) -> PageService:
    return PageService(
        page_store=page_store,
        renderer=renderer,
        max_page_size=settings.MAX_PAGE_SIZE,
    )


async def submitted_body(request: Request) -> bytes:
    """Return the ``body`` form field exactly as the client encoded it.

    URL-encoded forms are decoded as latin-1 so every percent-escape maps
    back to a single byte. Multipart fields are text as parsed by Starlette.
    """
    content_type = request.headers.get("content-type", "")
    if content_type.startswith("multipart/form-data"):
        form = await request.form()
        value = form.get("body")
        return value.encode("utf-8") if isinstance(value, str) else b""

    raw = await request.body()
    for name, value in parse_qsl(
        raw.decode("latin-1"), keep_blank_values=True, encoding="latin-1"
    ):
        if name == "body":
            return value.encode("latin-1")
    return b""
