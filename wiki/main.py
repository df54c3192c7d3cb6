import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from starlette.exceptions import HTTPException as StarletteHTTPException

from wiki.common.exceptions import (
    AssetReadException,
    InvalidPathException,
    PageStorageException,
    PageTooLargeException,
    RenderException,
    ResourceNotFoundException,
    asset_read_handler,
    http_exception_handler,
    internal_error_response,
    invalid_path_handler,
    page_storage_handler,
    page_too_large_handler,
    render_exception_handler,
    resource_not_found_handler,
    unexpected_exception_handler,
)
from wiki.common.opentelemetry import setup_opentelemetry
from wiki.config import get_settings
from wiki.healthcheck.router import router as health_router
from wiki.pages.renderer import TemplateRenderer
from wiki.pages.router import router as pages_router
from wiki.static.router import router as static_router

settings = get_settings()

logging.basicConfig(
    level=settings.LOG_LEVEL,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.renderer = TemplateRenderer(settings.TEMPLATES_DIR)
    logger.info(f"Serving pages from {settings.DATA_DIR}")
    yield


app = FastAPI(
    title=settings.API_NAME,
    summary=settings.API_SUMMARY,
    lifespan=lifespan,
    redirect_slashes=False,
    responses={**internal_error_response},
    version=settings.WIKI_VERSION,
)

if settings.OTEL_ENABLED:
    setup_opentelemetry(settings, app)

app.exception_handler(StarletteHTTPException)(http_exception_handler)
app.exception_handler(InvalidPathException)(invalid_path_handler)
app.exception_handler(ResourceNotFoundException)(resource_not_found_handler)
app.exception_handler(PageTooLargeException)(page_too_large_handler)
app.exception_handler(PageStorageException)(page_storage_handler)
app.exception_handler(RenderException)(render_exception_handler)
app.exception_handler(AssetReadException)(asset_read_handler)
app.exception_handler(Exception)(unexpected_exception_handler)


app.include_router(health_router)
app.include_router(static_router)
app.include_router(pages_router)
