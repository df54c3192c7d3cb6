import logging
from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import HTMLResponse, RedirectResponse

from wiki.common.exceptions import (
    InvalidPathException,
    ResourceNotFoundException,
    ResourceType,
    internal_error_response,
    page_too_large_response,
    redirect_response,
    resource_not_found_response,
)
from wiki.config import Settings, get_settings
from wiki.pages.dependencies import get_page_service, submitted_body, valid_title
from wiki.pages.service import PageService
from wiki.pages.title import (
    RESERVED_PREFIXES,
    VALID_PATH_PATTERN,
    Operation,
    operation_path,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Pages"])


@router.get("/", status_code=status.HTTP_302_FOUND, responses={**redirect_response})
def front_page(settings: Settings = Depends(get_settings)) -> RedirectResponse:
    return RedirectResponse(
        operation_path(Operation.VIEW, settings.FRONT_PAGE_TITLE),
        status_code=status.HTTP_302_FOUND,
    )


@router.get(
    "/view/{title}",
    response_class=HTMLResponse,
    responses={
        **redirect_response,
        **resource_not_found_response(ResourceType.PAGE),
        **internal_error_response,
    },
)
def view_page(
    title: str = Depends(valid_title),
    page_service: PageService = Depends(get_page_service),
):
    try:
        page = page_service.get_page(title)
    except ResourceNotFoundException:
        logger.info(f"Page '{title}' not found, redirecting to edit")
        return RedirectResponse(
            operation_path(Operation.EDIT, title), status_code=status.HTTP_302_FOUND
        )

    return HTMLResponse(page_service.render_view(page))


@router.get(
    "/edit/{title}",
    response_class=HTMLResponse,
    responses={
        **resource_not_found_response(ResourceType.PAGE),
        **internal_error_response,
    },
)
def edit_page(
    title: str = Depends(valid_title),
    page_service: PageService = Depends(get_page_service),
):
    page = page_service.get_editable_page(title)
    return HTMLResponse(page_service.render_edit(page))


@router.post(
    "/save/{title}",
    status_code=status.HTTP_302_FOUND,
    responses={
        **redirect_response,
        **resource_not_found_response(ResourceType.PAGE),
        **page_too_large_response,
        **internal_error_response,
    },
)
def save_page(
    title: str = Depends(valid_title),
    body: bytes = Depends(submitted_body),
    page_service: PageService = Depends(get_page_service),
) -> RedirectResponse:
    page_service.save_page(title, body)
    return RedirectResponse(
        operation_path(Operation.VIEW, title), status_code=status.HTTP_302_FOUND
    )


@router.api_route(
    "/{path:path}",
    methods=["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE"],
    status_code=status.HTTP_302_FOUND,
    responses={**redirect_response},
    include_in_schema=False,
)
def unmatched_path(
    path: str, settings: Settings = Depends(get_settings)
) -> RedirectResponse:
    # Malformed page and asset paths stay 404; everything else is the front page
    if path.split("/", 1)[0] in RESERVED_PREFIXES:
        full_path = f"/{path}"
        if VALID_PATH_PATTERN.fullmatch(full_path):
            raise HTTPException(status_code=status.HTTP_405_METHOD_NOT_ALLOWED)
        raise InvalidPathException(full_path)

    return RedirectResponse(
        operation_path(Operation.VIEW, settings.FRONT_PAGE_TITLE),
        status_code=status.HTTP_302_FOUND,
    )
