from typing import Any
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from wiki.pages.dependencies import get_page_store, get_renderer
from wiki.pages.renderer import TemplateRenderer
from wiki.pages.store.base import PageStore

router = APIRouter()


@router.get(
    "/healthcheck",
    tags=["Healthcheck"],
    status_code=status.HTTP_200_OK,
    responses={
        200: {
            "description": "Healthcheck status",
            "content": {
                "application/json": {
                    "example": {
                        "api": {"status": "ok"},
                        "storage": {"status": "ok"},
                        "templates": {"status": "ok"},
                    }
                }
            },
        },
        503: {
            "description": "Service unavailable",
            "content": {
                "application/json": {
                    "example": {
                        "api": {"status": "ok"},
                        "storage": {
                            "status": "error",
                            "message": "Data directory data is not writable",
                        },
                        "templates": {"status": "ok"},
                    }
                }
            },
        },
    },
)
def healthcheck(
    page_store: PageStore = Depends(get_page_store),
    renderer: TemplateRenderer = Depends(get_renderer),
) -> JSONResponse:
    health_status: dict[str, Any] = {
        "api": {"status": "ok"},
        "storage": {"status": "ok"},
        "templates": {"status": "ok"},
    }
    has_error = False

    # Check page storage
    try:
        page_store.check_writable()
    except Exception as e:
        health_status["storage"].update({"status": "error", "message": str(e)})
        has_error = True

    # Check templates
    try:
        renderer.check_templates()
    except Exception as e:
        health_status["templates"].update({"status": "error", "message": str(e)})
        has_error = True

    if has_error:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE, content=health_status
        )

    return JSONResponse(status_code=status.HTTP_200_OK, content=health_status)
