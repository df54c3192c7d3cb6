from enum import Enum
import logging
from typing import Any
from fastapi import Request, status
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "404 page not found"


class ResourceType(str, Enum):
    PAGE = "Page"


# Exceptions
class ResourceNotFoundException(Exception):
    def __init__(
        self, resource_type: ResourceType, identifier: str, message: str | None = None
    ):
        self.resource_type = resource_type.value
        self.identifier = identifier
        super().__init__(message or f"{self.resource_type} '{identifier}' not found")


class InvalidPathException(Exception):
    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Invalid page path '{path}'")


class PageStorageException(Exception):
    def __init__(self, title: str, message: str):
        self.title = title
        super().__init__(message)


class PageTooLargeException(Exception):
    def __init__(self, title: str, size: int, limit: int):
        self.title = title
        self.size = size
        self.limit = limit
        super().__init__(
            f"Page '{title}' is {size} bytes, exceeding the limit of {limit} bytes"
        )


class AssetReadException(Exception):
    def __init__(self, asset_name: str, message: str):
        self.asset_name = asset_name
        super().__init__(message)


class RenderException(Exception):
    def __init__(self, template_name: str, message: str):
        self.template_name = template_name
        super().__init__(message)


# Exception handlers
def invalid_path_handler(request: Request, exc: InvalidPathException):
    logger.warning(exc)
    return PlainTextResponse(NOT_FOUND_MESSAGE, status_code=status.HTTP_404_NOT_FOUND)


def http_exception_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        logger.warning(f"No route for '{request.url.path}'")
        return PlainTextResponse(
            NOT_FOUND_MESSAGE, status_code=status.HTTP_404_NOT_FOUND
        )
    return PlainTextResponse(
        str(exc.detail), status_code=exc.status_code, headers=exc.headers
    )


def resource_not_found_handler(request: Request, exc: ResourceNotFoundException):
    logger.error(exc)
    return PlainTextResponse(str(exc), status_code=status.HTTP_404_NOT_FOUND)


def page_storage_handler(request: Request, exc: PageStorageException):
    logger.error(f"Failed to save page '{exc.title}': {exc}")
    return PlainTextResponse(
        str(exc), status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
    )


def page_too_large_handler(request: Request, exc: PageTooLargeException):
    logger.error(exc)
    return PlainTextResponse(
        str(exc), status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE
    )


def render_exception_handler(request: Request, exc: RenderException):
    logger.error(f"Failed to render template '{exc.template_name}': {exc}")
    return PlainTextResponse(
        str(exc), status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
    )


def asset_read_handler(request: Request, exc: AssetReadException):
    logger.error(f"Failed to read static asset '{exc.asset_name}': {exc}")
    return PlainTextResponse(
        str(exc), status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
    )


def unexpected_exception_handler(request: Request, exc: Exception):
    logger.error(exc)
    return PlainTextResponse(
        "An unexpected error occurred",
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


# Response definitions for OpenAPI documentation
ResponseDict = dict[int | str, dict[str, Any]]


def resource_not_found_response(resource_type: ResourceType) -> ResponseDict:
    return {
        404: {
            "description": f"{resource_type.value} not found",
            "content": {"text/plain": {"example": NOT_FOUND_MESSAGE}},
        }
    }


redirect_response: ResponseDict = {
    302: {"description": "Redirect to another page operation"},
}

page_too_large_response: ResponseDict = {
    413: {
        "description": "Page body too large",
        "content": {
            "text/plain": {
                "example": "Page 'example' is 2048 bytes, exceeding the limit of 1024 bytes"
            }
        },
    }
}

internal_error_response: ResponseDict = {
    500: {
        "description": "Internal server error",
        "content": {"text/plain": {"example": "An unexpected error occurred"}},
    }
}
