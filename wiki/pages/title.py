import re
from enum import Enum

from wiki.common.exceptions import InvalidPathException

TITLE_PATTERN = re.compile(r"[A-Za-z0-9]+")
VALID_PATH_PATTERN = re.compile(r"^/(view|edit|save)/([A-Za-z0-9]+)$")


class Operation(str, Enum):
    VIEW = "view"
    EDIT = "edit"
    SAVE = "save"


# First path segments whose unmatched paths are 404 rather than the front page
RESERVED_PREFIXES = frozenset({op.value for op in Operation} | {"static"})


def parse_path(path: str) -> tuple[Operation, str]:
    """Split a request path into its operation and page title.

    Raises InvalidPathException unless the whole path is exactly
    ``/<view|edit|save>/<alphanumeric title>``.
    """
    match = VALID_PATH_PATTERN.fullmatch(path)
    if match is None:
        raise InvalidPathException(path)
    return Operation(match.group(1)), match.group(2)


def operation_path(operation: Operation, title: str) -> str:
    return f"/{operation.value}/{title}"
