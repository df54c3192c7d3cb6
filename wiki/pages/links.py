import re

PAGE_REFERENCE_PATTERN = re.compile(rb"\[([A-Za-z0-9]+)\]")
NEWLINE_PATTERN = re.compile(rb"\n")


def _page_link(match: re.Match[bytes]) -> bytes:
    title = match.group(1)
    return b"<a href='/view/" + title + b"'>" + title + b"</a>"


def link_pages(body: bytes) -> bytes:
    """Replace every ``[Title]`` reference with a link to that page's view.

    Text outside the references is left untouched. Whether the referenced
    page exists is not checked.
    """
    return PAGE_REFERENCE_PATTERN.sub(_page_link, body)


def format_page(body: bytes) -> bytes:
    return NEWLINE_PATTERN.sub(b"<br>", body)


def transform(body: bytes) -> bytes:
    return format_page(link_pages(body))
