from unittest.mock import Mock

import pytest
from pytest_mock import MockerFixture

from wiki.common.exceptions import (
    PageStorageException,
    PageTooLargeException,
    ResourceNotFoundException,
    ResourceType,
)
from wiki.pages.renderer import TemplateRenderer
from wiki.pages.schemas import Page
from wiki.pages.service import PageService
from wiki.pages.store.base import PageStore


@pytest.fixture
def mock_page_store(mocker: MockerFixture) -> Mock:
    return mocker.Mock(spec=PageStore)


@pytest.fixture
def mock_renderer(mocker: MockerFixture) -> Mock:
    renderer = mocker.Mock(spec=TemplateRenderer)
    renderer.render.return_value = b"<html></html>"
    return renderer


@pytest.fixture
def page_service(mock_page_store: Mock, mock_renderer: Mock) -> PageService:
    return PageService(page_store=mock_page_store, renderer=mock_renderer)


def test_get_page(page_service: PageService, mock_page_store: Mock) -> None:
    page = Page(title="FrontPage", body=b"Hello")
    mock_page_store.load.return_value = page

    assert page_service.get_page("FrontPage") == page
    mock_page_store.load.assert_called_once_with("FrontPage")


def test_get_page_not_found(page_service: PageService, mock_page_store: Mock) -> None:
    mock_page_store.load.side_effect = ResourceNotFoundException(
        ResourceType.PAGE, "Missing"
    )

    with pytest.raises(ResourceNotFoundException):
        page_service.get_page("Missing")


def test_get_editable_page_existing(
    page_service: PageService, mock_page_store: Mock
) -> None:
    page = Page(title="FrontPage", body=b"Hello")
    mock_page_store.load.return_value = page

    assert page_service.get_editable_page("FrontPage") == page


def test_get_editable_page_missing_is_blank(
    page_service: PageService, mock_page_store: Mock
) -> None:
    mock_page_store.load.side_effect = ResourceNotFoundException(
        ResourceType.PAGE, "NewPage"
    )

    page = page_service.get_editable_page("NewPage")

    assert page == Page(title="NewPage", body=b"")
    mock_page_store.save.assert_not_called()


def test_render_view_transforms_body(
    page_service: PageService, mock_renderer: Mock
) -> None:
    result = page_service.render_view(Page(title="FrontPage", body=b"Hello [World]"))

    assert result == b"<html></html>"
    mock_renderer.render.assert_called_once_with(
        "view",
        Page(title="FrontPage", body=b"Hello <a href='/view/World'>World</a>"),
    )


def test_render_edit_uses_raw_body(
    page_service: PageService, mock_renderer: Mock
) -> None:
    page = Page(title="FrontPage", body=b"Hello [World]")

    page_service.render_edit(page)

    mock_renderer.render.assert_called_once_with("edit", page)


def test_save_page(page_service: PageService, mock_page_store: Mock) -> None:
    page = page_service.save_page("FrontPage", b"Hello [World]")

    assert page == Page(title="FrontPage", body=b"Hello [World]")
    mock_page_store.save.assert_called_once_with(page)


def test_save_page_propagates_storage_error(
    page_service: PageService, mock_page_store: Mock
) -> None:
    mock_page_store.save.side_effect = PageStorageException("FrontPage", "disk full")

    with pytest.raises(PageStorageException, match="disk full"):
        page_service.save_page("FrontPage", b"Hello")


def test_save_page_too_large(mock_page_store: Mock, mock_renderer: Mock) -> None:
    page_service = PageService(
        page_store=mock_page_store, renderer=mock_renderer, max_page_size=4
    )

    with pytest.raises(PageTooLargeException) as exc_info:
        page_service.save_page("FrontPage", b"Hello")

    assert exc_info.value.size == 5
    assert exc_info.value.limit == 4
    mock_page_store.save.assert_not_called()


def test_save_page_at_limit(mock_page_store: Mock, mock_renderer: Mock) -> None:
    page_service = PageService(
        page_store=mock_page_store, renderer=mock_renderer, max_page_size=5
    )

    page_service.save_page("FrontPage", b"Hello")

    mock_page_store.save.assert_called_once()


def test_save_page_records_span(
    page_service: PageService, mock_page_store: Mock, mocker: MockerFixture
) -> None:
    mock_tracer = mocker.patch("wiki.pages.service.tracer")

    page_service.save_page("FrontPage", b"Hello")

    mock_tracer.start_as_current_span.assert_called_once_with(
        "page.save", attributes={"wiki.page.title": "FrontPage", "wiki.page.size": 5}
    )
    mock_page_store.save.assert_called_once()


def test_render_view_records_span(
    page_service: PageService, mocker: MockerFixture
) -> None:
    mock_tracer = mocker.patch("wiki.pages.service.tracer")

    page_service.render_view(Page(title="FrontPage", body=b"Hello"))

    mock_tracer.start_as_current_span.assert_called_once_with(
        "page.render",
        attributes={"wiki.page.title": "FrontPage", "wiki.template": "view"},
    )
