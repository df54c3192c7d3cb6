import logging
from opentelemetry import trace

from wiki.common.exceptions import PageTooLargeException, ResourceNotFoundException
from wiki.pages.links import transform
from wiki.pages.renderer import TemplateRenderer
from wiki.pages.schemas import Page
from wiki.pages.store.base import PageStore

logger = logging.getLogger(__name__)

tracer = trace.get_tracer(__name__)


class PageService:
    def __init__(
        self,
        page_store: PageStore,
        renderer: TemplateRenderer,
        max_page_size: int | None = None,
    ):
        self.page_store = page_store
        self.renderer = renderer
        self.max_page_size = max_page_size

    def get_page(self, title: str) -> Page:
        with tracer.start_as_current_span(
            "page.load", attributes={"wiki.page.title": title}
        ):
            return self.page_store.load(title)

    def get_editable_page(self, title: str) -> Page:
        try:
            return self.get_page(title)
        except ResourceNotFoundException:
            logger.info(f"Page '{title}' does not exist yet, editing a blank page")
            return Page(title=title)

    def render_view(self, page: Page) -> bytes:
        linked_page = Page(title=page.title, body=transform(page.body))
        return self._render("view", linked_page)

    def render_edit(self, page: Page) -> bytes:
        return self._render("edit", page)

    def save_page(self, title: str, body: bytes) -> Page:
        if self.max_page_size is not None and len(body) > self.max_page_size:
            raise PageTooLargeException(title, len(body), self.max_page_size)

        page = Page(title=title, body=body)
        with tracer.start_as_current_span(
            "page.save",
            attributes={"wiki.page.title": title, "wiki.page.size": len(body)},
        ):
            self.page_store.save(page)
        return page

    def _render(self, template_name: str, page: Page) -> bytes:
        with tracer.start_as_current_span(
            "page.render",
            attributes={"wiki.page.title": page.title, "wiki.template": template_name},
        ):
            return self.renderer.render(template_name, page)
