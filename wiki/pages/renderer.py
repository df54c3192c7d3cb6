import logging
from pathlib import Path
from jinja2 import Environment, FileSystemLoader, TemplateError, select_autoescape

from wiki.common.exceptions import RenderException
from wiki.pages.schemas import Page

logger = logging.getLogger(__name__)

TEMPLATE_NAMES = ("view", "edit")


class TemplateRenderer:
    """Renders pages through the ``<name>.html`` templates of a directory.

    Built once at startup and shared across requests; the Jinja2 environment
    is only read after construction.
    """

    def __init__(self, templates_dir: Path):
        self.templates_dir = Path(templates_dir)
        self.environment = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=select_autoescape(),
        )

    def render(self, template_name: str, page: Page) -> bytes:
        try:
            template = self.environment.get_template(f"{template_name}.html")
            return template.render(page=page).encode("utf-8")
        except TemplateError as e:
            raise RenderException(template_name, str(e)) from e

    def check_templates(self) -> None:
        for name in TEMPLATE_NAMES:
            self.environment.get_template(f"{name}.html")
