from markupsafe import Markup
from pydantic import BaseModel, Field


class Page(BaseModel):
    title: str = Field(..., pattern=r"^[A-Za-z0-9]+$")
    body: bytes = b""

    @property
    def body_text(self) -> str:
        return self.body.decode("utf-8", errors="replace")

    @property
    def body_html(self) -> Markup:
        return Markup(self.body_text)
