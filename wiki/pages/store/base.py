from abc import ABC, abstractmethod

from wiki.pages.schemas import Page


class PageStore(ABC):
    @abstractmethod
    def load(self, title: str) -> Page:
        pass

    @abstractmethod
    def save(self, page: Page) -> None:
        pass

    @abstractmethod
    def check_writable(self) -> None:
        pass
