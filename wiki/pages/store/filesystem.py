import logging
import os
import tempfile
from pathlib import Path

from wiki.common.exceptions import (
    PageStorageException,
    ResourceNotFoundException,
    ResourceType,
)
from wiki.pages.schemas import Page
from wiki.pages.store.base import PageStore
from wiki.pages.title import TITLE_PATTERN

logger = logging.getLogger(__name__)

PAGE_FILE_MODE = 0o600


class FileSystemPageStore(PageStore):
    """Stores every page as a single file named after its title.

    Saves write a temporary file next to the target and move it into place
    with ``os.replace``, so a concurrent load sees either the previous body or
    the new one, never a partial write.
    """

    def __init__(self, data_dir: Path, file_extension: str = ".txt"):
        self.data_dir = Path(data_dir)
        self.file_extension = file_extension

    def page_path(self, title: str) -> Path:
        if not TITLE_PATTERN.fullmatch(title):
            raise ValueError(f"Invalid page title '{title}'")
        return self.data_dir / f"{title}{self.file_extension}"

    def load(self, title: str) -> Page:
        path = self.page_path(title)
        try:
            body = path.read_bytes()
        except OSError as e:
            logger.debug(f"Could not read page '{title}' from {path}: {e}")
            raise ResourceNotFoundException(ResourceType.PAGE, title) from e

        return Page(title=title, body=body)

    def save(self, page: Page) -> None:
        path = self.page_path(page.title)
        tmp_name: str | None = None
        try:
            self.data_dir.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{page.title}.", suffix=".tmp", dir=self.data_dir
            )
            with os.fdopen(fd, "wb") as tmp_file:
                tmp_file.write(page.body)
                tmp_file.flush()
                os.fsync(tmp_file.fileno())
            os.chmod(tmp_name, PAGE_FILE_MODE)
            os.replace(tmp_name, path)
            tmp_name = None
        except OSError as e:
            raise PageStorageException(page.title, str(e)) from e
        finally:
            if tmp_name is not None:
                try:
                    os.unlink(tmp_name)
                except OSError:
                    logger.exception(f"Failed to remove temporary file {tmp_name}")

        logger.info(f"Saved page '{page.title}' ({len(page.body)} bytes) to {path}")

    def check_writable(self) -> None:
        if not self.data_dir.exists():
            # Created on first save
            parent = self.data_dir.resolve().parent
            if not os.access(parent, os.W_OK):
                raise PermissionError(f"Cannot create data directory {self.data_dir}")
            return
        if not self.data_dir.is_dir():
            raise NotADirectoryError(f"{self.data_dir} is not a directory")
        if not os.access(self.data_dir, os.W_OK):
            raise PermissionError(f"Data directory {self.data_dir} is not writable")
