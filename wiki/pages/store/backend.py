from wiki.config import Settings
from wiki.pages.store.base import PageStore
from wiki.pages.store.filesystem import FileSystemPageStore


def get_page_store_backend(settings: Settings) -> PageStore:
    if settings.PAGE_STORE_BACKEND == "filesystem":
        return FileSystemPageStore(
            data_dir=settings.DATA_DIR,
            file_extension=settings.PAGE_FILE_EXTENSION,
        )
    else:
        raise ValueError(
            f"Unsupported page store backend: {settings.PAGE_STORE_BACKEND}"
        )
