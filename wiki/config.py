from functools import lru_cache
from pathlib import Path
from typing import Any, Literal
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from wiki.pages.title import TITLE_PATTERN

PACKAGE_DIR = Path(__file__).resolve().parent


class Settings(BaseSettings):
    # Application Configuration
    WIKI_VERSION: str = "v0.1.x"
    API_NAME: str = "Wiki"
    API_SUMMARY: str = "A minimal wiki serving, editing and saving text pages"

    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    HOST: str = "localhost"
    PORT: int = 8080

    # Page Configuration
    FRONT_PAGE_TITLE: str = "FrontPage"
    MAX_PAGE_SIZE: int | None = None  # Bytes; unset means no cap

    # Storage Configuration
    PAGE_STORE_BACKEND: Literal["filesystem"] = "filesystem"
    DATA_DIR: Path = Path("data")
    PAGE_FILE_EXTENSION: str = ".txt"

    # Presentation
    TEMPLATES_DIR: Path = PACKAGE_DIR / "templates"
    STATIC_DIR: Path = Path("static")

    # OpenTelemetry Settings
    OTEL_ENABLED: bool = False
    OTEL_SERVICE_NAME: str = "wiki"

    @field_validator("LOG_LEVEL", mode="before")
    def normalize_log_level(cls, v: Any):
        if isinstance(v, str):
            return v.upper()
        return v

    @field_validator("FRONT_PAGE_TITLE")
    def validate_front_page_title(cls, value: str):
        if not TITLE_PATTERN.fullmatch(value):
            raise ValueError(
                "'FRONT_PAGE_TITLE' must contain only alphanumeric characters"
            )
        return value

    @field_validator("PAGE_FILE_EXTENSION")
    def validate_page_file_extension(cls, value: str):
        if "/" in value or "\\" in value:
            raise ValueError("'PAGE_FILE_EXTENSION' must not contain path separators")
        return value

    @field_validator("MAX_PAGE_SIZE")
    def validate_max_page_size(cls, value: int | None):
        if value is not None and value < 0:
            raise ValueError("'MAX_PAGE_SIZE' must not be negative")
        return value

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


@lru_cache
def get_settings():
    return Settings()
