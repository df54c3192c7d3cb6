from pathlib import Path
from typing import Generator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from wiki.config import Settings, get_settings
from wiki.main import app as main_app


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    return Settings(
        DATA_DIR=tmp_path / "data",
        STATIC_DIR=tmp_path / "static",
        MAX_PAGE_SIZE=None,
        OTEL_ENABLED=False,
    )


@pytest.fixture
def test_app(test_settings: Settings) -> Generator[FastAPI, None, None]:
    def get_test_settings() -> Settings:
        return test_settings

    main_app.dependency_overrides[get_settings] = get_test_settings
    yield main_app
    main_app.dependency_overrides.clear()


@pytest.fixture
def test_client(test_app: FastAPI) -> Generator[TestClient, None, None]:
    with TestClient(test_app, follow_redirects=False) as client:
        yield client
