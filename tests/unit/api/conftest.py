from pathlib import Path
from typing import Generator
import pytest
from fastapi.testclient import TestClient
from pytest_mock import MockerFixture

from src.config import Settings
from src.main import app as main_app


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    db_path: Path = tmp_path / "test_api.db"
    return Settings(
        DATABASE_URL=f"sqlite:///{db_path}",
        TASKS_TABLE_NAME="tasks",
        OTEL_ENABLED=False,
    )


@pytest.fixture(autouse=True)
def patch_settings(test_settings: Settings, mocker: MockerFixture) -> None:
    mocker.patch("src.main.settings", test_settings)


@pytest.fixture
def test_client() -> Generator[TestClient, None, None]:
    with TestClient(main_app) as client:
        yield client
