from pathlib import Path

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from diveseeks.config import AppConfig
from diveseeks.main import create_app


@pytest.fixture(name="upload_dir")
def upload_dir_fixture(tmp_path: Path) -> Path:
    return tmp_path / "uploads"


@pytest.fixture(name="config")
def config_fixture(upload_dir: Path) -> AppConfig:
    return AppConfig(upload_dest=str(upload_dir), max_file_size=1024)


@pytest.fixture(name="app")
def app_fixture(config: AppConfig) -> FastAPI:
    return create_app(config)


@pytest.fixture(name="client")
def client_fixture(app: FastAPI):
    # Throttling is exercised in test_rate_limiting.py only
    app.state.rate_limiter.disable()
    client = TestClient(app)
    yield client
    app.state.rate_limiter.reset()
