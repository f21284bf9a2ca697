import os
import sys


# Ensure `src/backend` is on sys.path so imports like `import api...` work when running this folder alone.
BACKEND_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), "../.."))
if BACKEND_DIR not in sys.path:
    sys.path.insert(0, BACKEND_DIR)

import pytest
from fastapi.testclient import TestClient

from api.app import create_app
from common.settings import AppSettings


@pytest.fixture
def make_settings():
    def _make(**overrides) -> AppSettings:
        values = {
            "max_upload_bytes": 1024 * 1024,
            "scan_max_workers": 1,
            "catalog_path": None,
            "cors_origins": ("http://localhost:5173",),
            "log_level": "INFO",
        }
        values.update(overrides)
        return AppSettings(**values)

    return _make


@pytest.fixture
def make_client(make_settings):
    def _make(**overrides) -> TestClient:
        return TestClient(create_app(settings=make_settings(**overrides)))

    return _make


@pytest.fixture
def client(make_client) -> TestClient:
    return make_client()
