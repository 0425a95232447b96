import json
import os
from unittest.mock import MagicMock

import pytest
import requests
from fastapi.testclient import TestClient

from status_exchange.core.schemas import FIXED_STATUS
from status_exchange.main import create_app


@pytest.fixture(scope="session", autouse=True)
def set_env():
    os.environ.setdefault("LOG_LEVEL", "INFO")
    os.environ.setdefault("RESPONDER_PATH", "/provider.json")


@pytest.fixture()
def client():
    app = create_app()
    return TestClient(app)


def _stub_response(status_code: int = 200, body=None) -> MagicMock:
    response = MagicMock(spec=requests.Response)
    response.status_code = status_code
    if body is None:
        body = FIXED_STATUS.model_dump()
    response.text = body if isinstance(body, str) else json.dumps(body)
    return response


@pytest.fixture()
def make_response():
    """Factory for stubbed requests.Response objects."""
    return _stub_response


@pytest.fixture()
def session():
    """requests.Session stub answering every GET with the fixed payload."""
    stub = MagicMock(spec=requests.Session)
    stub.get.return_value = _stub_response()
    return stub
