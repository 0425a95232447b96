"""
Pytest configuration for Pact contract tests.

Provides a live responder served by uvicorn on a free local port for
provider verification, and tags every test here by its module.
"""

import socket
import threading
import time
from typing import Generator

import pytest
import uvicorn

from status_exchange.main import create_app

from .participants import RESPONDER_HOST


def _free_port() -> int:
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind((RESPONDER_HOST, 0))
        return sock.getsockname()[1]


@pytest.fixture(scope="module")
def responder_url() -> Generator[str, None, None]:
    """
    Run the responder in a background thread.

    Yields:
        str: Base URL of the running responder
    """
    port = _free_port()
    server = uvicorn.Server(uvicorn.Config(create_app(), host=RESPONDER_HOST, port=port, log_level="warning"))
    thread = threading.Thread(target=server.run, daemon=True)
    thread.start()

    deadline = time.monotonic() + 10
    while not server.started:
        if time.monotonic() > deadline:
            raise RuntimeError("responder did not start within 10s")
        time.sleep(0.05)

    yield f"http://{RESPONDER_HOST}:{port}"

    server.should_exit = True
    thread.join(timeout=5)


def pytest_configure(config):
    config.addinivalue_line("markers", "pact: mark test as a Pact contract test")
    config.addinivalue_line("markers", "consumer: mark test as a consumer contract test")
    config.addinivalue_line("markers", "provider: mark test as a provider verification test")


def pytest_collection_modifyitems(config, items):
    for item in items:
        if item.path.parent.name != "pact":
            continue
        item.add_marker(pytest.mark.pact)
        # Tag by module so every test in a suite follows its side of the contract
        module = item.path.stem
        if "consumer" in module:
            item.add_marker(pytest.mark.consumer)
        if "provider" in module:
            item.add_marker(pytest.mark.provider)
