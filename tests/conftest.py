import socket
import sys
import threading
import time
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from fastapi.testclient import TestClient

from go_cloud.api.config import Config
from go_cloud.api.lifecycle import ServiceRunner
from go_cloud.api.server import create_app


def free_port() -> int:
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        return sock.getsockname()[1]


@pytest.fixture
def make_client():
    """Build a TestClient for an app created with the given settings."""

    def _make(**settings) -> TestClient:
        config = Config(_env_file=None, **settings)
        return TestClient(create_app(config))

    return _make


@pytest.fixture
def start_service():
    """Run a real server in a background thread; stopped at teardown."""
    started = []

    def _start(**settings):
        config = Config(_env_file=None, host="127.0.0.1", port=free_port(), **settings)
        runner = ServiceRunner(config, create_app(config))
        thread = threading.Thread(target=runner.run, daemon=True)
        thread.start()

        deadline = time.monotonic() + 10
        while not runner.started:
            if time.monotonic() > deadline or not thread.is_alive():
                raise RuntimeError("server did not start")
            time.sleep(0.05)

        started.append((runner, thread))
        return runner, thread, f"http://127.0.0.1:{config.port}"

    yield _start

    for runner, thread in started:
        runner.request_shutdown()
        thread.join(timeout=10)
