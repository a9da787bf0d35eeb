"""Tests for liveness and readiness endpoints."""

import time

import pytest


def test_healthz_success(make_client):
    """Test successful liveness response."""
    response = make_client().get("/healthz")

    assert response.status_code == 200
    assert response.text == "ok"
    assert response.headers["content-type"] == "text/plain; charset=utf-8"


@pytest.mark.parametrize("flag", ["true", "false", "", "TRUE", "yes"])
def test_healthz_ignores_configuration(make_client, flag):
    response = make_client(app_ready=flag).get("/healthz")

    assert response.status_code == 200
    assert response.text == "ok"


@pytest.mark.parametrize("flag", ["true", "True", "TRUE", "tRuE"])
def test_readyz_ready_any_case(make_client, flag):
    """Test readiness flag is compared case-insensitively."""
    response = make_client(app_ready=flag).get("/readyz")

    assert response.status_code == 200
    assert response.text == "ok"
    assert response.headers["content-type"] == "text/plain; charset=utf-8"


@pytest.mark.parametrize("flag", ["", "false", "1", "yes", " true", "truee"])
def test_readyz_not_ready(make_client, flag):
    response = make_client(app_ready=flag).get("/readyz")

    assert response.status_code == 503
    assert "not ready" in response.text
    assert response.headers["content-type"] == "text/plain; charset=utf-8"


def test_readyz_unset_flag_is_not_ready(make_client, monkeypatch):
    monkeypatch.delenv("APP_READY", raising=False)

    response = make_client().get("/readyz")

    assert response.status_code == 503


def test_readyz_reads_config_not_environment(make_client, monkeypatch):
    """Test readiness is fixed when the app is created."""
    client = make_client(app_ready="true")
    monkeypatch.setenv("APP_READY", "false")

    assert client.get("/readyz").status_code == 200


def test_readyz_delay(make_client):
    """Test configured readiness delay is applied before answering."""
    client = make_client(app_ready="true", readiness_delay_ms=200)

    start_time = time.monotonic()
    response = client.get("/readyz")
    elapsed = time.monotonic() - start_time

    assert response.status_code == 200
    assert elapsed >= 0.2


def test_healthz_response_time(make_client):
    """Test liveness response time is under 100ms."""
    client = make_client()
    client.get("/healthz")

    start_time = time.time()
    response = client.get("/healthz")
    end_time = time.time()

    response_time = (end_time - start_time) * 1000  # Convert to milliseconds

    assert response.status_code == 200
    assert response_time < 100, f"Liveness check took {response_time:.2f}ms, should be < 100ms"
