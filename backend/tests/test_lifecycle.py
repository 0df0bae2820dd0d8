import logging
import socket
import time

import httpx
import pytest

from nbgo_api.api.exceptions import GatewayShutdownError
from nbgo_api.gateway import APIGateway


@pytest.fixture
def running_gateway(gateway):
    gateway.start()
    assert gateway.wait_until_started(timeout=10)
    yield gateway
    if gateway.is_running():
        gateway.stop()


def base_url(gateway: APIGateway) -> str:
    return f"http://{gateway.host}:{gateway.port}"


def test_start_returns_immediately_and_serves(running_gateway):
    response = httpx.get(f"{base_url(running_gateway)}/health", timeout=5)

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_serves_providers_over_the_wire(running_gateway):
    response = httpx.get(f"{base_url(running_gateway)}/api/v1/providers", timeout=5)

    assert response.json()["count"] == 2


def test_uptime_counts_from_start(running_gateway):
    body = httpx.get(f"{base_url(running_gateway)}/api/v1/status", timeout=5).json()

    assert body["uptime_seconds"] >= 0
    assert running_gateway.uptime_seconds() >= 0


def test_stop_shuts_listener_down(running_gateway, caplog):
    caplog.set_level(logging.INFO, logger="nbgo.tests")

    running_gateway.stop()

    assert not running_gateway.is_running()
    assert running_gateway.uptime_seconds() == 0
    assert "Stopping HTTP API server" in caplog.text
    with pytest.raises(httpx.TransportError):
        httpx.get(f"{base_url(running_gateway)}/health", timeout=1)


def test_stop_with_expired_deadline_returns_promptly(running_gateway):
    started = time.monotonic()
    try:
        running_gateway.stop(timeout=0)
    except GatewayShutdownError:
        pass
    elapsed = time.monotonic() - started

    assert elapsed < running_gateway.shutdown_timeout


def test_stop_is_bounded_by_grace_period(running_gateway):
    started = time.monotonic()
    try:
        running_gateway.stop(timeout=60)
    except GatewayShutdownError:
        pass

    assert time.monotonic() - started <= running_gateway.shutdown_timeout + 1


def test_stop_without_start_is_noop(gateway, caplog):
    caplog.set_level(logging.INFO, logger="nbgo.tests")

    gateway.stop()

    assert "HTTP API server is not running" in caplog.text


def test_second_start_is_ignored(running_gateway, caplog):
    caplog.set_level(logging.WARNING, logger="nbgo.tests")

    running_gateway.start()

    assert "HTTP API server already running" in caplog.text
    assert running_gateway.is_running()


def test_listener_error_is_logged_not_raised(gateway, caplog):
    caplog.set_level(logging.ERROR, logger="nbgo.tests")

    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as blocker:
        blocker.bind(("127.0.0.1", int(gateway.port)))
        blocker.listen(1)

        gateway.start()
        assert gateway.wait_until_started(timeout=10) is False

    assert "HTTP server error" in caplog.text
    assert not gateway.is_running()
