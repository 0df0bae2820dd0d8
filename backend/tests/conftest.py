import logging
import socket

import pytest
from fastapi.testclient import TestClient

from nbgo_api.gateway import APIGateway
from nbgo_api.services.config_manager import Config, ConfigManager
from nbgo_api.services.providers import StaticProvider
from nbgo_api.services.registry import ProviderRegistry


@pytest.fixture
def registry():
    return ProviderRegistry([StaticProvider("alpha"), StaticProvider("beta")])


@pytest.fixture
def config_manager():
    return ConfigManager(Config(version="1.2.3", environment="test"))


@pytest.fixture
def gateway_logger():
    return logging.getLogger("nbgo.tests")


@pytest.fixture
def gateway(registry, config_manager, gateway_logger):
    return APIGateway(
        registry,
        config_manager,
        logger=gateway_logger,
        port=free_port(),
        shutdown_timeout=5.0,
        host="127.0.0.1"
    )


@pytest.fixture
def client(gateway):
    return TestClient(gateway.app)


def free_port() -> int:
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        return sock.getsockname()[1]
