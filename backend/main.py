import signal
import threading

from nbgo_api.api.exceptions import GatewayShutdownError
from nbgo_api.core.config import HTTP_PORT, HTTP_SHUTDOWN_TIMEOUT, LOG_FILE
from nbgo_api.core.logging_config import get_logger, setup_logging
from nbgo_api.gateway import APIGateway
from nbgo_api.services.config_manager import ConfigManager
from nbgo_api.services.providers import ProviderFactory
from nbgo_api.services.registry import ProviderRegistry

setup_logging(log_file=LOG_FILE, enable_file_logging=LOG_FILE is not None)
logger = get_logger("nbgo")


def build_gateway() -> APIGateway:
    """Wire the registry, configuration manager and HTTP gateway from settings."""
    registry = ProviderRegistry(ProviderFactory.from_settings())
    config_manager = ConfigManager.from_settings()
    return APIGateway(
        registry,
        config_manager,
        logger=logger,
        port=HTTP_PORT,
        shutdown_timeout=HTTP_SHUTDOWN_TIMEOUT
    )


def main() -> int:
    gateway = build_gateway()
    stop_requested = threading.Event()

    def request_stop(signum, frame):
        logger.info(f"Received signal {signal.Signals(signum).name}, shutting down")
        stop_requested.set()

    signal.signal(signal.SIGINT, request_stop)
    signal.signal(signal.SIGTERM, request_stop)

    gateway.start()
    if not gateway.wait_until_started():
        logger.error("HTTP API server failed to start")
        return 1

    while not stop_requested.wait(1.0):
        if not gateway.is_running():
            logger.error("HTTP API server exited unexpectedly")
            return 1

    try:
        gateway.stop()
    except GatewayShutdownError:
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
