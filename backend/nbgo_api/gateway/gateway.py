"""
API Gateway

HTTP front-end for NBGO. Wires the health, providers and status handlers
to the provider registry and configuration manager, and owns the
listener lifecycle (background start, bounded graceful stop).
"""
import logging
import os
import threading
import time
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional

import uvicorn
from fastapi import APIRouter, FastAPI, Request, status
from fastapi.exception_handlers import http_exception_handler
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import PlainTextResponse, StreamingResponse

from ..api import dto
from ..api.exceptions import GatewayShutdownError
from ..core.config import (
    HTTP_HOST,
    HTTP_MAX_HEADER_BYTES,
    HTTP_PORT,
    HTTP_READ_TIMEOUT,
    HTTP_SHUTDOWN_TIMEOUT,
)
from ..core.logging_config import get_logger, log_error, log_info, log_warning
from ..services.config_manager import ConfigManager
from ..services.registry import ProviderRegistry
from .middleware import ErrorHandlingMiddleware, RequestIDMiddleware, RequestLoggingMiddleware
from .routing import RouteRegistry
from .versioning import APIVersion, VersionRouter

HEALTH_PATH = "/health"
HEALTH_MESSAGE = "NBGO system is running"
METHOD_NOT_ALLOWED = "Method not allowed"


async def method_not_allowed_handler(request: Request, exc: StarletteHTTPException):
    """Answer 405 with a plain-text body; every other HTTP error keeps FastAPI's JSON format."""
    if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
        return PlainTextResponse(METHOD_NOT_ALLOWED, status_code=exc.status_code, headers=exc.headers)
    return await http_exception_handler(request, exc)


class APIGateway:
    """
    HTTP API server exposing health, provider listing and status endpoints.

    Responsibilities:
    - Build the FastAPI application, middleware and routes
    - Serve it with uvicorn on a background thread (start)
    - Stop it gracefully within a bounded grace period (stop)

    The registry and configuration manager are only read, never mutated.
    """

    def __init__(
        self,
        registry: ProviderRegistry,
        config_manager: ConfigManager,
        logger: Optional[logging.Logger] = None,
        port: str = HTTP_PORT,
        shutdown_timeout: float = HTTP_SHUTDOWN_TIMEOUT,
        host: str = HTTP_HOST,
        enable_docs: Optional[bool] = None
    ):
        """
        Initialize API Gateway.

        Args:
            registry: Provider registry listed by /api/v1/providers
            config_manager: Source of the configuration reported by /api/v1/status
            logger: Logger for lifecycle and encoding errors (module logger if None)
            port: Listen port
            shutdown_timeout: Grace period in seconds for stop()
            host: Listen host
            enable_docs: Enable API docs (auto-detected from ENVIRONMENT if None)
        """
        self.registry = registry
        self.config_manager = config_manager
        self.logger = logger or get_logger(__name__)
        self.host = host
        self.port = str(port)
        self.shutdown_timeout = shutdown_timeout
        self.enable_docs = enable_docs if enable_docs is not None else (
            os.getenv("ENVIRONMENT") != "production"
        )

        self.app = FastAPI(
            title="NBGO HTTP API",
            description="Health, provider listing and status endpoints",
            version=config_manager.get().version,
            docs_url="/docs" if self.enable_docs else None,
            redoc_url="/redoc" if self.enable_docs else None
        )
        self.app.add_exception_handler(StarletteHTTPException, method_not_allowed_handler)

        self.version_router = VersionRouter()
        self.route_registry = RouteRegistry()

        self._server: Optional[uvicorn.Server] = None
        self._thread: Optional[threading.Thread] = None
        self._started_at: Optional[float] = None
        self._lifecycle_lock = threading.Lock()

        self._setup_middleware()
        self._register_routes()

    @property
    def addr(self) -> str:
        return f"{self.host}:{self.port}"

    def _setup_middleware(self):
        # Last added runs first: request ID wraps logging, which wraps error handling
        self.app.add_middleware(ErrorHandlingMiddleware)
        self.app.add_middleware(RequestLoggingMiddleware, skip_paths=[HEALTH_PATH])
        self.app.add_middleware(RequestIDMiddleware)

    def _register_routes(self):
        self._add_route(self.app, HEALTH_PATH, self.handle_health, tags=["Health"], summary="Health check")

        v1 = APIRouter()
        prefix = APIVersion.V1.prefix
        self._add_route(v1, "/providers", self.handle_list_providers, prefix=prefix,
                        tags=["Providers"], summary="List registered providers")
        self._add_route(v1, "/status", self.handle_status, prefix=prefix,
                        tags=["Status"], summary="System status")

        self.app.include_router(v1, prefix=prefix)
        self.version_router.register(APIVersion.V1, v1)

    def _add_route(
        self,
        target: Any,
        path: str,
        handler: Callable,
        prefix: str = "",
        tags: Optional[List[str]] = None,
        summary: Optional[str] = None
    ):
        target.add_api_route(path, handler, methods=["GET"], tags=tags, summary=summary)
        self.route_registry.register_route(f"{prefix}{path}", "GET", handler, tags=tags, summary=summary)

    def route_summary(self) -> Dict[str, Any]:
        """Summary of the routes served, including registered API versions."""
        summary = self.route_registry.get_route_summary()
        summary["api_versions"] = [v.value for v in self.version_router.get_all_versions()]
        return summary

    # Lifecycle

    def build_server_config(self) -> uvicorn.Config:
        """
        uvicorn settings for the listener.

        The h11 protocol is pinned because the header size limit is only
        enforced by uvicorn's h11 implementation.
        """
        return uvicorn.Config(
            self.app,
            host=self.host,
            port=int(self.port),
            http="h11",
            log_config=None,
            timeout_keep_alive=HTTP_READ_TIMEOUT,
            timeout_graceful_shutdown=self.shutdown_timeout,
            h11_max_incomplete_event_size=HTTP_MAX_HEADER_BYTES,
        )

    def start(self) -> None:
        """
        Start serving on a background thread and return immediately.

        Listener errors are logged from the background thread, never raised here.
        """
        with self._lifecycle_lock:
            if self._thread is not None and self._thread.is_alive():
                log_warning(self.logger, "HTTP API server already running", addr=self.addr)
                return

            log_info(self.logger, "Starting HTTP API server", addr=self.addr)

            self._server = uvicorn.Server(self.build_server_config())
            self._started_at = time.monotonic()
            self._thread = threading.Thread(target=self._serve, args=(self._server,), name="nbgo-http", daemon=True)
            self._thread.start()

    def _serve(self, server: uvicorn.Server):
        # uvicorn exits with SystemExit when it cannot bind
        try:
            server.run()
        except (Exception, SystemExit) as e:
            log_error(self.logger, "HTTP server error", error=str(e) or type(e).__name__)

    def wait_until_started(self, timeout: float = 5.0) -> bool:
        """Block until the listener accepts connections; False on timeout or listener failure."""
        deadline = time.monotonic() + timeout
        while time.monotonic() < deadline:
            server, thread = self._server, self._thread
            if server is None or thread is None:
                return False
            if server.started:
                return True
            if not thread.is_alive():
                return False
            time.sleep(0.02)
        return False

    def is_running(self) -> bool:
        thread = self._thread
        return thread is not None and thread.is_alive()

    def stop(self, timeout: Optional[float] = None) -> None:
        """
        Gracefully stop the server.

        Waits at most min(timeout, shutdown_timeout) seconds for in-flight
        requests; a timeout of zero or less still requests shutdown and
        returns right away.

        Raises:
            GatewayShutdownError: If the listener is still running at the deadline
        """
        log_info(self.logger, "Stopping HTTP API server")

        with self._lifecycle_lock:
            server, thread = self._server, self._thread
            if server is None or thread is None:
                log_info(self.logger, "HTTP API server is not running")
                return

            wait = self.shutdown_timeout if timeout is None else max(0.0, min(timeout, self.shutdown_timeout))
            server.should_exit = True
            thread.join(wait)

            if thread.is_alive():
                server.force_exit = True
                error = GatewayShutdownError(f"HTTP server did not stop within {wait:.2f}s")
                log_error(self.logger, "HTTP server shutdown error", error=str(error))
                raise error

            self._server = None
            self._thread = None
            self._started_at = None

    def uptime_seconds(self) -> int:
        started_at = self._started_at
        if started_at is None:
            return 0
        return int(time.monotonic() - started_at)

    # Handlers

    def _json_response(self, payload: Any, label: str) -> StreamingResponse:
        """
        Stream an encoded DTO behind an already-committed 200.

        Encoding happens while the body is sent, so a failure cannot change
        the status code and is only logged.
        """
        def body():
            try:
                yield dto.encode_json(payload)
            except (TypeError, ValueError) as e:
                log_error(self.logger, f"Failed to encode {label} response", error=str(e))

        return StreamingResponse(body(), status_code=status.HTTP_200_OK, media_type="application/json")

    def handle_health(self):
        """Liveness check; always reports healthy while the process serves requests."""
        response = dto.HealthResponse(
            status="healthy",
            message=HEALTH_MESSAGE,
            time=datetime.now(timezone.utc),
        )
        return self._json_response(response, "health")

    def handle_list_providers(self):
        """List every registered provider by name."""
        return self._json_response(dto.providers_response(self.registry.list()), "providers")

    def handle_status(self):
        """Report the current configuration version and server uptime."""
        config = self.config_manager.get()
        response = dto.StatusResponse(
            status="ok",
            version=config.version,
            timestamp=datetime.now(timezone.utc),
            uptime_seconds=self.uptime_seconds(),
            config={"version": config.version},
        )
        return self._json_response(response, "status")
