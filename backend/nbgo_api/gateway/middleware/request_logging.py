"""
Request Logging Middleware

Logs all incoming requests and responses with timing information.
"""
import time
from typing import Callable, List, Optional

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from ...core.logging_config import get_logger, log_error, log_info

logger = get_logger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Middleware that logs all HTTP requests and responses.
    
    Logs:
    - Request method and path
    - Request ID (if available)
    - Response status code
    - Request duration in milliseconds
    
    Skips logging for health check endpoints to reduce noise.
    """
    
    def __init__(self, app, skip_paths: Optional[List[str]] = None):
        """
        Initialize request logging middleware.
        
        Args:
            app: ASGI application
            skip_paths: List of paths to skip logging (e.g., ["/health"])
        """
        super().__init__(app)
        self.skip_paths = skip_paths if skip_paths is not None else ["/health", "/docs", "/redoc", "/openapi.json"]
    
    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        if any(request.url.path.startswith(path) for path in self.skip_paths):
            return await call_next(request)
        
        request_id = getattr(request.state, "request_id", None)
        start_time = time.perf_counter()
        method = request.method
        path = request.url.path
        
        try:
            response = await call_next(request)
        except Exception as e:
            duration_ms = (time.perf_counter() - start_time) * 1000
            log_error(
                logger, f"{method} {path} failed",
                duration_ms=f"{duration_ms:.2f}", request_id=request_id, error=str(e)
            )
            raise
        
        duration_ms = (time.perf_counter() - start_time) * 1000
        log_info(
            logger, f"{method} {path} -> {response.status_code}",
            duration_ms=f"{duration_ms:.2f}", request_id=request_id
        )
        return response
