"""
Error Handling Middleware

Centralized handling of exceptions escaping a route handler.
"""
import os
import traceback

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse
from fastapi import status

from ...core.logging_config import get_logger, log_error

logger = get_logger(__name__)


class ErrorHandlingMiddleware(BaseHTTPMiddleware):
    """
    Middleware that converts unexpected exceptions to a JSON 500 response.
    
    Error details and tracebacks are only exposed outside production.
    """
    
    async def dispatch(self, request: Request, call_next):
        try:
            return await call_next(request)
        
        except Exception as e:
            is_development = os.getenv("ENVIRONMENT", "development") != "production"
            
            log_error(
                logger, f"Unexpected error for {request.method} {request.url.path}",
                error=str(e)
            )
            if is_development:
                logger.debug(f"Traceback:\n{traceback.format_exc()}")
            
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={
                    "error": str(e) if is_development else "Internal server error",
                    "status_code": 500,
                    "path": request.url.path,
                    "request_id": getattr(request.state, "request_id", None)
                }
            )
