"""
Route Registry Module

Centralized registry for API routes with metadata and documentation.
"""
from typing import Any, Callable, Dict, List, Optional

from ..core.logging_config import get_logger

logger = get_logger(__name__)


class RouteMetadata:
    """Metadata for a registered route."""
    
    def __init__(
        self,
        path: str,
        method: str,
        handler: Callable,
        tags: Optional[List[str]] = None,
        summary: Optional[str] = None
    ):
        self.path = path
        self.method = method.upper()
        self.handler = handler
        self.tags = tags or []
        self.summary = summary


class RouteRegistry:
    """
    Centralized registry for API routes.
    
    Provides a single source of truth for all API routes with metadata,
    making it easier to log, document and inspect what the gateway serves.
    """
    
    def __init__(self):
        self._routes: Dict[str, RouteMetadata] = {}
    
    def register_route(
        self,
        path: str,
        method: str,
        handler: Callable,
        tags: Optional[List[str]] = None,
        summary: Optional[str] = None
    ):
        """
        Register a route with metadata.
        
        Args:
            path: Full route path (e.g., "/api/v1/providers")
            method: HTTP method (GET, POST, etc.)
            handler: Route handler function
            tags: OpenAPI tags for documentation
            summary: Brief summary of the route
        """
        route_key = f"{method.upper()}:{path}"
        
        if route_key in self._routes:
            logger.warning(f"Route {route_key} already registered, overriding")
        
        self._routes[route_key] = RouteMetadata(
            path=path,
            method=method,
            handler=handler,
            tags=tags,
            summary=summary
        )
        logger.debug(f"Registered route: {method.upper()} {path}")
    
    def get_route(self, method: str, path: str) -> Optional[RouteMetadata]:
        """Get route metadata by method and path."""
        return self._routes.get(f"{method.upper()}:{path}")
    
    def get_all_routes(self) -> List[RouteMetadata]:
        return list(self._routes.values())
    
    def get_route_summary(self) -> Dict[str, Any]:
        """
        Get a summary of all registered routes.
        
        Returns:
            Dictionary with route statistics and list of routes
        """
        methods: Dict[str, int] = {}
        for route in self._routes.values():
            methods[route.method] = methods.get(route.method, 0) + 1
        
        return {
            "total_routes": len(self._routes),
            "routes_by_method": methods,
            "routes": [
                {
                    "method": route.method,
                    "path": route.path,
                    "tags": route.tags,
                    "summary": route.summary
                }
                for route in sorted(self._routes.values(), key=lambda r: (r.method, r.path))
            ]
        }
