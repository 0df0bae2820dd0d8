"""
API Gateway Module

This module provides the HTTP layer of NBGO:
- Route registration and URL versioning
- Middleware management (request IDs, request logging, error handling)
- Listener lifecycle (background start, bounded graceful stop)
"""
from .gateway import APIGateway
from .versioning import APIVersion, VersionRouter
from .routing import RouteRegistry

__all__ = ["APIGateway", "APIVersion", "VersionRouter", "RouteRegistry"]
