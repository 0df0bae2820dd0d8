"""
API Versioning Module

Handles URL-based API versioning (e.g., /api/v1/providers).
"""
from enum import Enum
from typing import Dict, List, Optional

from fastapi import APIRouter

from ..core.logging_config import get_logger

logger = get_logger(__name__)


class APIVersion(str, Enum):
    """Supported API versions."""
    V1 = "v1"
    
    @classmethod
    def default(cls) -> "APIVersion":
        """Get the default API version."""
        return cls.V1
    
    @property
    def prefix(self) -> str:
        """URL prefix for routes of this version."""
        return f"/api/{self.value}"


class VersionRouter:
    """
    Keeps one router per API version.
    
    Usage:
        version_router = VersionRouter()
        version_router.register(APIVersion.V1, v1_router)
    """
    
    def __init__(self):
        self._routers: Dict[APIVersion, APIRouter] = {}
        self._default_version = APIVersion.default()
    
    def register(self, version: APIVersion, router: APIRouter):
        if version in self._routers:
            logger.warning(f"Overriding existing router for version {version.value}")
        
        self._routers[version] = router
        logger.debug(f"Registered router for API version {version.value} at '{version.prefix}'")
    
    def get_router(self, version: Optional[APIVersion] = None) -> Optional[APIRouter]:
        """
        Get router for a specific version.
        
        Args:
            version: API version. If None, returns default version router.
        """
        return self._routers.get(version or self._default_version)
    
    def get_all_versions(self) -> List[APIVersion]:
        """Get all registered API versions."""
        return list(self._routers.keys())
