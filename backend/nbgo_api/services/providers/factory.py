"""
Provider Factory.

Builds provider instances from configuration.
"""
from typing import Iterable, List, Optional

from ...core.config import PROVIDERS
from ...core.logging_config import get_logger
from .base import Provider
from .static_provider import StaticProvider

logger = get_logger(__name__)


class ProviderFactory:
    """
    Factory for creating provider instances.
    
    Providers are declared by name through the PROVIDERS setting
    (comma-separated). Blank entries are ignored.
    """
    
    @staticmethod
    def from_names(names: Iterable[str]) -> List[Provider]:
        """
        Create a static provider for every non-blank name.
        
        Args:
            names: Provider names, in registration order
        
        Returns:
            List of providers
        """
        providers: List[Provider] = []
        for name in names:
            name = name.strip()
            if not name:
                continue
            providers.append(StaticProvider(name))
            logger.debug(f"Created static provider '{name}'")
        return providers
    
    @staticmethod
    def from_settings(names: Optional[Iterable[str]] = None) -> List[Provider]:
        """Create the providers declared in configuration."""
        providers = ProviderFactory.from_names(PROVIDERS if names is None else names)
        logger.info(f"Configured {len(providers)} provider(s) from settings")
        return providers
