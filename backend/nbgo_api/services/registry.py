"""
Provider Registry.

Thread-safe, insertion-ordered registry of providers keyed by name.
Request handlers only read from it; registration happens at boot or
from orchestration code.
"""
import threading
from typing import Dict, Iterable, List

from ..api.exceptions import (
    InvalidProviderNameError,
    ProviderAlreadyRegisteredError,
    ProviderNotFoundError,
)
from ..core.logging_config import get_logger
from .providers.base import Provider

logger = get_logger(__name__)


class ProviderRegistry:
    """
    Registry of named providers.
    
    Usage:
        registry = ProviderRegistry()
        registry.register(StaticProvider("alpha"))
        registry.list()  # [StaticProvider(name='alpha')]
    """
    
    def __init__(self, providers: Iterable[Provider] = ()):
        self._providers: Dict[str, Provider] = {}
        self._lock = threading.RLock()
        for provider in providers:
            self.register(provider)
    
    def register(self, provider: Provider) -> None:
        """
        Register a provider under its reported name.
        
        Raises:
            InvalidProviderNameError: If the provider reports a blank name
            ProviderAlreadyRegisteredError: If the name is already taken
        """
        name = provider.get_name()
        if not name or not name.strip():
            raise InvalidProviderNameError("Provider name must not be empty")
        
        with self._lock:
            if name in self._providers:
                raise ProviderAlreadyRegisteredError(f"Provider '{name}' is already registered")
            self._providers[name] = provider
        logger.debug(f"Registered provider '{name}'")
    
    def unregister(self, name: str) -> Provider:
        """Remove a provider and return it."""
        with self._lock:
            try:
                provider = self._providers.pop(name)
            except KeyError:
                raise ProviderNotFoundError(f"Provider '{name}' is not registered") from None
        logger.debug(f"Unregistered provider '{name}'")
        return provider
    
    def get(self, name: str) -> Provider:
        with self._lock:
            try:
                return self._providers[name]
            except KeyError:
                raise ProviderNotFoundError(f"Provider '{name}' is not registered") from None
    
    def list(self) -> List[Provider]:
        """Snapshot of registered providers in registration order."""
        with self._lock:
            return list(self._providers.values())
    
    def __len__(self) -> int:
        with self._lock:
            return len(self._providers)
    
    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._providers
