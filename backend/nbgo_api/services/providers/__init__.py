"""
Providers Module - pluggable components enumerated by the registry.

Every provider exposes its name through ``get_name()``; the HTTP layer
never looks further into a provider than that.

To add a new provider:
1. Create a class inheriting from Provider
2. Implement get_name()
3. Register an instance with ProviderRegistry
"""
from .base import Provider
from .static_provider import StaticProvider
from .factory import ProviderFactory

__all__ = [
    "Provider",
    "StaticProvider",
    "ProviderFactory",
]
