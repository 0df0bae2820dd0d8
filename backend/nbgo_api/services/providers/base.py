"""
Base Provider Interface.

All providers must inherit from this base class and implement
all abstract methods.
"""
from abc import ABC, abstractmethod


class Provider(ABC):
    """
    Abstract base class for providers.
    
    A provider is an external component registered by name. Its internal
    behavior is opaque to the registry and the HTTP layer.
    """
    
    @abstractmethod
    def get_name(self) -> str:
        """
        Return the unique name the provider is registered under.
        
        Returns:
            Provider name
        """
        pass
    
    def describe(self) -> str:
        """Human readable description of the provider."""
        return f"{self.get_name()} provider"
    
    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.get_name()!r})"
