"""
Static Provider.

A provider that carries only a name. Used for providers declared in
configuration and as a stand-in during testing.
"""
from .base import Provider


class StaticProvider(Provider):
    """Provider identified only by its configured name."""
    
    def __init__(self, name: str):
        self._name = name
    
    def get_name(self) -> str:
        return self._name
    
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StaticProvider):
            return NotImplemented
        return self._name == other._name
    
    def __hash__(self) -> int:
        return hash(self._name)
