"""
Custom exceptions for API layer.
Raised by the registry, the configuration manager and the gateway lifecycle.
"""


class ProviderNotFoundError(Exception):
    """Raised when a provider is not registered."""
    pass


class ProviderAlreadyRegisteredError(Exception):
    """Raised when a provider name is registered twice."""
    pass


class InvalidProviderNameError(Exception):
    """Raised when a provider reports an empty name."""
    pass


class ConfigurationError(Exception):
    """Raised when a configuration change is rejected."""
    pass


class GatewayShutdownError(Exception):
    """Raised when the HTTP listener does not stop within its grace period."""
    pass
