"""
Configuration Manager.

Holds the current configuration as an immutable snapshot. Readers get
the snapshot that is current at call time; updates swap in a new one.
"""
import threading
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, ValidationError

from ..api.exceptions import ConfigurationError
from ..core.config import APP_VERSION, ENVIRONMENT
from ..core.logging_config import get_logger

logger = get_logger(__name__)


class Config(BaseModel):
    """Immutable snapshot of system configuration."""
    model_config = ConfigDict(frozen=True, extra="forbid")
    
    version: str
    environment: str = "development"


class ConfigManager:
    """
    Thread-safe holder of the current Config snapshot.
    
    Usage:
        manager = ConfigManager(Config(version="1.2.3"))
        manager.get().version  # "1.2.3"
        manager.update(version="1.2.4")
    """
    
    def __init__(self, config: Optional[Config] = None):
        self._config = config or Config(version=APP_VERSION, environment=ENVIRONMENT)
        self._lock = threading.Lock()
    
    @classmethod
    def from_settings(cls) -> "ConfigManager":
        """Build a manager from environment settings."""
        return cls(Config(version=APP_VERSION, environment=ENVIRONMENT))
    
    def get(self) -> Config:
        """Return the current configuration snapshot."""
        with self._lock:
            return self._config
    
    def update(self, **changes: Any) -> Config:
        """
        Replace the current snapshot with a copy carrying the given changes.
        
        Raises:
            ConfigurationError: If a change names an unknown field or has an invalid value
        """
        with self._lock:
            data = self._config.model_dump()
            unknown = set(changes) - set(data)
            if unknown:
                raise ConfigurationError(f"Unknown configuration field(s): {', '.join(sorted(unknown))}")
            data.update(changes)
            try:
                new_config = Config(**data)
            except ValidationError as e:
                raise ConfigurationError(f"Invalid configuration: {e}") from e
            self._config = new_config
        logger.info(f"Configuration updated (version={new_config.version})")
        return new_config
