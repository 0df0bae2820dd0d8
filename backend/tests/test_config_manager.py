import pytest
from pydantic import ValidationError

from nbgo_api.api.exceptions import ConfigurationError
from nbgo_api.core import config as settings
from nbgo_api.services.config_manager import Config, ConfigManager


def test_get_returns_current_snapshot():
    manager = ConfigManager(Config(version="1.2.3"))

    assert manager.get().version == "1.2.3"


def test_snapshot_is_immutable():
    config = ConfigManager(Config(version="1.2.3")).get()

    with pytest.raises(ValidationError):
        config.version = "9.9.9"


def test_update_swaps_snapshot():
    manager = ConfigManager(Config(version="1.2.3"))
    old = manager.get()

    new = manager.update(version="1.3.0")

    assert manager.get() is new
    assert new.version == "1.3.0"
    assert old.version == "1.2.3"


def test_update_rejects_unknown_fields():
    manager = ConfigManager(Config(version="1.2.3"))

    with pytest.raises(ConfigurationError):
        manager.update(port=9000)
    assert manager.get().version == "1.2.3"


def test_update_rejects_invalid_values():
    manager = ConfigManager(Config(version="1.2.3"))

    with pytest.raises(ConfigurationError):
        manager.update(version=None)


def test_from_settings():
    manager = ConfigManager.from_settings()

    assert manager.get().version == settings.APP_VERSION
    assert manager.get().environment == settings.ENVIRONMENT
