import pytest

from nbgo_api.api.exceptions import (
    InvalidProviderNameError,
    ProviderAlreadyRegisteredError,
    ProviderNotFoundError,
)
from nbgo_api.services.providers import Provider, ProviderFactory, StaticProvider
from nbgo_api.services.registry import ProviderRegistry


def test_list_keeps_registration_order():
    registry = ProviderRegistry()
    for name in ["gamma", "alpha", "beta"]:
        registry.register(StaticProvider(name))

    assert [p.get_name() for p in registry.list()] == ["gamma", "alpha", "beta"]
    assert len(registry) == 3
    assert "alpha" in registry


def test_list_returns_snapshot():
    registry = ProviderRegistry([StaticProvider("alpha")])
    snapshot = registry.list()

    registry.register(StaticProvider("beta"))

    assert [p.get_name() for p in snapshot] == ["alpha"]


def test_duplicate_name_rejected():
    registry = ProviderRegistry([StaticProvider("alpha")])

    with pytest.raises(ProviderAlreadyRegisteredError):
        registry.register(StaticProvider("alpha"))


@pytest.mark.parametrize("name", ["", "   "])
def test_blank_name_rejected(name):
    with pytest.raises(InvalidProviderNameError):
        ProviderRegistry().register(StaticProvider(name))


def test_get_and_unregister():
    alpha = StaticProvider("alpha")
    registry = ProviderRegistry([alpha])

    assert registry.get("alpha") is alpha
    assert registry.unregister("alpha") is alpha
    assert "alpha" not in registry

    with pytest.raises(ProviderNotFoundError):
        registry.get("alpha")
    with pytest.raises(ProviderNotFoundError):
        registry.unregister("alpha")


def test_custom_provider_subclass():
    class FeedProvider(Provider):
        def get_name(self):
            return "feed"

    registry = ProviderRegistry([FeedProvider()])

    assert registry.get("feed").describe() == "feed provider"


def test_provider_requires_get_name():
    with pytest.raises(TypeError):
        Provider()


def test_factory_skips_blank_names():
    providers = ProviderFactory.from_names(["alpha", " ", "", " beta "])

    assert providers == [StaticProvider("alpha"), StaticProvider("beta")]


def test_factory_from_settings_override():
    assert ProviderFactory.from_settings(["alpha"]) == [StaticProvider("alpha")]
