import pytest

from polis_core.implementation import Implementation
from polis_core.registry import (
    FRAMEWORK_SUPPORTED_IMPLEMENTATIONS,
    SupportedImplementations,
    resolve_registry,
)
from polis_core.util.pytest import registry_of


def test_framework_registry():
    assert len(FRAMEWORK_SUPPORTED_IMPLEMENTATIONS) >= 1
    current = Implementation.from_str("json/static_data/0.2.0-alpha.1")
    assert FRAMEWORK_SUPPORTED_IMPLEMENTATIONS.is_supported(current)
    assert current in FRAMEWORK_SUPPORTED_IMPLEMENTATIONS
    # XML is declared, but not implemented by any revision yet
    for impl in FRAMEWORK_SUPPORTED_IMPLEMENTATIONS:
        assert impl.data_format.value == "json"


def test_xml_never_supported(xml_impl):
    assert not FRAMEWORK_SUPPORTED_IMPLEMENTATIONS.is_supported(xml_impl)


def test_registry_empty():
    with pytest.raises(ValueError):
        SupportedImplementations([])


def test_registry_wrong_type():
    with pytest.raises(TypeError):
        SupportedImplementations(["json/static_data/0.2.0"])


def test_registry_immutable(test_registry):
    with pytest.raises(AttributeError):
        test_registry._items = ()


def test_registry_dedup(current_impl):
    reg = SupportedImplementations([current_impl, current_impl])
    assert len(reg) == 1
    assert reg == registry_of("json/static_data/0.2.0-alpha.1")


def test_negotiate(test_registry, old_impl, current_impl, xml_impl):
    candidates = [xml_impl, current_impl, old_impl, current_impl]
    assert test_registry.negotiate(candidates) == [current_impl, old_impl]
    assert test_registry.negotiate([xml_impl]) == []
    assert test_registry.negotiate([]) == []


def test_oldest_latest():
    reg = registry_of(
        "json/dynamic_status/0.1.0",
        "json/static_data/0.2.0-alpha.1",
        "json/static_data/0.1.0",
        "xml/static_data/0.1.0",
    )
    assert str(reg.oldest()) == "json/static_data/0.1.0"
    assert str(reg.latest()) == "json/static_data/0.2.0-alpha.1"


def test_resolve_registry(test_registry):
    assert resolve_registry() is FRAMEWORK_SUPPORTED_IMPLEMENTATIONS
    assert resolve_registry(test_registry) is test_registry
