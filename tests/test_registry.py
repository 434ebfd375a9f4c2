# tests/test_registry.py
"""
Tests for the provider registry.

- Discovery finds providers in scanned modules
- Manual registration checks the capability and the name attribute
- Lookup errors list the available providers
"""

from __future__ import annotations

import threading

import pytest

from capkit.core.registry import (
    DuplicateProviderError,
    ProviderNotFoundError,
    ProviderRegistry,
    ProviderRegistryError,
)
from capkit.examples.genealogy import (
    BROWSERS,
    RELATIONSHIP_BROWSER,
    ParentIndex,
    Relationships,
    Research,
)
from capkit.gateway import Capability, Operation

pytestmark = pytest.mark.tier1

GREETING = Capability.of("greeting", Operation("greet", arity=1))


class English:
    provider_name = "english"

    def greet(self, name):
        return f"Hello {name}"


class French:
    provider_name = "french"

    def greet(self, name):
        return f"Bonjour {name}"


class AlsoEnglish:
    provider_name = "english"

    def greet(self, name):
        return f"Hi {name}"


class Mute:
    provider_name = "mute"


class Anonymous:
    def greet(self, name):
        return name


def make_registry() -> ProviderRegistry:
    return ProviderRegistry(name="greeting", capability=GREETING)


# =============================================================================
# Discovery
# =============================================================================


def test_registry_discovers_example_providers():
    assert BROWSERS.list_available() == ["parent_index", "relationships"]
    assert BROWSERS.get("relationships") is Relationships
    assert BROWSERS.get("parent_index") is ParentIndex


def test_discovered_provider_feeds_a_consumer(family):
    parent, children = family
    store = BROWSERS.get("parent_index")()
    for child in children:
        store.add_parent_and_child(parent, child)

    assert Research(store).report("John") == [
        "John has a child named Chris",
        "John has a child named Matt",
    ]


def test_discovery_skips_unimportable_packages():
    registry = ProviderRegistry(
        name="browser",
        capability=RELATIONSHIP_BROWSER,
        scan_packages=["capkit.does_not_exist", "capkit.examples"],
    )

    assert registry.list_available() == ["parent_index", "relationships"]


# =============================================================================
# Manual registration
# =============================================================================


def test_register_and_get():
    registry = make_registry()
    registry.register(English)
    registry.register(French)

    assert registry.list_available() == ["english", "french"]
    assert registry.get("french")().greet("Ann") == "Bonjour Ann"
    assert registry.providers() == {"english": English, "french": French}


def test_register_works_as_decorator():
    registry = make_registry()

    @registry.register
    class German:
        provider_name = "german"

        def greet(self, name):
            return f"Hallo {name}"

    assert registry.get("german") is German


def test_register_same_class_twice_is_idempotent():
    registry = make_registry()
    registry.register(English)
    registry.register(English)

    assert registry.list_available() == ["english"]


def test_duplicate_name_rejected():
    registry = make_registry()
    registry.register(English)

    with pytest.raises(DuplicateProviderError) as exc_info:
        registry.register(AlsoEnglish)

    assert "english" in str(exc_info.value)


def test_provider_without_capability_rejected():
    with pytest.raises(ProviderRegistryError) as exc_info:
        make_registry().register(Mute)

    assert "greet (absent)" in str(exc_info.value)


def test_provider_without_name_rejected():
    with pytest.raises(ProviderRegistryError):
        make_registry().register(Anonymous)


def test_unknown_provider_error_is_helpful():
    registry = make_registry()
    registry.register(English)

    with pytest.raises(ProviderNotFoundError) as exc_info:
        registry.get("klingon")

    message = str(exc_info.value)
    assert "klingon" in message
    assert "Available" in message
    assert "english" in message


def test_concurrent_registration_keeps_every_provider():
    registry = make_registry()
    classes = [
        type(f"Lang{i}", (), {"provider_name": f"lang{i}", "greet": lambda self, name: name})
        for i in range(50)
    ]

    threads = [threading.Thread(target=registry.register, args=(cls,)) for cls in classes]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(registry.list_available()) == 50
