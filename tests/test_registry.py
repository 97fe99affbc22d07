import pytest

from buildops.core.registry import SelectorRegistry, default_registry
from buildops.core.selectors import SpecificBuildSelector


def test_default_registry_contains_specific_run():
    registry = default_registry()
    entry = registry.get("specificRun")

    assert entry.label == "Specific build"
    assert entry.priority == -10
    assert isinstance(registry.create("specificRun", "42"), SpecificBuildSelector)


def test_entries_are_ordered_by_priority_then_name():
    registry = SelectorRegistry()
    registry.register("b", "B", SpecificBuildSelector)
    registry.register("low", "Low", SpecificBuildSelector, priority=-5)
    registry.register("a", "A", SpecificBuildSelector)
    registry.register("high", "High", SpecificBuildSelector, priority=10)

    assert [e.short_name for e in registry.entries()] == ["high", "a", "b", "low"]


def test_register_rejects_duplicates_and_empty_names():
    registry = SelectorRegistry()
    registry.register("x", "X", SpecificBuildSelector)

    with pytest.raises(ValueError, match="already registered"):
        registry.register("x", "X again", SpecificBuildSelector)
    with pytest.raises(ValueError, match="empty"):
        registry.register("", "Nameless", SpecificBuildSelector)


def test_unknown_selector():
    with pytest.raises(ValueError, match="Unknown selector"):
        default_registry().get("nope")


def test_registries_are_independent():
    first = default_registry()
    first.register("extra", "Extra", SpecificBuildSelector)

    assert "extra" in first
    assert "extra" not in default_registry()
    assert len(default_registry()) == 1
