"""Caller-owned registry of build selector kinds.

Frontends (CLI menus, pipeline configuration) look selector kinds up by a
stable short name. Menu order is driven by the priority given at
registration time: higher priorities come first, ties are ordered by short
name.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from buildops.core.selectors import BuildSelector, SpecificBuildSelector


@dataclass(frozen=True)
class SelectorEntry:
    """Registration metadata for one selector kind."""

    short_name: str
    label: str
    factory: Callable[..., BuildSelector]
    priority: int = 0


class SelectorRegistry:
    """Mapping of short names to selector kinds."""

    def __init__(self) -> None:
        self._entries: dict[str, SelectorEntry] = {}

    def register(
        self,
        short_name: str,
        label: str,
        factory: Callable[..., BuildSelector],
        *,
        priority: int = 0,
    ) -> SelectorEntry:
        """
        Register a selector kind.

        Raises:
            ValueError: If the short name is empty or already registered.
        """
        if not short_name:
            raise ValueError("Selector short name must not be empty.")
        if short_name in self._entries:
            raise ValueError(f"Selector '{short_name}' is already registered.")
        entry = SelectorEntry(
            short_name=short_name, label=label, factory=factory, priority=priority
        )
        self._entries[short_name] = entry
        return entry

    def get(self, short_name: str) -> SelectorEntry:
        """Return the entry for `short_name` (ValueError if unknown)."""
        try:
            return self._entries[short_name]
        except KeyError as exc:
            raise ValueError(f"Unknown selector: '{short_name}'") from exc

    def create(self, short_name: str, *args, **kwargs) -> BuildSelector:
        """Instantiate the selector registered under `short_name`."""
        return self.get(short_name).factory(*args, **kwargs)

    def entries(self) -> list[SelectorEntry]:
        """Return all entries in menu order."""
        return sorted(
            self._entries.values(), key=lambda e: (-e.priority, e.short_name)
        )

    def __contains__(self, short_name: object) -> bool:
        return short_name in self._entries

    def __len__(self) -> int:
        return len(self._entries)


def default_registry() -> SelectorRegistry:
    """Return a new registry holding the built-in selector kinds."""
    registry = SelectorRegistry()
    registry.register(
        "specificRun", "Specific build", SpecificBuildSelector, priority=-10
    )
    return registry
