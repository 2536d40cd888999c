"""PluginRegistry — the fixed, ordered catalog of available plugins."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from types import MappingProxyType

from .base import Plugin
from .builtin import builtin_plugins


class DuplicatePluginError(Exception):
    """Raised when two plugins in one registry share a name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Plugin name '{name}' is registered more than once")


class PluginRegistry:
    """Immutable ordered mapping of plugin name -> Plugin.

    Iteration order is the composition order used by the transform pipeline.
    """

    def __init__(self, plugins: Iterable[Plugin]):
        entries: dict[str, Plugin] = {}
        for plugin in plugins:
            if plugin.name in entries:
                raise DuplicatePluginError(plugin.name)
            entries[plugin.name] = plugin
        self._entries = MappingProxyType(entries)

    def get(self, name: str) -> Plugin | None:
        """Return the named plugin, or None if it isn't registered."""
        return self._entries.get(name)

    def names(self) -> list[str]:
        return list(self._entries)

    def __iter__(self) -> Iterator[Plugin]:
        return iter(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __repr__(self) -> str:
        return f"PluginRegistry({self.names()!r})"


def default_registry(timestamp_format: str = "%c") -> PluginRegistry:
    return PluginRegistry(builtin_plugins(timestamp_format))
