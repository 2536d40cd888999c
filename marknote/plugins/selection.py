"""PluginSelection — the set of plugin names currently enabled."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

logger = logging.getLogger(__name__)


class PluginSelection:
    """Order-independent membership set keyed by plugin name.

    Names are not validated against any registry: an unknown name can be
    toggled on and simply has no effect when the pipeline runs.
    """

    def __init__(self, names: Iterable[str] = ()):
        self._names: set[str] = set(names)

    def toggle(self, name: str) -> bool:
        """Flip membership of ``name``. Returns the new state."""
        if name in self._names:
            self._names.discard(name)
            active = False
        else:
            self._names.add(name)
            active = True
        logger.debug("plugin %r %s", name, "enabled" if active else "disabled")
        return active

    def is_active(self, name: str) -> bool:
        return name in self._names

    def clear(self) -> None:
        self._names.clear()

    def names(self) -> frozenset[str]:
        return frozenset(self._names)

    def __contains__(self, name: object) -> bool:
        return name in self._names

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._names))

    def __len__(self) -> int:
        return len(self._names)

    def __repr__(self) -> str:
        return f"PluginSelection({sorted(self._names)!r})"
