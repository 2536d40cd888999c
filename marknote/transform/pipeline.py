"""TransformPipeline — folds the enabled plugins, in registry order, over note content."""

from __future__ import annotations

import logging
from typing import Callable

from marknote.plugins.base import Plugin
from marknote.plugins.registry import PluginRegistry
from marknote.plugins.selection import PluginSelection

logger = logging.getLogger(__name__)

TextTransform = Callable[[str], str]


def identity(content: str) -> str:
    return content


def resolve_or_identity(registry: PluginRegistry, name: str) -> TextTransform:
    """Return the named plugin's transform, or the identity if it isn't registered."""
    plugin = registry.get(name)
    if plugin is None:
        return identity
    return plugin.apply


class TransformPipeline:
    """Composes the selected plugins into a single ``apply(content)``.

    The selection is read on every call, so toggles take effect on the next
    apply. Composition follows registry order regardless of the order in which
    plugins were toggled.
    """

    def __init__(self, registry: PluginRegistry, selection: PluginSelection):
        self.registry = registry
        self.selection = selection

    def active_plugins(self) -> list[Plugin]:
        return [p for p in self.registry if self.selection.is_active(p.name)]

    def apply(self, content: str) -> str:
        for name in self.registry.names():
            if not self.selection.is_active(name):
                continue
            transform = resolve_or_identity(self.registry, name)
            try:
                content = transform(content)
            except Exception:
                logger.exception("plugin %r failed, leaving content unchanged", name)
        return content
