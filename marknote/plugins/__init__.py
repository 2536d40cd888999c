"""Content plugins: the fixed registry and the user's enabled selection."""

from marknote.plugins.base import Plugin
from marknote.plugins.builtin import AddTimestamp, UppercaseHeadings, builtin_plugins
from marknote.plugins.registry import DuplicatePluginError, PluginRegistry, default_registry
from marknote.plugins.selection import PluginSelection

__all__ = [
    "AddTimestamp",
    "DuplicatePluginError",
    "Plugin",
    "PluginRegistry",
    "PluginSelection",
    "UppercaseHeadings",
    "builtin_plugins",
    "default_registry",
]
