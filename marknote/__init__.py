"""marknote - markdown notes with an ordered plugin pipeline applied before preview."""

from marknote.config import MarknoteConfig, load_config
from marknote.documents import Note, NoteStore
from marknote.editor import DisplayView, RenderMode, RenderModeController
from marknote.plugins import Plugin, PluginRegistry, PluginSelection, default_registry
from marknote.render import MarkdownRenderer, MarkItRenderer
from marknote.theme import THEMES, Theme, ThemeState
from marknote.transform import TransformPipeline
from marknote.workspace import Workspace

__version__ = "0.1.0"

__all__ = [
    "DisplayView",
    "MarkItRenderer",
    "MarkdownRenderer",
    "MarknoteConfig",
    "Note",
    "NoteStore",
    "Plugin",
    "PluginRegistry",
    "PluginSelection",
    "RenderMode",
    "RenderModeController",
    "THEMES",
    "Theme",
    "ThemeState",
    "TransformPipeline",
    "Workspace",
    "default_registry",
    "load_config",
]
