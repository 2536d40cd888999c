"""Workspace — the single owner of editor state and its narrow mutation API."""

from __future__ import annotations

import logging

from pydantic import BaseModel, ConfigDict

from marknote.config.models import MarknoteConfig
from marknote.documents.models import Note
from marknote.documents.store import DEFAULT_STARTER_TEMPLATE, NoteStore
from marknote.editor.mode import DisplayView, RenderMode, RenderModeController
from marknote.plugins.registry import PluginRegistry, default_registry
from marknote.plugins.selection import PluginSelection
from marknote.render.base import MarkdownRenderer
from marknote.render.markdown import MarkItRenderer
from marknote.theme import THEMES, Theme, ThemeState
from marknote.transform.pipeline import TransformPipeline

logger = logging.getLogger(__name__)


class NoteListItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    selected: bool


class PluginOption(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    active: bool
    pure: bool
    idempotent: bool


class ThemeOption(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    css_class: str
    current: bool


class Workspace:
    """Wires the note store, plugin selection, pipeline, mode switch and theme.

    Presentation code reads the view methods and changes state only through
    the mutation methods below.
    """

    def __init__(
        self,
        store: NoteStore | None = None,
        registry: PluginRegistry | None = None,
        selection: PluginSelection | None = None,
        renderer: MarkdownRenderer | None = None,
        themes: ThemeState | None = None,
        starter_template: str = DEFAULT_STARTER_TEMPLATE,
        seed_examples: bool = True,
        initial_mode: RenderMode = RenderMode.edit,
        initial_theme: str | None = None,
    ):
        self.starter_template = starter_template
        self.seed_examples = seed_examples
        self.store = store if store is not None else self._fresh_store()
        self.registry = registry if registry is not None else default_registry()
        self.selection = selection if selection is not None else PluginSelection()
        self.pipeline = TransformPipeline(self.registry, self.selection)
        self.mode = RenderModeController(self.pipeline, renderer or MarkItRenderer())
        self.themes = themes if themes is not None else ThemeState(THEMES)
        self.plugin_panel_open = False
        # restored by reset()
        self.initial_plugins = self.selection.names()
        self.initial_mode = initial_mode
        self.initial_theme = initial_theme or self.themes.default.name
        self._apply_startup_view()

    @classmethod
    def from_config(cls, config: MarknoteConfig, renderer: MarkdownRenderer | None = None) -> Workspace:
        return cls(
            registry=default_registry(config.plugins.timestamp_format),
            selection=PluginSelection(config.plugins.enabled),
            renderer=renderer or MarkItRenderer(config.renderer),
            starter_template=config.editor.starter_template,
            seed_examples=config.editor.seed_examples,
            initial_mode=RenderMode(config.editor.initial_mode),
            initial_theme=config.theme.default,
        )

    def _apply_startup_view(self) -> None:
        self.mode.set_mode(self.initial_mode)
        if not self.themes.set_theme_by_name(self.initial_theme):
            logger.warning("unknown default theme %r, using %r", self.initial_theme, self.themes.default.name)
            self.initial_theme = self.themes.default.name
            self.themes.set_theme(self.themes.default)

    def _fresh_store(self) -> NoteStore:
        if self.seed_examples:
            return NoteStore.seeded(self.starter_template)
        return NoteStore(self.starter_template)

    # -- Mutations -----------------------------------------------------------

    def create_note(self, title: str) -> Note | None:
        return self.store.create(title)

    def edit(self, content: str) -> Note | None:
        """Replace the selected note's content. No-op without a selection."""
        note_id = self.store.selected_id
        if note_id is None:
            return None
        return self.store.update_content(note_id, content)

    def select_note(self, note_id: str | None) -> None:
        self.store.select(note_id)

    def toggle_plugin(self, name: str) -> bool:
        return self.selection.toggle(name)

    def toggle_mode(self) -> RenderMode:
        return self.mode.toggle()

    def set_theme(self, theme: Theme | str) -> bool:
        if isinstance(theme, str):
            return self.themes.set_theme_by_name(theme)
        self.themes.set_theme(theme)
        return True

    def open_plugin_panel(self) -> None:
        self.plugin_panel_open = True

    def close_plugin_panel(self) -> None:
        self.plugin_panel_open = False

    def reset(self) -> None:
        """Back to the startup state: fresh notes, the configured plugins, mode and theme."""
        self.store = self._fresh_store()
        self.selection.clear()
        for name in self.initial_plugins:
            self.selection.toggle(name)
        self._apply_startup_view()
        self.plugin_panel_open = False

    # -- Views ---------------------------------------------------------------

    @property
    def selected_note(self) -> Note | None:
        return self.store.selected

    @property
    def root_class(self) -> str:
        return self.themes.css_class

    def view(self) -> DisplayView:
        return self.mode.display(self.store.selected)

    def note_list(self) -> list[NoteListItem]:
        selected_id = self.store.selected_id
        return [
            NoteListItem(id=n.id, title=n.title, selected=n.id == selected_id)
            for n in self.store.notes()
        ]

    def plugin_checklist(self) -> list[PluginOption]:
        return [
            PluginOption(
                name=p.name,
                description=p.description,
                active=self.selection.is_active(p.name),
                pure=p.pure,
                idempotent=p.idempotent,
            )
            for p in self.registry
        ]

    def theme_options(self) -> list[ThemeOption]:
        current = self.themes.current
        return [
            ThemeOption(name=t.name, css_class=t.css_class, current=t == current)
            for t in self.themes.catalog
        ]
