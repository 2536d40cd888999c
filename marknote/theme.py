"""Workspace theme catalog and the process-wide current theme."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Callable

from pydantic import BaseModel, ConfigDict

logger = logging.getLogger(__name__)


class Theme(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    css_class: str


THEMES: tuple[Theme, ...] = (
    Theme(name="Light", css_class="theme-light"),
    Theme(name="Dark", css_class="theme-dark"),
    Theme(name="Sepia", css_class="theme-sepia"),
)

ThemeObserver = Callable[[Theme], None]


class ThemeState:
    """Holds the current theme and notifies observers on every change.

    Observers get the new theme each time; they are expected to re-derive any
    presentation state from it rather than keep the old one.
    """

    def __init__(self, catalog: Iterable[Theme] = THEMES):
        self.catalog: tuple[Theme, ...] = tuple(catalog)
        if not self.catalog:
            raise ValueError("theme catalog cannot be empty")
        self._current = self.catalog[0]
        self._observers: list[ThemeObserver] = []

    @property
    def current(self) -> Theme:
        return self._current

    @property
    def default(self) -> Theme:
        return self.catalog[0]

    @property
    def css_class(self) -> str:
        return self._current.css_class

    def find(self, name: str) -> Theme | None:
        return next((t for t in self.catalog if t.name == name), None)

    def set_theme(self, theme: Theme) -> None:
        if theme not in self.catalog:
            logger.warning("theme %r is not in the catalog", theme.name)
        self._current = theme
        for observer in list(self._observers):
            observer(theme)

    def set_theme_by_name(self, name: str) -> bool:
        theme = self.find(name)
        if theme is None:
            logger.debug("ignoring unknown theme %r", name)
            return False
        self.set_theme(theme)
        return True

    def subscribe(self, observer: ThemeObserver) -> Callable[[], None]:
        """Register an observer. Returns a callable that unregisters it."""
        self._observers.append(observer)

        def _unsubscribe() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return _unsubscribe
