"""Markdown renderer interface."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class MarkdownRenderer(Protocol):
    """Converts markdown text to an HTML fragment. Expected to be total."""

    def render(self, text: str) -> str: ...
