"""markdown-it based renderer used for note previews."""

from __future__ import annotations

from markdown_it import MarkdownIt

from marknote.config.models import RendererConfig


class MarkItRenderer:
    """Renders markdown to HTML with markdown-it-py.

    Raw HTML in notes is passed through; the output is not sanitized.
    """

    def __init__(self, config: RendererConfig | None = None) -> None:
        self.config = config or RendererConfig()
        self._md = MarkdownIt(self.config.preset, {"html": True})
        if self.config.tables:
            self._md.enable("table")
        if self.config.strikethrough:
            self._md.enable("strikethrough")

    def render(self, text: str) -> str:
        return self._md.render(text)
