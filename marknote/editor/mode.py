"""RenderModeController — the Edit / Preview switch and what each mode displays."""

from __future__ import annotations

import logging
from enum import Enum

from pydantic import BaseModel, ConfigDict

from marknote.documents.models import Note
from marknote.render.base import MarkdownRenderer
from marknote.transform.pipeline import TransformPipeline

logger = logging.getLogger(__name__)


class RenderMode(str, Enum):
    """What the editor pane shows for the selected note."""

    edit = "edit"
    preview = "preview"


class DisplayView(BaseModel):
    """The body shown for the selected note in the current mode.

    ``body`` is raw markdown in edit mode and HTML in preview mode. ``fallback``
    is set when the renderer failed and the raw content is shown instead.
    """

    model_config = ConfigDict(frozen=True)

    mode: RenderMode
    note_id: str | None = None
    body: str = ""
    editable: bool = False
    fallback: bool = False


class RenderModeController:
    def __init__(
        self,
        pipeline: TransformPipeline,
        renderer: MarkdownRenderer,
        mode: RenderMode = RenderMode.edit,
    ):
        self.pipeline = pipeline
        self.renderer = renderer
        self._mode = RenderMode(mode)

    @property
    def mode(self) -> RenderMode:
        return self._mode

    @property
    def is_preview(self) -> bool:
        return self._mode is RenderMode.preview

    def set_mode(self, mode: RenderMode) -> None:
        self._mode = RenderMode(mode)

    def toggle(self) -> RenderMode:
        self._mode = RenderMode.edit if self.is_preview else RenderMode.preview
        logger.debug("render mode -> %s", self._mode.value)
        return self._mode

    def display(self, note: Note | None) -> DisplayView:
        if note is None:
            return DisplayView(mode=self._mode)
        if self._mode is RenderMode.edit:
            return DisplayView(mode=self._mode, note_id=note.id, body=note.content, editable=True)
        return self._preview(note)

    def _preview(self, note: Note) -> DisplayView:
        transformed = self.pipeline.apply(note.content)
        try:
            html = self.renderer.render(transformed)
        except Exception:
            logger.exception("markdown render failed for note %s, showing raw content", note.id)
            return DisplayView(mode=self._mode, note_id=note.id, body=note.content, fallback=True)
        return DisplayView(mode=self._mode, note_id=note.id, body=html)
