"""Note model."""

from __future__ import annotations

import uuid

from pydantic import BaseModel, ConfigDict, Field


def new_note_id() -> str:
    return uuid.uuid4().hex


class Note(BaseModel):
    """A titled unit of markdown text.

    Frozen: content edits go through ``NoteStore.update_content``, which swaps
    in a new instance rather than mutating one a caller may be holding.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=new_note_id, min_length=1)
    title: str
    content: str = ""
