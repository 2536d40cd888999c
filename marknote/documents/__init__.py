"""In-memory note storage and selection."""

from .models import Note, new_note_id
from .store import DEFAULT_STARTER_TEMPLATE, NoteStore

__all__ = ["DEFAULT_STARTER_TEMPLATE", "Note", "NoteStore", "new_note_id"]
