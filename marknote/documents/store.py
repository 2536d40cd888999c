"""NoteStore — owns every note and the pointer to the currently selected one."""

from __future__ import annotations

import logging
from collections.abc import Iterator

from marknote.documents.models import Note

logger = logging.getLogger(__name__)

DEFAULT_STARTER_TEMPLATE = "# {title}\n\nStart writing your note here..."

WELCOME_CONTENT = """\
# Welcome

This is a small markdown notebook. Pick a note on the left, type in the
editor, and switch to **Preview** to see it rendered.

## Getting started

- Create a note with a title
- Write markdown in the editor
- Toggle preview to render it
"""

FEATURES_CONTENT = """\
# Features

## Plugins

Enable plugins to transform a note before it is previewed:

- **Uppercase Headings** upper-cases every heading
- **Add Timestamp** prepends a *Last edited* banner

## Themes

Switch between the Light, Dark and Sepia themes at any time.
"""


class NoteStore:
    """Ordered collection of notes plus a selected-note pointer.

    The selection is stored as an id and resolved against the collection on
    every read, so the selected view can never drift from the stored note.
    """

    def __init__(self, starter_template: str = DEFAULT_STARTER_TEMPLATE):
        self.starter_template = starter_template
        self._notes: dict[str, Note] = {}
        self._selected_id: str | None = None

    @classmethod
    def seeded(cls, starter_template: str = DEFAULT_STARTER_TEMPLATE) -> NoteStore:
        """A store holding the Welcome and Features example notes, Welcome selected."""
        store = cls(starter_template=starter_template)
        welcome = Note(title="Welcome", content=WELCOME_CONTENT)
        features = Note(title="Features", content=FEATURES_CONTENT)
        store._notes[welcome.id] = welcome
        store._notes[features.id] = features
        store._selected_id = welcome.id
        return store

    # -- Queries -------------------------------------------------------------

    @property
    def selected_id(self) -> str | None:
        return self._selected_id

    @property
    def selected(self) -> Note | None:
        if self._selected_id is None:
            return None
        return self._notes.get(self._selected_id)

    def get(self, note_id: str) -> Note | None:
        return self._notes.get(note_id)

    def notes(self) -> tuple[Note, ...]:
        return tuple(self._notes.values())

    def __iter__(self) -> Iterator[Note]:
        return iter(self.notes())

    def __len__(self) -> int:
        return len(self._notes)

    def __contains__(self, note_id: object) -> bool:
        return note_id in self._notes

    # -- Mutations -----------------------------------------------------------

    def create(self, title: str) -> Note | None:
        """Create and select a note. Returns None for an empty or blank title."""
        if not title or not title.strip():
            logger.debug("ignoring note creation with blank title")
            return None
        note = Note(title=title, content=self.starter_template.replace("{title}", title))
        while note.id in self._notes:
            note = Note(title=note.title, content=note.content)
        self._notes[note.id] = note
        self._selected_id = note.id
        logger.info("created note %s (%r)", note.id, title)
        return note

    def update_content(self, note_id: str, content: str) -> Note | None:
        """Replace a note's content wholesale.

        Ignored when nothing is selected or ``note_id`` is unknown.
        """
        if self._selected_id is None:
            logger.debug("ignoring content update: no note selected")
            return None
        current = self._notes.get(note_id)
        if current is None:
            logger.debug("ignoring content update for unknown note %s", note_id)
            return None
        updated = current.model_copy(update={"content": content})
        self._notes[note_id] = updated
        return updated

    def select(self, note_id: str | None) -> None:
        """Point the selection at ``note_id``, or clear it with None."""
        if note_id is not None and note_id not in self._notes:
            logger.debug("ignoring selection of unknown note %s", note_id)
            return
        self._selected_id = note_id
