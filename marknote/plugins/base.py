"""Plugin — a named text-to-text transform applied to note content before preview."""

from abc import ABC, abstractmethod


class Plugin(ABC):
    """A named markdown transform.

    Subclasses set ``name`` (unique across a registry; used as both the display
    label and the selection key) and document their behaviour through two
    capability flags:

    - ``pure``: output depends only on the input text (no clock, no I/O).
    - ``idempotent``: ``apply(apply(x)) == apply(x)`` for every ``x``.
    """

    name: str = ""
    description: str = ""
    pure: bool = True
    idempotent: bool = True

    @abstractmethod
    def apply(self, content: str) -> str:
        """Transform markdown content."""
        ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"
