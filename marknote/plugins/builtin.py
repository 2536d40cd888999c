"""Built-in content plugins."""

from __future__ import annotations

import re
from datetime import datetime
from typing import Callable

from .base import Plugin

# A heading line: run of '#', optional spaces or tabs, then the heading text
_HEADING_RE = re.compile(r"^(#+)([ \t]*)(.*)$", re.MULTILINE)


class UppercaseHeadings(Plugin):
    name = "Uppercase Headings"
    description = "Upper-case the text of every markdown heading."

    def apply(self, content: str) -> str:
        return _HEADING_RE.sub(_upper_heading, content)


def _upper_heading(m: re.Match) -> str:
    return f"{m.group(1)}{m.group(2)}{m.group(3).upper()}"


class AddTimestamp(Plugin):
    """Prepend a ``Last edited: <now>`` banner.

    The clock is read on every call, so the output changes over time and each
    application stacks another banner on top of the previous one.
    """

    name = "Add Timestamp"
    description = "Prepend a 'Last edited' banner with the current date and time."
    pure = False
    idempotent = False

    def __init__(self, fmt: str = "%c", clock: Callable[[], datetime] | None = None):
        self.fmt = fmt
        self._clock = clock or datetime.now

    def apply(self, content: str) -> str:
        stamp = self._clock().strftime(self.fmt)
        return f"Last edited: {stamp}\n\n{content}"


def builtin_plugins(timestamp_format: str = "%c") -> list[Plugin]:
    """Reference plugins in their fixed composition order."""
    return [UppercaseHeadings(), AddTimestamp(fmt=timestamp_format)]
