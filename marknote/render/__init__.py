"""Markdown rendering for preview mode."""

from .base import MarkdownRenderer
from .markdown import MarkItRenderer

__all__ = ["MarkItRenderer", "MarkdownRenderer"]
