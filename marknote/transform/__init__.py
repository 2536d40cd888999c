"""Transform pipeline applied to note content before markdown rendering."""

from .pipeline import TextTransform, TransformPipeline, identity, resolve_or_identity

__all__ = [
    "TextTransform",
    "TransformPipeline",
    "identity",
    "resolve_or_identity",
]
