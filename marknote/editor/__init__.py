"""Edit / Preview mode handling."""

from .mode import DisplayView, RenderMode, RenderModeController

__all__ = ["DisplayView", "RenderMode", "RenderModeController"]
