from .loader import load_config
from .models import (
    EditorConfig,
    MarknoteConfig,
    PluginsConfig,
    RendererConfig,
    ThemeConfig,
)

__all__ = [
    "EditorConfig",
    "MarknoteConfig",
    "PluginsConfig",
    "RendererConfig",
    "ThemeConfig",
    "load_config",
]
