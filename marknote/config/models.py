from pydantic import BaseModel, Field
from typing import Literal


class EditorConfig(BaseModel):
    starter_template: str = "# {title}\n\nStart writing your note here..."
    initial_mode: Literal["edit", "preview"] = "edit"
    seed_examples: bool = True


class PluginsConfig(BaseModel):
    enabled: list[str] = Field(default_factory=list)
    timestamp_format: str = "%c"


class RendererConfig(BaseModel):
    preset: Literal["commonmark", "default", "zero"] = "commonmark"
    tables: bool = True
    strikethrough: bool = True


class ThemeConfig(BaseModel):
    default: str = "Light"


class MarknoteConfig(BaseModel):
    editor: EditorConfig = Field(default_factory=EditorConfig)
    plugins: PluginsConfig = Field(default_factory=PluginsConfig)
    renderer: RendererConfig = Field(default_factory=RendererConfig)
    theme: ThemeConfig = Field(default_factory=ThemeConfig)
    log_level: Literal["debug", "info", "warn", "error"] = "info"
    log_format: Literal["text", "json"] = "text"
