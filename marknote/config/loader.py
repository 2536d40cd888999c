"""YAML config loading with env var expansion."""

import logging
import os
import re
from pathlib import Path

import yaml
from pydantic import ValidationError

from .models import MarknoteConfig

logger = logging.getLogger(__name__)

_ENV_REF = re.compile(r"\$\{(\w+)\}")


def _candidate_paths(cli_path: str | None) -> list[Path]:
    """Config files in priority order: CLI, project-local, user-global."""
    paths = [Path("./marknote.yaml"), Path.home() / ".marknote" / "config.yaml"]
    if cli_path:
        explicit = Path(cli_path)
        if not explicit.exists():
            logger.warning("config file %s not found, falling back", explicit)
        paths.insert(0, explicit)
    return paths


def _read_yaml(path: Path) -> object:
    try:
        return yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {path}: {e}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise ValueError(f"Cannot read config {path}: {e}") from e


def load_config(cli_path: str | None = None) -> MarknoteConfig:
    """Load config with resolution order: CLI > project-local > user-global > defaults."""
    for path in _candidate_paths(cli_path):
        if not path.exists():
            continue
        raw = _read_yaml(path)
        if raw is None:
            logger.debug("config file %s is empty, skipping", path)
            continue
        try:
            config = MarknoteConfig(**_expand_env_vars(raw))
        except (TypeError, ValidationError) as e:
            raise ValueError(f"Invalid config in {path}: {e}") from e
        logger.debug("loaded config from %s", path)
        return config

    logger.debug("no config file found, using defaults")
    return MarknoteConfig()


def _expand_env_vars(obj: object) -> object:
    """Recursively expand ${VAR} references in strings."""
    if isinstance(obj, str):
        return _ENV_REF.sub(lambda m: os.environ.get(m.group(1), ""), obj)
    elif isinstance(obj, dict):
        return {k: _expand_env_vars(v) for k, v in obj.items()}
    elif isinstance(obj, list):
        return [_expand_env_vars(v) for v in obj]
    return obj


# Default YAML template for `marknote config init`
DEFAULT_CONFIG_TEMPLATE = """\
# marknote.yaml

# Editor
editor:
  starter_template: "# {title}\\n\\nStart writing your note here..."
  initial_mode: "edit"           # edit | preview
  seed_examples: true            # start with the Welcome and Features notes

# Content plugins (applied in registry order before preview)
plugins:
  enabled: []                    # e.g. ["Uppercase Headings", "Add Timestamp"]
  timestamp_format: "%c"         # strftime format for the "Last edited" banner

# Markdown renderer
renderer:
  preset: "commonmark"           # commonmark | default | zero
  tables: true
  strikethrough: true

# Theme
theme:
  default: "Light"               # Light | Dark | Sepia

# Logging
log_level: "info"              # debug | info | warn | error
log_format: "text"             # text | json
"""
