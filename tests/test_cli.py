"""Tests for the marknote CLI."""

from __future__ import annotations

import locale
from pathlib import Path

import pytest
from typer.testing import CliRunner

from marknote.cli import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def _isolated(tmp_path, monkeypatch):
    """Run every command from an empty directory with no user config or log handlers."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr("pathlib.Path.home", lambda: tmp_path / "fakehome")
    monkeypatch.setattr("marknote.cli.configure_logging", lambda *args, **kwargs: None)
    monkeypatch.setattr("marknote.cli.locale.setlocale", lambda *args: "C")


def _write_note(tmp_path: Path, content: str = "# hello\nworld") -> Path:
    path = tmp_path / "note.md"
    path.write_text(content)
    return path


# ── marknote render ─────────────────────────────────────────────────


def test_render_without_plugins_is_identity(tmp_path: Path):
    path = _write_note(tmp_path)
    result = runner.invoke(app, ["render", str(path)])
    assert result.exit_code == 0
    assert result.output == "# hello\nworld\n"


def test_render_with_uppercase_plugin(tmp_path: Path):
    path = _write_note(tmp_path)
    result = runner.invoke(app, ["render", str(path), "--plugin", "Uppercase Headings"])
    assert result.exit_code == 0
    assert "# HELLO\nworld" in result.output


def test_render_with_timestamp_plugin(tmp_path: Path):
    path = _write_note(tmp_path)
    result = runner.invoke(app, ["render", str(path), "-p", "Add Timestamp", "-p", "Uppercase Headings"])
    assert result.exit_code == 0
    assert result.output.startswith("Last edited: ")
    assert result.output.count("Last edited:") == 1
    assert result.output.endswith("\n\n# HELLO\nworld\n")


def test_render_unknown_plugin_is_ignored(tmp_path: Path):
    path = _write_note(tmp_path)
    result = runner.invoke(app, ["render", str(path), "-p", "Nope"])
    assert result.exit_code == 0
    assert result.output == "# hello\nworld\n"


def test_render_html(tmp_path: Path):
    path = _write_note(tmp_path)
    result = runner.invoke(app, ["render", str(path), "-p", "Uppercase Headings", "--html"])
    assert result.exit_code == 0
    assert "<h1>HELLO</h1>" in result.output
    assert "<p>world</p>" in result.output


def test_render_missing_file(tmp_path: Path):
    result = runner.invoke(app, ["render", str(tmp_path / "missing.md")])
    assert result.exit_code == 1
    assert "Error" in result.output


def test_render_rejects_non_utf8_file(tmp_path: Path):
    path = tmp_path / "bad.md"
    path.write_bytes(b"# caf\xe9\n")
    result = runner.invoke(app, ["render", str(path)])
    assert result.exit_code == 1
    assert "Error" in result.output
    assert "cannot read" in result.output


def test_render_uses_configured_plugins_without_flags(tmp_path: Path):
    cfg = tmp_path / "marknote.yaml"
    cfg.write_text("plugins:\n  enabled: [Uppercase Headings]\n")
    path = _write_note(tmp_path)
    result = runner.invoke(app, ["--config", str(cfg), "render", str(path)])
    assert result.exit_code == 0
    assert result.output == "# HELLO\nworld\n"


def test_render_flags_replace_configured_plugins(tmp_path: Path):
    cfg = tmp_path / "marknote.yaml"
    cfg.write_text("plugins:\n  enabled: [Uppercase Headings]\n")
    path = _write_note(tmp_path)
    result = runner.invoke(app, ["--config", str(cfg), "render", str(path), "-p", "Nope"])
    assert result.exit_code == 0
    assert result.output == "# hello\nworld\n"


# ── listing commands ────────────────────────────────────────────────


def test_plugins_lists_registry():
    result = runner.invoke(app, ["plugins"])
    assert result.exit_code == 0
    assert "Uppercase Headings" in result.output
    assert "Add Timestamp" in result.output


def test_themes_lists_catalog():
    result = runner.invoke(app, ["themes"])
    assert result.exit_code == 0
    for name in ("Light", "Dark", "Sepia"):
        assert name in result.output


def test_notes_lists_examples():
    result = runner.invoke(app, ["notes"])
    assert result.exit_code == 0
    assert "Welcome" in result.output
    assert "Features" in result.output


def test_notes_empty_when_examples_disabled(tmp_path: Path):
    cfg = tmp_path / "marknote.yaml"
    cfg.write_text("editor:\n  seed_examples: false\n")
    result = runner.invoke(app, ["notes"])
    assert result.exit_code == 0
    assert "No notes" in result.output


# ── config commands ─────────────────────────────────────────────────


def test_config_init_writes_template(tmp_path: Path):
    result = runner.invoke(app, ["config", "init"])
    assert result.exit_code == 0
    assert (tmp_path / "marknote.yaml").is_file()


def test_config_init_refuses_overwrite(tmp_path: Path):
    (tmp_path / "marknote.yaml").write_text("log_level: debug\n")
    result = runner.invoke(app, ["config", "init"])
    assert result.exit_code == 1
    assert (tmp_path / "marknote.yaml").read_text() == "log_level: debug\n"


def test_config_init_force_and_path(tmp_path: Path):
    target = tmp_path / "conf" / "custom.yaml"
    result = runner.invoke(app, ["config", "init", "--path", str(target)])
    assert result.exit_code == 0
    assert target.is_file()
    result = runner.invoke(app, ["config", "init", "--path", str(target), "--force"])
    assert result.exit_code == 0


def test_config_show():
    result = runner.invoke(app, ["config", "show"])
    assert result.exit_code == 0
    assert "log_level" in result.output


def test_invalid_config_exits_with_error(tmp_path: Path):
    cfg = tmp_path / "bad.yaml"
    cfg.write_text("log_level: loud\n")
    result = runner.invoke(app, ["--config", str(cfg), "plugins"])
    assert result.exit_code == 1
    assert "Invalid config" in result.output


# ── locale ──────────────────────────────────────────────────────────


def test_time_locale_taken_from_environment(monkeypatch):
    calls = []
    monkeypatch.setattr("marknote.cli.locale.setlocale", lambda *args: calls.append(args))
    result = runner.invoke(app, ["plugins"])
    assert result.exit_code == 0
    assert calls == [(locale.LC_TIME, "")]


def test_unsupported_locale_does_not_break_commands(tmp_path: Path, monkeypatch):
    def _unsupported(*args):
        raise locale.Error("unsupported locale setting")

    monkeypatch.setattr("marknote.cli.locale.setlocale", _unsupported)
    path = _write_note(tmp_path)
    result = runner.invoke(app, ["render", str(path), "-p", "Add Timestamp"])
    assert result.exit_code == 0
    assert result.output.startswith("Last edited: ")
