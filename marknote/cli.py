"""CLI entry point for marknote."""

from __future__ import annotations

import locale
import logging
from pathlib import Path
from typing import Annotated

import typer
import yaml
from rich import print as rprint
from rich.markup import escape
from rich.syntax import Syntax
from rich.table import Table

from marknote.config import MarknoteConfig, load_config
from marknote.config.loader import DEFAULT_CONFIG_TEMPLATE
from marknote.editor.mode import RenderMode
from marknote.log import configure_logging
from marknote.workspace import Workspace

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="marknote",
    help="Markdown notes with a pluggable preview pipeline.",
)

config_app = typer.Typer(help="Manage marknote configuration.")
app.add_typer(config_app, name="config")

# Global state
_config: MarknoteConfig | None = None


def _get_config() -> MarknoteConfig:
    if _config is None:
        return load_config()
    return _config


def _use_user_locale() -> None:
    """Take LC_TIME from the environment so "%c" timestamps follow the user's locale."""
    try:
        locale.setlocale(locale.LC_TIME, "")
    except locale.Error as e:
        logger.debug("keeping C time locale: %s", e)


def _flag(value: bool) -> str:
    return "[green]yes[/green]" if value else "[yellow]no[/yellow]"


@app.callback()
def main(
    config: Annotated[
        str | None, typer.Option("--config", "-c", help="Path to marknote.yaml")
    ] = None,
) -> None:
    """Global options."""
    global _config
    try:
        _config = load_config(config)
    except ValueError as e:
        rprint(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)
    configure_logging(_config.log_level, _config.log_format)
    _use_user_locale()


@app.command()
def plugins() -> None:
    """List available content plugins in the order they are applied."""
    ws = Workspace.from_config(_get_config())
    table = Table(title=f"Plugins ({len(ws.registry)})")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Name", style="cyan")
    table.add_column("Enabled", justify="center")
    table.add_column("Pure", justify="center")
    table.add_column("Idempotent", justify="center")
    table.add_column("Description")
    for i, opt in enumerate(ws.plugin_checklist(), start=1):
        table.add_row(
            str(i),
            opt.name,
            _flag(opt.active),
            _flag(opt.pure),
            _flag(opt.idempotent),
            opt.description,
        )
    rprint(table)


@app.command()
def themes() -> None:
    """List available themes."""
    ws = Workspace.from_config(_get_config())
    table = Table(title="Themes")
    table.add_column("Name", style="cyan")
    table.add_column("CSS class", style="green")
    table.add_column("Current", justify="center")
    for opt in ws.theme_options():
        table.add_row(opt.name, opt.css_class, "*" if opt.current else "")
    rprint(table)


@app.command()
def notes() -> None:
    """Show the notes a fresh workspace starts with."""
    ws = Workspace.from_config(_get_config())
    items = ws.note_list()
    if not items:
        rprint("[yellow]No notes.[/yellow]")
        return
    table = Table(title=f"Notes ({len(items)})")
    table.add_column("Title", style="cyan")
    table.add_column("ID", style="dim")
    table.add_column("Selected", justify="center")
    for item in items:
        table.add_row(item.title, item.id, "*" if item.selected else "")
    rprint(table)


@app.command()
def render(
    file: str = typer.Argument(..., help="Markdown file to render"),
    plugin: Annotated[
        list[str] | None,
        typer.Option("--plugin", "-p", help="Enable a plugin by name (repeatable)"),
    ] = None,
    html: Annotated[
        bool, typer.Option("--html/--text", help="Render to HTML instead of transformed markdown")
    ] = False,
) -> None:
    """Run a markdown file through the plugin pipeline."""
    path = Path(file)
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        rprint(f"[red]Error:[/red] cannot read {file}: {escape(str(e))}")
        raise typer.Exit(1)

    ws = Workspace.from_config(_get_config())
    if plugin:
        # explicit --plugin flags replace the configured selection
        ws.selection.clear()
        for name in set(plugin):
            ws.toggle_plugin(name)

    note = ws.create_note(path.stem or path.name)
    if note is None:
        rprint(f"[red]Error:[/red] cannot derive a note title from {file}")
        raise typer.Exit(1)
    ws.edit(content)

    if html:
        ws.mode.set_mode(RenderMode.preview)
        typer.echo(ws.view().body)
    else:
        typer.echo(ws.pipeline.apply(ws.selected_note.content))


@config_app.command("show")
def config_show() -> None:
    """Show current resolved configuration."""
    cfg = _get_config()
    rprint(Syntax(yaml.dump(cfg.model_dump(), default_flow_style=False), "yaml"))


@config_app.command("init")
def config_init(
    path: str = typer.Option("marknote.yaml", "--path", help="Where to write the config"),
    force: bool = typer.Option(False, "--force", help="Overwrite existing config"),
) -> None:
    """Create a default marknote.yaml."""
    target = Path(path)
    if target.exists() and not force:
        rprint(f"[yellow]{target} already exists.[/yellow] Use --force to overwrite.")
        raise typer.Exit(1)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(DEFAULT_CONFIG_TEMPLATE)
    rprint(f"[green]Created[/green] {target}")


if __name__ == "__main__":
    app()
