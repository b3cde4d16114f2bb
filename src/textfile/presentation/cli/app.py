"""Thin CLI wrapper — Typer commands that delegate to TextFile handles.

Handles and settings are obtained through the Container (bootstrap.py),
which the root callback stores on the Typer context.
"""

from __future__ import annotations

import logging
from typing import Annotated, Optional

import typer
from rich.markup import escape

from textfile.bootstrap import Container
from textfile.domain.errors import ConfigurationError
from textfile.domain.models.enums import ClipboardBackend
from textfile.logging_setup import configure_logging
from textfile.presentation.cli.formatters import (
    console,
    error_message,
    json_panel,
    lines_table,
    success_panel,
)
from textfile.text_file import TextFile

app = typer.Typer(
    name="textfile",
    help="📄 Read, write and append text files, and move their content through the clipboard",
    rich_markup_mode="rich",
    no_args_is_help=True,
)

# Sub-app for config commands
config_app = typer.Typer(
    name="config",
    help="⚙️  Manage persisted settings",
    rich_markup_mode="rich",
    no_args_is_help=True,
)
app.add_typer(config_app, name="config")

PathArg = Annotated[str, typer.Argument(help="Path of the text file")]


@app.callback()
def main(
    ctx: typer.Context,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Log every operation (DEBUG)")
    ] = False,
    clipboard: Annotated[
        Optional[ClipboardBackend],
        typer.Option("--clipboard", help="Override the configured clipboard backend"),
    ] = None,
) -> None:
    """Build the container shared by every command."""
    container = Container(clipboard_backend=clipboard)
    configure_logging(logging.DEBUG if verbose else container.settings.log_level.value)
    ctx.obj = container


def _handle(ctx: typer.Context, path: str) -> TextFile:
    container: Container = ctx.obj
    return container.text_file(path)


def _fail(message: str) -> None:
    error_message(escape(message))
    raise typer.Exit(code=1)


# ---------------------------------------------------------------------------
# Reading
# ---------------------------------------------------------------------------


@app.command()
def read(ctx: typer.Context, path: PathArg) -> None:
    """Print the whole file."""
    if not _handle(ctx, path).print_file():
        _fail(f"Cannot read {path}")


@app.command()
def lines(ctx: typer.Context, path: PathArg) -> None:
    """List the file's lines with line numbers."""
    result = _handle(ctx, path).read_lines()
    if not result.ok:
        _fail(result.error or f"Cannot read {path}")
    lines_table(result.unwrap(), title=f"📄 {escape(path)}")


@app.command()
def contains(
    ctx: typer.Context,
    path: PathArg,
    needle: Annotated[str, typer.Argument(help="Text to search for")],
) -> None:
    """Exit 0 if the file contains NEEDLE, 1 otherwise."""
    if _handle(ctx, path).contains(needle):
        console.print(f"[green]✅ Found[/] {escape(repr(needle))}")
        return
    console.print(f"[yellow]Not found[/] {escape(repr(needle))}")
    raise typer.Exit(code=1)


# ---------------------------------------------------------------------------
# Writing
# ---------------------------------------------------------------------------


@app.command()
def write(
    ctx: typer.Context,
    path: PathArg,
    parts: Annotated[
        list[str], typer.Argument(help="Text to write; several parts are joined without separator")
    ],
) -> None:
    """Replace the file's content."""
    if not _handle(ctx, path).write_all(parts):
        _fail(f"Cannot write {path}")
    success_panel(f"✅ Written: [bold green]{escape(path)}[/]")


@app.command()
def append(
    ctx: typer.Context,
    path: PathArg,
    text: Annotated[str, typer.Argument(help="Text added directly at the end")],
) -> None:
    """Append TEXT to the file with no separator."""
    if not _handle(ctx, path).append(text):
        _fail(f"Cannot append to {path}")
    success_panel(f"✅ Appended to: [bold green]{escape(path)}[/]")


@app.command()
def clear(ctx: typer.Context, path: PathArg) -> None:
    """Truncate the file to empty content."""
    if not _handle(ctx, path).clear():
        _fail(f"Cannot clear {path}")
    success_panel(f"✅ Cleared: [bold green]{escape(path)}[/]")


# ---------------------------------------------------------------------------
# Clipboard
# ---------------------------------------------------------------------------


@app.command()
def copy(ctx: typer.Context, path: PathArg) -> None:
    """Copy the file's content to the clipboard."""
    if not _handle(ctx, path).copy_from():
        _fail(f"Cannot copy {path} to the clipboard")
    success_panel(f"📋 Copied to clipboard: [bold green]{escape(path)}[/]")


@app.command()
def paste(ctx: typer.Context, path: PathArg) -> None:
    """Overwrite the file with the clipboard's text."""
    if not _handle(ctx, path).paste_into():
        _fail(f"Cannot paste clipboard text into {path}")
    success_panel(f"📋 Pasted into: [bold green]{escape(path)}[/]")


# ---------------------------------------------------------------------------
# textfile config ...
# ---------------------------------------------------------------------------


@config_app.command("show")
def config_show(ctx: typer.Context) -> None:
    """Show the active settings."""
    container: Container = ctx.obj
    json_panel(container.settings.model_dump_json(indent=2))


@config_app.command("set")
def config_set(
    ctx: typer.Context,
    key: Annotated[str, typer.Argument(help="Setting name, e.g. append_mode")],
    value: Annotated[str, typer.Argument(help="New value; empty encoding means platform default")],
) -> None:
    """Change one persisted setting."""
    container: Container = ctx.obj
    try:
        settings = container.settings_port.update(**{key: value})
    except ConfigurationError as exc:
        _fail(f"Invalid setting: {exc}")
    else:
        json_panel(settings.model_dump_json(indent=2), title="✅ Settings saved")


@config_app.command("reset")
def config_reset(ctx: typer.Context) -> None:
    """Restore default settings."""
    container: Container = ctx.obj
    container.settings_port.reset_to_defaults()
    success_panel("✅ Settings restored to defaults", title="⚙️  Config Reset")


@config_app.command("path")
def config_path(ctx: typer.Context) -> None:
    """Print where settings are stored."""
    container: Container = ctx.obj
    typer.echo(str(container.settings_port.settings_path))


if __name__ == "__main__":
    app()
