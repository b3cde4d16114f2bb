"""Rich formatting utilities for the CLI.

Keeps all Rich rendering (tables, panels, syntax) out of the command
module; nothing here knows about files or clipboards.
"""

from __future__ import annotations

from rich.console import Console
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table
from rich.text import Text

console = Console()


# ---------------------------------------------------------------------------
# Success / error panels
# ---------------------------------------------------------------------------


def success_panel(message: str, title: str = "textfile") -> None:
    """Print a green success panel."""
    console.print(Panel(message, title=title, border_style="green"))


def error_message(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]❌ {message}[/]")


# ---------------------------------------------------------------------------
# JSON / config rendering
# ---------------------------------------------------------------------------


def json_panel(raw_json: str, title: str = "⚙️  Active settings") -> None:
    """Render JSON inside a syntax-highlighted panel."""
    console.print(
        Panel(
            Syntax(raw_json, "json", theme="monokai", line_numbers=True),
            title=title,
            border_style="blue",
        )
    )


# ---------------------------------------------------------------------------
# Line listing
# ---------------------------------------------------------------------------


def lines_table(lines: list[str], title: str) -> None:
    """Print numbered lines as a table."""
    table = Table(title=title, show_header=True, border_style="blue")
    table.add_column("#", style="cyan", justify="right")
    table.add_column("Line", overflow="fold")

    for number, line in enumerate(lines, start=1):
        table.add_row(str(number), Text(line))

    console.print(table)
