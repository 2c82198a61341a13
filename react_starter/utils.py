"""Shared console helpers for create-my-react-app.

All user-facing output goes through the Rich consoles defined here so tests
can capture or silence it in one place.
"""

from __future__ import annotations

import re

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.rule import Rule
from rich.table import Table

console = Console()
err_console = Console(stderr=True)

PROJECT_NAME_PATTERN = re.compile(r"^[a-z0-9-]+$")


# ---------------------------------------------------------------------------
# Name helpers
# ---------------------------------------------------------------------------


def is_valid_project_name(name: str) -> bool:
    """Return ``True`` if *name* is lowercase alphanumeric with hyphens.

    Examples::

        is_valid_project_name("my-app") -> True
        is_valid_project_name("MyApp")  -> False
        is_valid_project_name("my_app") -> False
    """
    return bool(PROJECT_NAME_PATTERN.fullmatch(name or ""))


# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------


def format_duration(seconds: float) -> str:
    """Format a duration in seconds to a human-readable string.

    Examples::

        format_duration(3.7)    -> "3.7s"
        format_duration(65.2)   -> "1m 5s"
    """
    if seconds < 0:
        return "0.0s"

    minutes = int(seconds // 60)
    secs = seconds % 60
    if minutes > 0:
        return f"{minutes}m {int(secs)}s"
    return f"{secs:.1f}s"


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


STAGE_COLORS: dict[str, str] = {
    "validating": "bright_cyan",
    "planning": "bright_green",
    "writing": "bright_yellow",
    "manifest_persisting": "bright_magenta",
    "installing": "bright_blue",
}


def print_banner(title: str = "create-my-react-app") -> None:
    """Print the welcome banner."""
    console.print(
        Panel(
            f"[bold]{title}[/bold]\nScaffold a new React project",
            style="blue",
            expand=False,
        )
    )


def print_stage_header(stage: str) -> None:
    """Print a rule announcing a generation stage."""
    color = STAGE_COLORS.get(stage, "white")
    label = stage.replace("_", " ").upper()
    console.print(Rule(f"[bold {color}] {label} [/bold {color}]", style=color))


def print_summary_table(data: dict[str, str], title: str = "Summary") -> None:
    """Print a two-column key/value summary table."""
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(key, str(value))

    console.print(table)


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{escape(message)}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message on stderr."""
    err_console.print(f"[bold red]{escape(message)}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{escape(message)}[/bold yellow]")
