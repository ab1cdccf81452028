"""Shared utility functions for create-cordova-plugin.

Provides the normalising file writer used for every generated artifact,
a directory helper, and Rich-based console reporting.
"""

from __future__ import annotations

import asyncio
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

console = Console()
err_console = Console(stderr=True)


# ---------------------------------------------------------------------------
# File writing
# ---------------------------------------------------------------------------


def format_content(content: str) -> str:
    """Normalise generated text before it is written to disk.

    * Strips trailing whitespace (including stray ``\\r``) from every line.
    * Drops trailing blank lines.
    * Terminates the text with exactly one newline.

    Examples::

        format_content("a  \\nb\\t\\n\\n\\n") -> "a\\nb\\n"
        format_content("x") -> "x\\n"
    """
    lines = [line.rstrip() for line in content.split("\n")]
    return "\n".join(lines).rstrip("\n") + "\n"


async def format_and_write_file(path: str | Path, content: str) -> Path:
    """Format *content* with :func:`format_content` and write it to *path*.

    Any existing file is replaced.  The parent directory must already exist;
    filesystem errors propagate to the caller.

    Returns:
        The written path.
    """
    file_path = Path(path)
    formatted = format_content(content)
    await asyncio.to_thread(_write_text, file_path, formatted)
    return file_path


def _write_text(path: Path, content: str) -> None:
    """Synchronous helper: write UTF-8 text with ``\\n`` line endings."""
    with path.open("w", encoding="utf-8", newline="\n") as fh:
        fh.write(content)


# ---------------------------------------------------------------------------
# File-system helpers
# ---------------------------------------------------------------------------


async def ensure_dir(path: str | Path) -> Path:
    """Create a directory (and parents) if it does not exist.

    Raises:
        FileExistsError: If *path* exists and is not a directory.
        PermissionError: If the directory cannot be created.
    """
    dir_path = Path(path)
    await asyncio.to_thread(dir_path.mkdir, parents=True, exist_ok=True)
    return dir_path


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_banner(message: str) -> None:
    """Print the welcome banner shown before the prompts."""
    console.print(Panel(f"[bold cyan]{escape(message)}[/bold cyan]", expand=False))
    console.print()


def print_summary_table(data: dict[str, str], title: str = "Summary") -> None:
    """Print a two-column key/value summary table.

    Args:
        data: Mapping of label -> value.
        title: Table title.
    """
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(key, str(value))

    console.print(table)
    console.print()


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{escape(message)}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message to stderr."""
    err_console.print(f"[bold red]{escape(message)}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{escape(message)}[/bold yellow]")
