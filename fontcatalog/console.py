"""
Console status output for the command-line tools.

Status lines are rendered with Rich; library code logs instead of printing.
"""

from typing import Optional

from rich.console import Console
from rich.markup import escape

_STYLES = {
    "info": ("INFO", "cyan"),
    "parsing": ("PARSING", "blue"),
    "success": ("DONE", "green"),
    "warning": ("WARNING", "yellow"),
    "error": ("ERROR", "bold red"),
}

_console: Optional[Console] = None


def get_console() -> Console:
    """Shared console writing to stderr, so JSON on stdout stays clean."""
    global _console
    if _console is None:
        _console = Console(stderr=True, highlight=False)
    return _console


def emit_status(level: str, message: str, details: Optional[str] = None):
    """Print one status line, with an optional dimmed explanation."""
    label, style = _STYLES.get(level, _STYLES["info"])
    console = get_console()
    console.print(f"[{style}]{label:<8}[/{style}] {escape(message)}")
    if details:
        console.print(f"         [dim]{escape(details)}[/dim]")


def emit_summary(processed: int, errors: int, warnings: int = 0):
    level = "success" if errors == 0 else "warning"
    emit_status(
        level,
        "Processing Complete",
        f"processed={processed} errors={errors} warnings={warnings}",
    )
