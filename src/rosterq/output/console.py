"""Rich Console factory and theme for rosterq output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract.  In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

ROSTER_THEME = Theme(
    {
        "rq.ok": "bold green",
        "rq.error": "bold red",
        "rq.op": "bold cyan",
        "rq.key": "dim",
        "rq.id": "bold blue",
        "rq.name": "bold",
        "rq.rating.high": "green",
        "rq.rating.low": "yellow",
        "rq.position": "magenta",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=ROSTER_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_rating(rating: int, threshold: int) -> str:
    """Rich style for a rating cell: high above *threshold*, low otherwise."""
    return "rq.rating.high" if rating > threshold else "rq.rating.low"
