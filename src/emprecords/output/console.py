"""Rich Console factory and theme for emprecords output.

Consoles render into a StringIO buffer so formatters keep a plain
``-> str`` contract. In non-TTY environments (tests, pipes) Rich drops the
colour codes on its own.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

EMP_THEME = Theme(
    {
        "emp.ok": "bold green",
        "emp.error": "bold red",
        "emp.warning": "bold yellow",
        "emp.status": "bold cyan",
        "emp.key": "dim",
        "emp.id": "bold blue",
        "emp.money": "magenta",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    return Console(
        file=StringIO(),
        theme=EMP_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
