"""Rich Console factory and theme for assetpub output.

Consoles render into a StringIO buffer so formatters can return plain
strings. Rich drops color codes on its own when not attached to a TTY.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

ASSETPUB_THEME = Theme(
    {
        "ap.ok": "bold green",
        "ap.error": "bold red",
        "ap.warning": "bold yellow",
        "ap.op": "bold cyan",
        "ap.key": "dim",
        "ap.url": "bold blue underline",
        "ap.path": "dim",
        "ap.cached": "magenta",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=ASSETPUB_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
