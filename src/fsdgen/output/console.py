"""Rich Console factory and theme for fsdgen output.

Consoles render into a StringIO buffer so renderers return plain
strings. In non-TTY environments (tests, pipes) Rich drops color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

FSD_THEME = Theme(
    {
        "fsd.ok": "bold green",
        "fsd.error": "bold red",
        "fsd.op": "bold cyan",
        "fsd.key": "dim",
        "fsd.path": "dim",
        "fsd.name": "bold",
        "fsd.layer.page": "magenta",
        "fsd.layer.widget": "blue",
        "fsd.layer.feature": "green",
        "fsd.layer.entity": "yellow",
        "fsd.layer.shared": "cyan",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=FSD_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_layer(layer: str) -> str:
    """Return the Rich style name for a layer display name."""
    style = f"fsd.layer.{layer.lower()}"
    return style if style in FSD_THEME.styles else ""
