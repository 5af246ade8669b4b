"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from rich.text import Text
from rich.tree import Tree

from fsdgen.output.console import create_console, get_output, style_for_layer

if TYPE_CHECKING:
    from rich.console import Console

    from fsdgen.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    label = Text("OK", style="fsd.ok")
    op = Text(f"  {result.op}", style="fsd.op")
    console.print(label, op)


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="fsd.key")
    if key == "path":
        v = Text(str(value), style="fsd.path")
    elif key == "name":
        v = Text(str(value), style="fsd.name")
    elif key == "layer":
        v = Text(str(value), style=style_for_layer(str(value)))
    else:
        v = Text(str(value))
    console.print(k, v, sep="")


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="fsd.error")
    op = Text(f"  {result.op}", style="fsd.op")
    console.print(label, op, Text(" — "), msg, sep="")

    if not err:
        return
    created = err.detail.get("created") or []
    if created:
        console.print(Text("  left on disk:", style="dim"))
        for path in created:
            console.print(f"    {path}")
    if verbose and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            if k != "created":
                console.print(f"    {k}: {v}")


# ── Slice renderer ────────────────────────────────────────────────────


def _render_slice(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render create_slice results as a summary plus the slice tree."""
    data = result.data
    _status_line(console, result)
    if "message" in data:
        console.print(f"  {data['message']}")
    for key in ("layer", "name", "path"):
        if key in data:
            _field(console, key, data[key])

    if verbose and data.get("files"):
        tree = Tree(Text(str(data.get("path", "")), style="fsd.path"))
        for file_path in data["files"]:
            tree.add(file_path)
        console.print(tree)


# ── Generic fallback ──────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            _field(console, key, json.dumps(value, separators=(",", ":")))
        else:
            _field(console, key, value)


_OP_RENDERERS: dict[str, Any] = {
    "create_slice": _render_slice,
}
