"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from rosterq.domain.employee import EFFICIENCY_THRESHOLD
from rosterq.output.console import create_console, get_output, style_for_rating

if TYPE_CHECKING:
    from rich.console import Console

    from rosterq.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(
    result: ServiceResult,
    *,
    verbose: bool = False,
    width: int | None = None,
    threshold: int = EFFICIENCY_THRESHOLD,
) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console(width=width)

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, threshold=threshold)
        if verbose:
            _render_meta(console, result)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode.

    Employee lists collapse to IDs, label lists to one label per line,
    partitions to ``key=value`` lines, and scalars to their bare value.
    """
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    data = result.data
    if "items" in data:
        return "\n".join(str(item["id"]) for item in data["items"])
    if "labels" in data:
        return "\n".join(data["labels"])
    for key in ("averages", "counts", "names"):
        value = data.get(key)
        if isinstance(value, dict):
            return "\n".join(f"{k}={v}" for k, v in value.items())
        if isinstance(value, str):
            return value
    if "average" in data:
        return f"{data['average']:.2f}"
    if "has_duplicates" in data:
        return str(data["has_duplicates"]).lower()
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK status line."""
    label = Text("OK", style="rq.ok")
    op = Text(f"  {result.op}", style="rq.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    console.print(Text.assemble((f"  {key}: ", "rq.key"), str(value)))


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print meta block including telemetry span tree (verbose only)."""
    if not result.meta:
        return

    console.print()
    console.print(Text("  meta:", style="dim"))

    for k, v in result.meta.items():
        if k == "telemetry":
            _render_telemetry_tree(console, v, indent=4)
        else:
            console.print(f"    {k}: {v}")


def _render_telemetry_tree(
    console: Console,
    span_data: dict[str, Any],
    indent: int = 4,
) -> None:
    """Render a hierarchical span tree with its timing."""
    prefix = " " * indent
    name = span_data.get("name", "?")
    duration = span_data.get("duration_ms", 0.0)
    line = f"{prefix}[dim]{duration:>8.2f}ms[/dim]  {name}"

    annotations = span_data.get("annotations")
    if annotations:
        line += "  (" + ", ".join(f"{k}={v}" for k, v in annotations.items()) + ")"

    console.print(line)

    for child in span_data.get("children", []):
        _render_telemetry_tree(console, child, indent=indent + 4)


def _employee_table(items: list[dict[str, Any]], threshold: int) -> Table:
    """Build a Rich Table for serialized employees; ratings above *threshold* read as high."""
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("ID", style="rq.id", no_wrap=True, justify="right")
    table.add_column("Name", style="rq.name")
    table.add_column("Rating", justify="right")
    table.add_column("Position", style="rq.position")

    for item in items:
        rating = int(item.get("rating", 0))
        table.add_row(
            str(item.get("id", "")),
            Text(str(item.get("name", ""))),
            Text(str(rating), style=style_for_rating(rating, threshold)),
            str(item.get("position_type", "")),
        )

    return table


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="rq.error")
    op = Text(f"  {result.op}", style="rq.op")
    sep = Text(" — ")
    console.print(label, op, sep, msg)

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


# ── Query renderers ───────────────────────────────────────────────────


def _render_employees(result: ServiceResult, console: Console, *, threshold: int) -> None:
    """Render efficient / merged / page results as a table."""
    _status_line(console, result)
    d = result.data
    if "page" in d:
        _field(console, "page", d["page"])
        _field(console, "size", d["size"])
    _field(console, "count", d.get("count", 0))
    items = d.get("items", [])
    if items:
        console.print(_employee_table(items, threshold))


def _render_labels(result: ServiceResult, console: Console, *, threshold: int) -> None:
    _status_line(console, result)
    _field(console, "count", result.data.get("count", 0))
    for label in result.data.get("labels", []):
        console.print(Text(f"  {label}"))


def _render_average(result: ServiceResult, console: Console, *, threshold: int) -> None:
    _status_line(console, result)
    _field(console, "count", result.data.get("count", 0))
    _field(console, "average", f"{result.data.get('average', 0.0):.2f}")


def _render_mapping(result: ServiceResult, console: Console, *, threshold: int) -> None:
    """Render by_position / efficiency_* results as a two-column table."""
    _status_line(console, result)
    key, mapping = next(
        ((k, v) for k, v in result.data.items() if isinstance(v, dict)),
        ("value", {}),
    )
    if not mapping:
        _field(console, key, "(none)")
        return
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Group", style="rq.position")
    table.add_column(key.replace("_", " ").title(), justify="right")
    for group, value in mapping.items():
        cell = f"{value:.2f}" if isinstance(value, float) else str(value)
        table.add_row(Text(str(group)), Text(cell))
    console.print(table)


# ── Generic fallback ──────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, threshold: int) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            _field(console, key, _json.dumps(value, separators=(",", ":")))
        else:
            _field(console, key, value)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "efficient": _render_employees,
    "merged": _render_employees,
    "page": _render_employees,
    "underperformers": _render_labels,
    "average": _render_average,
    "by_position": _render_mapping,
    "efficiency_counts": _render_mapping,
    "efficiency_names": _render_mapping,
    "names": _render_generic,
    "duplicates": _render_generic,
}
