"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO). Renderers are
dispatched by ``result.op`` in :func:`render_result`; unknown ops fall
through to a generic key-value renderer.

User-supplied strings (titles, bodies, messages) are wrapped in ``Text``
so square brackets are never read as Rich markup.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from postctl.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from postctl.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal, which is
    the case inside Click's CliRunner and piped output.
    """
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

    items = result.data.get("items")
    if isinstance(items, list):
        return "\n".join(str(item["path"]) for item in items if item.get("path"))
    if result.op == "check":
        errors = result.data.get("error_count", 0)
        warnings = result.data.get("warning_count", 0)
        return f"{errors} errors, {warnings} warnings"
    if "path" in result.data:
        return str(result.data["path"])
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="post.ok"), Text(f"  {result.op}", style="post.op"))


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="post.key")
    if key == "path":
        v = Text(str(value), style="post.path")
    elif key == "title":
        v = Text(str(value), style="post.title")
    elif isinstance(value, list):
        v = Text(", ".join(str(x) for x in value))
    else:
        v = Text(str(value))
    console.print(k + v)


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    line = Text("ERROR", style="post.error")
    line.append(f"  {result.op}", style="post.op")
    line.append(f" — {msg}")
    console.print(line)

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


# ── Post renderers ────────────────────────────────────────────────────


def _render_new_post(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key in ("path", "title", "slug", "date", "format"):
        if key in result.data:
            _field(console, key, result.data[key])


def _render_show_post(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render a single post as a panel: metadata lines, then the body."""
    d = result.data
    content = Text()
    content.append(f"date: {d.get('date', '')}\n", style="post.date")
    for key in ("authors", "tags"):
        values = d.get(key) or []
        if values:
            content.append(f"{key}: {', '.join(values)}\n")
    if d.get("draft"):
        content.append("draft\n", style="post.draft")
    if d.get("description"):
        content.append(f"\n{d['description']}\n", style="italic")

    body = str(d.get("body", "")).strip()
    if body:
        content.append(f"\n{body}")

    title = Text(str(d.get("title", "Untitled")), style="post.title")
    subtitle = Text(str(d.get("path", "")), style="post.path")
    console.print(Panel(content, title=title, subtitle=subtitle, expand=False))


def _render_list_posts(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    items = result.data.get("items", [])
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Date", style="post.date", no_wrap=True)
    table.add_column("Title", style="post.title")
    table.add_column("Authors")
    if verbose:
        table.add_column("Tags")
        table.add_column("Path", style="post.path")

    for item in items:
        title = Text(str(item.get("title", "")))
        if item.get("draft"):
            title.append(" (draft)", style="post.draft")
        row: list[Any] = [
            str(item.get("date", "")),
            title,
            Text(", ".join(item.get("authors", []))),
        ]
        if verbose:
            row.append(Text(", ".join(item.get("tags", []))))
            row.append(Text(str(item.get("path", ""))))
        table.add_row(*row)

    console.print(table)
    console.print(f"\n{result.data.get('count', len(items))} posts")


def _render_check(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render check results with issues grouped by file."""
    issues = result.data.get("issues", [])
    files = result.data.get("files", 0)

    if not issues:
        console.print(Text("OK", style="post.ok"), f" No issues found in {files} posts.")
        return

    severity_styles = {"error": "post.error", "warning": "post.warning"}

    by_path: dict[str, list[dict[str, Any]]] = {}
    for issue in issues:
        by_path.setdefault(str(issue.get("path", "?")), []).append(issue)

    for path, path_issues in by_path.items():
        console.print()
        console.print(Text(path, style="bold"))
        for issue in path_issues:
            sev = str(issue.get("severity", "warning"))
            line = Text("  ")
            line.append(sev, style=severity_styles.get(sev, ""))
            if verbose:
                line.append(f" [{issue.get('code', '')}]", style="dim")
            line.append(f": {issue.get('message', '')}")
            console.print(line)

    errors = result.data.get("error_count", 0)
    warnings = result.data.get("warning_count", 0)
    console.print(f"\n{errors} errors, {warnings} warnings in {files} posts")


def _render_export(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    _field(console, "count", result.data.get("count", 0))
    if "path" in result.data:
        _field(console, "path", result.data["path"])
    elif "index" in result.data:
        console.print(Text(json.dumps(result.data["index"], indent=2, ensure_ascii=False)))


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


_OP_RENDERERS: dict[str, Any] = {
    "new_post": _render_new_post,
    "show_post": _render_show_post,
    "list_posts": _render_list_posts,
    "check": _render_check,
    "export_index": _render_export,
}
