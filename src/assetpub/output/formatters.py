"""Render ServiceResult for humans (Rich) or machines (--json)."""

from __future__ import annotations

import json as _json
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from rich.markup import escape
from rich.table import Table

from assetpub.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from assetpub.services.result import ServiceResult


@dataclass(frozen=True)
class OutputSettings:
    """Output switches taken from the global CLI flags."""

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    no_color: bool = False


def _value_markup(key: str, value: Any) -> str:
    if isinstance(value, (dict, list)):
        return escape(_json.dumps(value, separators=(",", ":")))
    text = escape(str(value))
    if key == "url":
        return f"[ap.url]{text}[/ap.url]"
    if key == "directory":
        return f"[ap.path]{text}[/ap.path]"
    if key == "cached" and value:
        return f"[ap.cached]{text}[/ap.cached]"
    return text


def _item_name(item: Any) -> str:
    if isinstance(item, dict):
        return str(item.get("name", ""))
    return str(item)


def _render_items(console: Console, items: list[Any]) -> None:
    if items and all(isinstance(item, dict) for item in items):
        table = Table(show_header=True, header_style="ap.key", box=None)
        columns = list(items[0])
        for column in columns:
            table.add_column(column)
        for item in items:
            table.add_row(*(escape(str(item.get(c, ""))) for c in columns))
        console.print(table)
        return
    for item in items:
        console.print(f"  - {escape(str(item))}")


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display.

    Quiet mode prints only the URL of a successful publish (handy in
    shell substitution), one name per line for listings, or the bare
    error message.
    """
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)

    if settings.quiet:
        if not result.ok:
            return result.error.message if result.error else "Unknown error"
        if "items" in result.data:
            return "\n".join(_item_name(item) for item in result.data["items"])
        return str(result.data.get("url", ""))

    console = create_console(no_color=settings.no_color)
    if result.ok:
        console.print(f"[ap.ok]OK[/ap.ok]: [ap.op]{result.op}[/ap.op]")
        for key, value in result.data.items():
            if key == "items":
                _render_items(console, value)
                continue
            console.print(f"  [ap.key]{key}[/ap.key]: {_value_markup(key, value)}")
    else:
        message = result.error.message if result.error else "Unknown error"
        code = result.error.code if result.error else "UNKNOWN"
        console.print(
            f"[ap.error]ERROR[/ap.error]: [ap.op]{result.op}[/ap.op] ({code}) - {escape(message)}"
        )
        if settings.verbose and result.error and result.error.detail:
            for key, value in result.error.detail.items():
                console.print(f"  [ap.key]{key}[/ap.key]: {_value_markup(key, value)}")
    return get_output(console).rstrip("\n")
