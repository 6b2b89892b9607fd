"""Human/JSON output helpers.

The CLI renders ServiceResult for humans (one line per post) or for
machines (``--json``). Nothing here touches the filesystem.
"""

from __future__ import annotations

import json as _json
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from rafall.services.result import ServiceResult


@dataclass(frozen=True)
class OutputSettings:
    """Output switches taken from the global CLI flags."""

    json_output: bool = False
    quiet: bool = False


def _format_data_human(data: dict[str, Any]) -> str:
    """Format result data as indented key-value pairs."""
    lines: list[str] = []
    for key, value in data.items():
        if isinstance(value, (dict, list)):
            lines.append(f"  {key}: {_json.dumps(value, separators=(',', ':'))}")
        else:
            lines.append(f"  {key}: {value}")
    return "\n".join(lines)


def _format_post_line(post: dict[str, Any]) -> str:
    tags = ", ".join(post["tags"])
    line = f"  {post['date']}  {post['title'] or '(untitled)'}"
    if tags:
        line += f"  [{tags}]"
    return line


def _format_collect(result: ServiceResult, settings: OutputSettings) -> str:
    posts = result.data.get("posts", [])
    if settings.quiet:
        return "\n".join(post["title"] for post in posts)
    lines = [f"OK: {result.op} ({result.data.get('count', len(posts))} posts)"]
    lines.extend(_format_post_line(post) for post in posts)
    return "\n".join(lines)


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display."""
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if not result.ok:
        error_msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} - {error_msg}"
    if result.op == "collect":
        return _format_collect(result, settings)
    if settings.quiet:
        return f"OK: {result.op}"
    parts = [f"OK: {result.op}"]
    if result.data:
        parts.append(_format_data_human(result.data))
    return "\n".join(parts)
