"""
Plain-text rendering of entities and result lists for tool responses.
"""

import json
from typing import Any, Dict, List, Optional

from .truncation import TruncationResult


def format_value(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (dict, list)):
        return json.dumps(value, default=str)
    return str(value)


def format_entity(entity: Dict[str, Any], entity_type: str) -> str:
    lines = [f"--- {entity_type} ---"]
    for key, value in entity.items():
        if value is None or value == "":
            continue
        lines.append(f"{key}: {format_value(value)}")
    return "\n".join(lines)


def format_list(rows: List[Dict[str, Any]], shaped: Optional[TruncationResult] = None) -> str:
    """Pipe-separated table, preceded by a banner when the result was shaped."""
    if not rows:
        return "No records found."

    lines = []
    meta = shaped.metadata if shaped else None
    if meta:
        lines.append(f"Showing {meta.returned_count} of {meta.total_count} records.")
        if meta.has_more:
            hint = f" {meta.next_page_hint}" if meta.next_page_hint else ""
            lines.append(f"Use $filter, $top, or $skip to navigate more data.{hint}\n")
    if shaped and shaped.summary:
        lines.append(shaped.summary + "\n")

    keys = list(rows[0].keys())
    lines.append(" | ".join(keys))
    lines.append(" | ".join("---" for _ in keys))
    for row in rows:
        lines.append(" | ".join(format_value(row.get(key)) for key in keys))
    return "\n".join(lines)
