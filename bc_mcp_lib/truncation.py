"""
Shapes large result sets into full, paginated or summarized form.
"""

from collections import Counter
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from .constants import (
    FULL_THRESHOLD, LARGE_THRESHOLD, MAX_STRING_LENGTH, SUMMARY_PREVIEW_ROWS, MAX_DISTINCT_VALUES,
)

FULL = "full"
PAGINATED = "paginated"
SUMMARIZED = "summarized"


@dataclass
class TruncationMetadata:
    total_count: int
    returned_count: int
    has_more: bool
    next_page_hint: Optional[str] = None


@dataclass
class TruncationResult:
    mode: str
    rows: List[Dict[str, Any]]
    metadata: Optional[TruncationMetadata] = None
    summary: Optional[str] = None


def truncate_strings(row: Dict[str, Any], max_length: int) -> Dict[str, Any]:
    return {
        key: value[:max_length] + "..." if isinstance(value, str) and len(value) > max_length else value
        for key, value in row.items()
    }


def generate_summary(rows: List[Dict[str, Any]], total_count: int) -> str:
    """Field list plus value distributions for low-cardinality string fields."""
    fields = list(rows[0].keys()) if rows else []
    lines = [f"Total records: {total_count}", f"Fields: {', '.join(fields)}"]
    for field_name in fields:
        counts = Counter(row.get(field_name) for row in rows if isinstance(row.get(field_name), str))
        if 1 < len(counts) <= MAX_DISTINCT_VALUES:
            # most_common keeps first-seen order among ties
            distribution = ", ".join(f"{value}({count})" for value, count in counts.most_common())
            lines.append(f"{field_name} distribution (sample): {distribution}")
    return "\n".join(lines)


def smart_truncate(rows: List[Dict[str, Any]], total_count: int, page_size: int,
                   threshold: int = FULL_THRESHOLD, large_threshold: int = LARGE_THRESHOLD,
                   max_string_length: int = MAX_STRING_LENGTH, skip: int = 0) -> TruncationResult:
    truncated = [truncate_strings(row, max_string_length) for row in rows]

    if total_count <= threshold:
        return TruncationResult(mode=FULL, rows=truncated)

    if total_count <= large_threshold:
        paged = truncated[:page_size]
        return TruncationResult(
            mode=PAGINATED,
            rows=paged,
            metadata=TruncationMetadata(
                total_count=total_count,
                returned_count=len(paged),
                has_more=total_count > skip + len(paged),
                next_page_hint=f"Use $skip={skip + len(paged)} to get the next page.",
            ),
        )

    preview = truncated[:SUMMARY_PREVIEW_ROWS]
    return TruncationResult(
        mode=SUMMARIZED,
        rows=preview,
        metadata=TruncationMetadata(
            total_count=total_count,
            returned_count=len(preview),
            has_more=True,
            next_page_hint="Use $filter to narrow results before fetching more data.",
        ),
        summary=generate_summary(truncated, total_count),
    )
