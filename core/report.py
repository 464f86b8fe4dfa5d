"""
Plain-text comparison reports for JSON Diff Pro.
"""
from datetime import datetime, timezone
from typing import Optional
import json

from core.comparison import ChangeType, ComparisonResult, MISSING


def _dump(value) -> str:
    return json.dumps(value, ensure_ascii=False)


def render_report(
    result: ComparisonResult,
    left_name: str = "left",
    right_name: str = "right",
    app_label: str = "JSON Diff Pro",
    timestamp: Optional[datetime] = None,
) -> str:
    """Generate a text report for a comparison."""
    timestamp = timestamp or datetime.now(timezone.utc)

    lines = [
        "=" * 70,
        "JSON COMPARISON REPORT",
        app_label,
        "=" * 70,
        "",
        f"Timestamp:        {timestamp.isoformat()}",
        f"Original:         {left_name}",
        f"Modified:         {right_name}",
        "",
    ]

    if result.is_identical:
        lines.extend([
            "-" * 40,
            "RESULT: NO DIFFERENCES FOUND",
            "-" * 40,
            "",
            "The two documents are identical.",
        ])
    else:
        counts = result.counts
        lines.extend([
            "-" * 40,
            f"RESULT: {result.change_count} DIFFERENCE(S) FOUND",
            "-" * 40,
            f"  Added:         {counts[ChangeType.ADDED.value]}",
            f"  Removed:       {counts[ChangeType.REMOVED.value]}",
            f"  Value changes: {counts[ChangeType.VALUE_CHANGED.value]}",
            f"  Type changes:  {counts[ChangeType.TYPE_CHANGED.value]}",
            "",
        ])

        for i, change in enumerate(result.changes, 1):
            lines.extend([
                f"Change #{i}",
                f"  Path:        {change.path_str}",
                f"  Type:        {change.change_type.value.upper()}",
            ])
            if change.old_value is not MISSING:
                lines.append(f"  Old Value:   {_dump(change.old_value)}")
            if change.new_value is not MISSING:
                lines.append(f"  New Value:   {_dump(change.new_value)}")
            lines.append("")

    lines.extend([
        "=" * 70,
        "END OF REPORT",
        "=" * 70,
    ])

    return "\n".join(lines)
