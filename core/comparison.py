"""
JSON Diff Pro Structural Comparison Engine

This module handles deep comparison of JSON values, producing one record per
added, removed, type-changed or value-changed field, plus the word-level
inline diff used to highlight changed values.

Arrays are compared as containers keyed by stringified index: an insertion
in the middle of an array shows up as per-position value changes.
"""
from typing import Any, Optional
from dataclasses import dataclass, field
from enum import Enum
import difflib
import hashlib
import html
import json
import logging
import re

from core.cleaner import DEFAULT_TAB_WIDTH
from core.diagnostics import DEFAULT_CONTEXT_RADIUS
from core.formatter import ValidationResult, validate
from core.json_types import as_mapping, kind_of

logger = logging.getLogger(__name__)

ROOT_LABEL = "root"


class ChangeType(str, Enum):
    ADDED = "added"
    REMOVED = "removed"
    VALUE_CHANGED = "value_change"
    TYPE_CHANGED = "type_change"


class _Missing:
    """Marker for a side of a change where the field does not exist."""

    def __repr__(self):
        return "MISSING"

    def __bool__(self):
        return False


MISSING = _Missing()


@dataclass(frozen=True)
class DiffRecord:
    """Represents a single difference between two JSON values."""
    path: tuple
    change_type: ChangeType
    old_value: Any = MISSING
    new_value: Any = MISSING

    # Word-level highlighting, only computed for value changes on request
    inline_diff: Optional[dict] = None

    def __post_init__(self):
        """Enforce which sides a change of each type carries."""
        has_old = self.old_value is not MISSING
        has_new = self.new_value is not MISSING
        if self.change_type == ChangeType.ADDED and (has_old or not has_new):
            raise ValueError("An added field carries only a new value")
        if self.change_type == ChangeType.REMOVED and (has_new or not has_old):
            raise ValueError("A removed field carries only an old value")
        if self.change_type in (ChangeType.VALUE_CHANGED, ChangeType.TYPE_CHANGED):
            if not (has_old and has_new):
                raise ValueError(f"A {self.change_type.value} carries both values")

    @property
    def path_str(self) -> str:
        return ".".join(self.path) if self.path else ROOT_LABEL

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization. Absent sides are omitted."""
        result = {
            "path": self.path_str,
            "path_keys": list(self.path),
            "change_type": self.change_type.value,
        }
        if self.old_value is not MISSING:
            result["old_value"] = self.old_value
        if self.new_value is not MISSING:
            result["new_value"] = self.new_value
        if self.inline_diff is not None:
            result["inline_diff"] = self.inline_diff
        return result


@dataclass
class ComparisonResult:
    """Result of comparing two JSON values."""
    changes: list[DiffRecord] = field(default_factory=list)
    old_hash: str = ""
    new_hash: str = ""
    is_identical: bool = True

    @property
    def change_count(self) -> int:
        return len(self.changes)

    @property
    def counts(self) -> dict[str, int]:
        """Number of changes per change type, every type present."""
        totals = {change_type.value: 0 for change_type in ChangeType}
        for change in self.changes:
            totals[change.change_type.value] += 1
        return totals

    def to_dict(self) -> dict:
        return {
            "is_identical": self.is_identical,
            "change_count": self.change_count,
            "counts": self.counts,
            "old_hash": self.old_hash,
            "new_hash": self.new_hash,
            "changes": [c.to_dict() for c in self.changes]
        }


@dataclass(frozen=True)
class TextComparison:
    """Both sides of a text comparison, and the result when both parsed."""
    left: ValidationResult
    right: ValidationResult
    result: Optional[ComparisonResult] = None

    @property
    def ok(self) -> bool:
        return self.result is not None

    def to_dict(self) -> dict:
        return {
            "ok": self.ok,
            "left": self.left.to_dict(),
            "right": self.right.to_dict(),
            "result": self.result.to_dict() if self.result else None,
        }


def _union_keys(old_map: dict, new_map: dict) -> list:
    """First mapping's keys in order, then the second's unseen keys."""
    return list(old_map) + [key for key in new_map if key not in old_map]


def diff(old: Any, new: Any, base_path: tuple = (), inline: bool = False) -> list[DiffRecord]:
    """
    Recursively compare two JSON values and return all differences.

    Args:
        old: The original value
        new: The modified value
        base_path: Keys leading to old/new inside their documents
        inline: Attach a word-level inline diff to value changes

    Returns:
        DiffRecords in key-union order, depth first
    """
    path = tuple(base_path)
    old_kind = kind_of(old)
    new_kind = kind_of(new)

    if old_kind.family != new_kind.family:
        return [DiffRecord(
            path=path,
            change_type=ChangeType.TYPE_CHANGED,
            old_value=old,
            new_value=new
        )]

    if old_kind.is_container:
        return _diff_containers(old, new, path, inline)

    if old == new:
        return []

    return [DiffRecord(
        path=path,
        change_type=ChangeType.VALUE_CHANGED,
        old_value=old,
        new_value=new,
        inline_diff=create_inline_diff(format_value_compact(old), format_value_compact(new)) if inline else None
    )]


def _diff_containers(old: Any, new: Any, path: tuple, inline: bool) -> list[DiffRecord]:
    old_map = as_mapping(old)
    new_map = as_mapping(new)
    changes = []

    for key in _union_keys(old_map, new_map):
        child_path = path + (key,)

        if key not in new_map:
            changes.append(DiffRecord(
                path=child_path,
                change_type=ChangeType.REMOVED,
                old_value=old_map[key]
            ))
        elif key not in old_map:
            changes.append(DiffRecord(
                path=child_path,
                change_type=ChangeType.ADDED,
                new_value=new_map[key]
            ))
        else:
            changes.extend(diff(old_map[key], new_map[key], child_path, inline))

    return changes


def compute_value_hash(value: Any) -> str:
    """
    Compute a SHA-256 hash of a JSON value for quick comparison.
    Values with the same hash are identical.
    """
    json_str = json.dumps(value, sort_keys=True, separators=(',', ':'), ensure_ascii=False)
    return hashlib.sha256(json_str.encode()).hexdigest()


def compare_values(old_value: Any, new_value: Any, inline: bool = False) -> ComparisonResult:
    """
    Main entry point for comparing two parsed JSON values.

    Args:
        old_value: The original value
        new_value: The modified value
        inline: Attach word-level inline diffs to value changes

    Returns:
        ComparisonResult with all detected changes
    """
    old_hash = compute_value_hash(old_value)
    new_hash = compute_value_hash(new_value)

    # Quick check - if hashes match, values are identical
    if old_hash == new_hash:
        return ComparisonResult(
            changes=[],
            old_hash=old_hash,
            new_hash=new_hash,
            is_identical=True
        )

    changes = diff(old_value, new_value, inline=inline)
    logger.debug(f"Comparison found {len(changes)} change(s)")

    return ComparisonResult(
        changes=changes,
        old_hash=old_hash,
        new_hash=new_hash,
        is_identical=len(changes) == 0
    )


def compare_texts(
    left_text: str,
    right_text: str,
    inline: bool = False,
    tab_width: int = DEFAULT_TAB_WIDTH,
    context_radius: int = DEFAULT_CONTEXT_RADIUS,
) -> TextComparison:
    """
    Validate two relaxed JSON buffers and compare them when both parse.

    The differ never sees a side that failed; its diagnostic is returned instead.
    """
    left = validate(left_text, tab_width=tab_width, context_radius=context_radius)
    right = validate(right_text, tab_width=tab_width, context_radius=context_radius)

    if not (left.valid and right.valid):
        logger.debug("Comparison skipped: at least one side failed to parse")
        return TextComparison(left=left, right=right)

    return TextComparison(
        left=left,
        right=right,
        result=compare_values(left.value, right.value, inline=inline)
    )


_TOKEN_RE = re.compile(r"\s+|\S+")


def create_inline_diff(old_str: str, new_str: str) -> dict:
    """
    Create word-level diff highlighting between two strings.

    Returns dict with 'segments' (ordered equal/removed/added runs) and
    'old_html'/'new_html' containing escaped, highlighted versions.
    """
    old_tokens = _TOKEN_RE.findall(str(old_str))
    new_tokens = _TOKEN_RE.findall(str(new_str))

    matcher = difflib.SequenceMatcher(None, old_tokens, new_tokens, autojunk=False)
    segments = []
    old_html = []
    new_html = []

    for tag, i1, i2, j1, j2 in matcher.get_opcodes():
        old_text = "".join(old_tokens[i1:i2])
        new_text = "".join(new_tokens[j1:j2])

        if tag == "equal":
            segments.append({"op": "equal", "text": old_text})
            old_html.append(html.escape(old_text))
            new_html.append(html.escape(new_text))
            continue

        if old_text:
            segments.append({"op": "removed", "text": old_text})
            old_html.append(f"<span class='hl-removed'>{html.escape(old_text)}</span>")
        if new_text:
            segments.append({"op": "added", "text": new_text})
            new_html.append(f"<span class='hl-added'>{html.escape(new_text)}</span>")

    return {
        "segments": segments,
        "old_html": "".join(old_html),
        "new_html": "".join(new_html)
    }


def format_value_compact(value: Any) -> str:
    """Format a value for display in a compact way. Strings are shown bare."""
    if value is MISSING:
        return ""
    if isinstance(value, str):
        return value
    return json.dumps(value, separators=(',', ':'), ensure_ascii=False)
