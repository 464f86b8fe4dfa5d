# JSON Diff Pro v1.0.0
"""
Core package for JSON Diff Pro.
Contains the relaxed JSON parser/formatter and the structural differ.
"""
from core.cleaner import clean
from core.comparison import (
    diff,
    compare_values,
    compare_texts,
    compute_value_hash,
    create_inline_diff,
    format_value_compact,
    DiffRecord,
    ComparisonResult,
    TextComparison,
    ChangeType,
    MISSING
)
from core.diagnostics import Diagnostic, build_diagnostic
from core.file_parser import (
    parse_json_file,
    parse_json_content,
    has_json_suffix,
    ParsedFile
)
from core.exceptions import ParseError, EmptyInputError, JsonSyntaxError
from core.formatter import (
    parse,
    serialize,
    format_json,
    validate,
    ValidationResult
)
from core.json_types import JsonKind, kind_of
from core.report import render_report

__all__ = [
    "clean",
    "parse",
    "serialize",
    "format_json",
    "validate",
    "ValidationResult",
    "Diagnostic",
    "build_diagnostic",
    "ParseError",
    "EmptyInputError",
    "JsonSyntaxError",
    "JsonKind",
    "kind_of",
    "diff",
    "compare_values",
    "compare_texts",
    "compute_value_hash",
    "create_inline_diff",
    "format_value_compact",
    "DiffRecord",
    "ComparisonResult",
    "TextComparison",
    "ChangeType",
    "MISSING",
    "parse_json_file",
    "parse_json_content",
    "has_json_suffix",
    "ParsedFile",
    "render_report"
]
