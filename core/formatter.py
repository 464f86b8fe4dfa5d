"""
Lenient JSON parsing and formatting for JSON Diff Pro.

Relaxed text is cleaned (see core.cleaner), handed to the strict standard
library decoder, and any failure is turned into a Diagnostic anchored at the
decoder's reported character offset.
"""
import json
import logging
from typing import Any, Optional, Union
from dataclasses import dataclass

from core.cleaner import (
    DEFAULT_TAB_WIDTH,
    clean_with_offset,
    find_lone_surrogate,
    find_unquoted,
)
from core.diagnostics import (
    DEFAULT_CONTEXT_RADIUS,
    Diagnostic,
    build_diagnostic,
    empty_input_diagnostic,
)
from core.exceptions import EmptyInputError, JsonSyntaxError, ParseError

logger = logging.getLogger(__name__)

DEFAULT_INDENT = 2


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validate(). value is only meaningful when valid is True."""
    valid: bool
    value: Any = None
    diagnostic: Optional[Diagnostic] = None

    def to_dict(self) -> dict:
        return {
            "valid": self.valid,
            "diagnostic": self.diagnostic.to_dict() if self.diagnostic else None,
        }


class _NonFiniteNumber(ValueError):
    def __init__(self, token: str):
        super().__init__(f"Invalid number {token}")
        self.token = token


def _reject_constant(token: str):
    # NaN, Infinity and -Infinity are Python extensions, not JSON
    raise _NonFiniteNumber(token)


def parse(
    text: str,
    tab_width: int = DEFAULT_TAB_WIDTH,
    context_radius: int = DEFAULT_CONTEXT_RADIUS,
) -> Any:
    """
    Parse relaxed JSON text into a JSON value.

    Raises:
        EmptyInputError: nothing remains after cleaning
        JsonSyntaxError: the cleaned text is not valid JSON, including the
            NaN/Infinity literals and unpaired surrogates the standard
            library decoder would let through
    """
    cleaned, leading_lines = clean_with_offset(text, tab_width)
    if not cleaned:
        raise EmptyInputError()

    def fail(offset: int, message: str) -> JsonSyntaxError:
        diagnostic = build_diagnostic(
            cleaned,
            offset,
            message,
            context_radius=context_radius,
            line_offset=leading_lines,
        )
        logger.debug(f"Parse failed at line {diagnostic.line}, column {diagnostic.column}: {message}")
        return JsonSyntaxError(diagnostic)

    try:
        value = json.loads(cleaned, parse_constant=_reject_constant)
    except json.JSONDecodeError as e:
        raise fail(e.pos, e.msg) from e
    except _NonFiniteNumber as e:
        raise fail(find_unquoted(cleaned, e.token), str(e)) from None

    surrogate = find_lone_surrogate(cleaned)
    if surrogate != -1:
        raise fail(surrogate, "Unpaired surrogate in string")
    return value


def serialize(value: Any, indent: int = DEFAULT_INDENT) -> str:
    """Serialize a JSON value with fixed indentation, keeping key order."""
    return json.dumps(value, indent=indent, ensure_ascii=False)


def format_json(
    text: str,
    indent: int = DEFAULT_INDENT,
    tab_width: int = DEFAULT_TAB_WIDTH,
    context_radius: int = DEFAULT_CONTEXT_RADIUS,
) -> Union[str, Diagnostic]:
    """
    Reformat relaxed JSON text as indented strict JSON.

    Returns the formatted text, or the Diagnostic explaining why the input
    could not be parsed. Callers must check which one they got.
    """
    try:
        value = parse(text, tab_width=tab_width, context_radius=context_radius)
    except ParseError as e:
        return e.diagnostic
    return serialize(value, indent)


def validate(
    text: str,
    tab_width: int = DEFAULT_TAB_WIDTH,
    context_radius: int = DEFAULT_CONTEXT_RADIUS,
) -> ValidationResult:
    """Check relaxed JSON text without raising."""
    if text is None or not text.strip():
        return ValidationResult(valid=False, diagnostic=empty_input_diagnostic())

    try:
        value = parse(text, tab_width=tab_width, context_radius=context_radius)
    except ParseError as e:
        return ValidationResult(valid=False, diagnostic=e.diagnostic)

    return ValidationResult(valid=True, value=value)
