"""
Document loading utilities for JSON Diff Pro.

Reads relaxed JSON from disk or from uploaded bytes and validates it, keeping
the raw text next to the result so diagnostics can be shown against it.
"""
from pathlib import Path
from typing import Optional, Union
from dataclasses import dataclass

from core.cleaner import DEFAULT_TAB_WIDTH
from core.diagnostics import DEFAULT_CONTEXT_RADIUS
from core.formatter import ValidationResult, validate

JSON_SUFFIXES = (".json", ".jsonc", ".json5")


@dataclass
class ParsedFile:
    """Result of loading one JSON document."""
    filename: str
    text: str
    validation: ValidationResult
    file_path: Optional[str] = None

    @property
    def valid(self) -> bool:
        return self.validation.valid

    @property
    def value(self):
        return self.validation.value


def has_json_suffix(filename: str) -> bool:
    return filename.lower().endswith(JSON_SUFFIXES)


def decode_content(content: Union[bytes, str]) -> str:
    """
    Decode uploaded content as UTF-8, dropping a byte order mark.

    Raises:
        UnicodeDecodeError: content is not UTF-8
    """
    if isinstance(content, str):
        return content.lstrip("\ufeff")
    return content.decode("utf-8-sig")


def parse_json_content(
    content: Union[bytes, str],
    filename: str,
    tab_width: int = DEFAULT_TAB_WIDTH,
    context_radius: int = DEFAULT_CONTEXT_RADIUS,
) -> ParsedFile:
    """
    Validate JSON content directly (for API uploads).

    Args:
        content: Raw bytes or text
        filename: Original filename, kept for reports

    Returns:
        ParsedFile whose validation holds the value or the diagnostic
    """
    text = decode_content(content)
    return ParsedFile(
        filename=filename,
        text=text,
        validation=validate(text, tab_width=tab_width, context_radius=context_radius)
    )


def parse_json_file(
    file_path: str,
    tab_width: int = DEFAULT_TAB_WIDTH,
    context_radius: int = DEFAULT_CONTEXT_RADIUS,
) -> ParsedFile:
    """
    Load and validate a JSON file from disk.

    Raises:
        FileNotFoundError: the path does not exist
        UnicodeDecodeError: the file is not UTF-8
    """
    path = Path(file_path)
    parsed = parse_json_content(
        path.read_bytes(),
        path.name,
        tab_width=tab_width,
        context_radius=context_radius
    )
    parsed.file_path = str(path.absolute())
    return parsed
