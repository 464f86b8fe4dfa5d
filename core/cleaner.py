"""
Relaxed JSON cleaning for JSON Diff Pro.

Turns hand-edited, JSON-like text into strict JSON text:
- // line comments and /* block */ comments are removed
- bare or single-quoted object keys are wrapped in double quotes
- trailing commas before } or ] are dropped
- CRLF becomes LF, tabs become spaces, outer whitespace is trimmed

The scan is string-aware: nothing inside a double-quoted literal is ever
rewritten, so URLs like "http://host" or values like "a: b" survive intact.
"""
import string
from typing import Optional, Tuple


DEFAULT_TAB_WIDTH = 4

KEY_CHARS = frozenset(string.ascii_letters + string.digits + "_")
CLOSERS = "}]"


def _string_end(text: str, start: int) -> int:
    """Return the index just past the double-quoted literal opening at start."""
    i = start + 1
    n = len(text)
    while i < n:
        ch = text[i]
        if ch == "\\":
            i += 2
            continue
        if ch == '"':
            return i + 1
        i += 1
    # Unterminated literal runs to the end; the strict parser reports it.
    return n


def _comment_end(text: str, start: int) -> Optional[int]:
    """
    If a comment opens at start, return the index just past it.

    Line comments stop before their newline. An unterminated block comment
    is not a comment at all and is left for the parser to reject.
    """
    if text.startswith("//", start):
        end = text.find("\n", start)
        return len(text) if end == -1 else end
    if text.startswith("/*", start):
        end = text.find("*/", start + 2)
        if end == -1:
            return None
        return end + 2
    return None


def _skip_insignificant(text: str, start: int) -> int:
    """Skip whitespace and comments, returning the next significant index."""
    i = start
    n = len(text)
    while i < n:
        if text[i].isspace():
            i += 1
            continue
        end = _comment_end(text, i)
        if end is None:
            break
        i = end
    return i


def _match_key(text: str, start: int) -> Optional[Tuple[str, int]]:
    """
    Match a bare or single-quoted key that is followed by a colon.

    Returns (key, index just past the key) or None when the text at start
    does not look like an object key.
    """
    n = len(text)
    i = start
    quoted = text[i] == "'"
    if quoted:
        i += 1
    name_start = i
    while i < n and text[i] in KEY_CHARS:
        i += 1
    if i == name_start:
        return None
    name = text[name_start:i]
    if quoted:
        if i >= n or text[i] != "'":
            return None
        i += 1

    j = i
    while j < n and text[j] in " \t":
        j += 1
    if j >= n or text[j] != ":":
        return None
    return name, i


def _lex(text: str) -> str:
    out = []
    # True right after "{" or "," (ignoring whitespace and comments)
    expect_key = False
    i = 0
    n = len(text)

    while i < n:
        ch = text[i]

        if ch == '"':
            end = _string_end(text, i)
            out.append(text[i:end])
            i = end
            expect_key = False
            continue

        if ch == "/":
            end = _comment_end(text, i)
            if end is not None:
                # Keep the line structure of removed block comments
                out.append("\n" * text.count("\n", i, end))
                i = end
                continue

        if ch.isspace():
            out.append(ch)
            i += 1
            continue

        if expect_key and (ch in KEY_CHARS or ch == "'"):
            match = _match_key(text, i)
            if match:
                name, i = match
                out.append(f'"{name}"')
                expect_key = False
                continue

        if ch == ",":
            following = _skip_insignificant(text, i + 1)
            if following < n and text[following] in CLOSERS:
                i += 1
                continue
            out.append(ch)
            expect_key = True
            i += 1
            continue

        out.append(ch)
        expect_key = ch == "{"
        i += 1

    return "".join(out)


def find_unquoted(text: str, token: str) -> int:
    """Return the offset of the first token outside string literals, or -1."""
    i = 0
    n = len(text)
    while i < n:
        if text[i] == '"':
            i = _string_end(text, i)
            continue
        if text.startswith(token, i):
            return i
        i += 1
    return -1


def _is_surrogate(code: int, low: int = 0xD800, high: int = 0xDFFF) -> bool:
    return low <= code <= high


def _hex_escape(text: str, i: int) -> Optional[int]:
    """Return the code of a \\uXXXX escape starting at i, or None."""
    digits = text[i + 2:i + 6]
    if text[i + 1:i + 2] != "u" or len(digits) != 4:
        return None
    try:
        return int(digits, 16)
    except ValueError:
        return None


def find_lone_surrogate(text: str) -> int:
    """
    Return the offset of the first unpaired UTF-16 surrogate, or -1.

    Both \\uD800-style escapes without their partner and raw surrogate
    characters count. Such strings decode but can never be written as UTF-8.
    """
    i = 0
    n = len(text)
    while i < n:
        ch = text[i]
        if _is_surrogate(ord(ch)):
            return i
        if ch != "\\":
            i += 1
            continue
        code = _hex_escape(text, i)
        if code is None:
            i += 2
        elif _is_surrogate(code, 0xD800, 0xDBFF):
            partner = _hex_escape(text, i + 6) if text.startswith("\\", i + 6) else None
            if partner is None or not _is_surrogate(partner, 0xDC00, 0xDFFF):
                return i
            i += 12
        elif _is_surrogate(code):
            return i
        else:
            i += 6
    return -1


def clean_with_offset(text: str, tab_width: int = DEFAULT_TAB_WIDTH) -> Tuple[str, int]:
    """
    Clean relaxed JSON text.

    Returns the cleaned text together with the number of leading lines the
    final trim removed, so positions in the cleaned text can be mapped back
    to line numbers in the caller's buffer.
    """
    if not text:
        return "", 0

    normalized = _lex(text).replace("\r\n", "\n").replace("\t", " " * tab_width)
    stripped = normalized.lstrip()
    leading_lines = normalized[:len(normalized) - len(stripped)].count("\n")
    return stripped.rstrip(), leading_lines


def clean(text: str, tab_width: int = DEFAULT_TAB_WIDTH) -> str:
    """Clean relaxed JSON text into strict JSON text. Never raises."""
    cleaned, _ = clean_with_offset(text, tab_width)
    return cleaned
