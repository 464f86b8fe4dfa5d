"""
Syntax error diagnostics for JSON Diff Pro.

A Diagnostic anchors a parse failure to a line and column of the cleaned
document and carries the surrounding source lines so a caller can show
exactly where the input went wrong.
"""
from dataclasses import dataclass


DEFAULT_CONTEXT_RADIUS = 1
EMPTY_INPUT_MESSAGE = "input is empty"
CARET_LABEL = "^ Error occurs here"


@dataclass(frozen=True)
class Diagnostic:
    """
    Structured report of a failed parse attempt.

    Column and context lines describe the cleaned text the strict parser saw:
    comments are gone, tabs are expanded and bare keys carry quotes. Line
    numbers still match the caller's buffer.
    """
    line: int
    column: int
    message: str
    context_lines: tuple = ()  # (line_number, text) pairs
    caret_offset: int = 0

    @property
    def is_empty_input(self) -> bool:
        return self.message == EMPTY_INPUT_MESSAGE and not self.context_lines

    @property
    def summary(self) -> str:
        if self.is_empty_input:
            return f"JSON {EMPTY_INPUT_MESSAGE}"
        return f"JSON syntax error at line {self.line}, column {self.column}: {self.message}"

    def render_context(self) -> list[str]:
        """Render the numbered context lines with the caret under the failing column."""
        if not self.context_lines:
            return []

        width = len(str(self.context_lines[-1][0]))
        rendered = []
        for number, text in self.context_lines:
            rendered.append(f"{number:>{width}}: {text}")
            if number == self.line:
                rendered.append(" " * self.caret_offset + CARET_LABEL)
        return rendered

    def render(self) -> str:
        context = self.render_context()
        if not context:
            return self.summary
        return self.summary + "\n\nContext:\n" + "\n".join(context)

    def to_dict(self) -> dict:
        return {
            "line": self.line,
            "column": self.column,
            "message": self.message,
            "summary": self.summary,
            "context_lines": [
                {"line": number, "text": text}
                for number, text in self.context_lines
            ],
            "caret_offset": self.caret_offset,
            "rendered": self.render(),
        }


def _displayable(text: str) -> str:
    # Unpaired surrogates become "?" so the line can be written as UTF-8
    return text.encode("utf-8", "replace").decode("utf-8")


def empty_input_diagnostic() -> Diagnostic:
    return Diagnostic(line=1, column=1, message=EMPTY_INPUT_MESSAGE)


def build_diagnostic(
    document: str,
    offset: int,
    message: str,
    context_radius: int = DEFAULT_CONTEXT_RADIUS,
    line_offset: int = 0,
) -> Diagnostic:
    """
    Build a Diagnostic for a failure at a character offset of document.

    Args:
        document: The text the strict parser was given
        offset: 0-based character offset reported by the parser
        message: Parser message describing the failure
        context_radius: Lines of context kept on each side of the failing line
        line_offset: Lines removed ahead of document, added to every line number

    Returns:
        Diagnostic with 1-based line and column
    """
    offset = max(0, min(offset, len(document)))

    line_index = document.count("\n", 0, offset)
    column = offset - document.rfind("\n", 0, offset)

    lines = document.split("\n")
    first = max(0, line_index - context_radius)
    last = min(len(lines), line_index + context_radius + 1)
    context = tuple(
        (index + 1 + line_offset, _displayable(lines[index]))
        for index in range(first, last)
    )

    line = line_index + 1 + line_offset
    width = len(str(context[-1][0]))
    # Caret sits under the column, past the "N: " prefix
    caret_offset = width + 2 + column - 1

    return Diagnostic(
        line=line,
        column=column,
        message=message,
        context_lines=context,
        caret_offset=caret_offset,
    )
