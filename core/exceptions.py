"""
Parse failures raised by the JSON Diff Pro formatter.
"""
from core.diagnostics import Diagnostic, empty_input_diagnostic


class ParseError(ValueError):
    """Relaxed JSON text could not be turned into a JSON value."""

    def __init__(self, diagnostic: Diagnostic):
        self.diagnostic = diagnostic
        super().__init__(diagnostic.summary)


class EmptyInputError(ParseError):
    """Nothing but whitespace or comments was given."""

    def __init__(self):
        super().__init__(empty_input_diagnostic())


class JsonSyntaxError(ParseError):
    """The cleaned text still is not strict JSON."""

    @property
    def line(self) -> int:
        return self.diagnostic.line

    @property
    def column(self) -> int:
        return self.diagnostic.column
