"""Exception taxonomy; every error carries the Diagnostic that describes it."""

from toonpy.diagnostics.diagnostic import Diagnostic
from toonpy.diagnostics.report import format_diagnostic
from toonpy.text import TextPosition


class ToonError(Exception):
    """Base class for all lexing, parsing and encoding failures."""

    def __init__(self, diagnostic: Diagnostic) -> None:
        super().__init__(format_diagnostic(diagnostic))
        self.diagnostic = diagnostic

    @property
    def code(self) -> str:
        return self.diagnostic.code

    @property
    def position(self) -> TextPosition | None:
        return self.diagnostic.position

    @property
    def line(self) -> int | None:
        return self.diagnostic.line

    @property
    def column(self) -> int | None:
        return self.diagnostic.column


class LexError(ToonError):
    """Malformed characters, strings or indentation."""


class ParseError(ToonError):
    """Token stream does not form a well-formed document."""


class EncodeError(ToonError):
    """Value cannot be serialized to the notation."""
