"""Recursive-descent parser core."""

from collections.abc import Iterator
from contextlib import contextmanager

from toonpy.diagnostics import (
    PARSER_MAX_DEPTH_EXCEEDED,
    PARSER_UNEXPECTED_TOKEN,
    DiagnosticSpec,
    ParseError,
    diagnostic_from_spec,
)
from toonpy.lexer import Token, TokenKind
from toonpy.parser.options import ParserOptions
from toonpy.parser.token_source import TokenSource
from toonpy.text import TextPosition


class Parser:
    """Token cursor shared by the grammar routines."""

    def __init__(self, source: TokenSource, options: ParserOptions | None = None) -> None:
        self._source = source
        self._options = options or ParserOptions()
        self._depth = 0

    @property
    def current(self) -> Token:
        return self._source.current

    @property
    def current_kind(self) -> TokenKind:
        return self._source.current.kind

    def at(self, kind: TokenKind) -> bool:
        return self.current_kind == kind

    def at_set(self, kinds: frozenset[TokenKind] | set[TokenKind]) -> bool:
        return self.current_kind in kinds

    def nth(self, n: int) -> TokenKind:
        return self._source.nth(n).kind

    def bump(self) -> Token:
        token = self._source.current
        self._source.bump()
        return token

    def eat(self, kind: TokenKind) -> bool:
        if self.at(kind):
            self.bump()
            return True
        return False

    def expect(self, kind: TokenKind, expected: str | None = None) -> Token:
        if self.at(kind):
            return self.bump()
        raise self.unexpected(expected or kind.name)

    def unexpected(self, expected: str) -> ParseError:
        token = self.current
        return self.error(
            PARSER_UNEXPECTED_TOKEN,
            token.position,
            detail=f"expected {expected}, found {token.describe()}",
        )

    def error(self, spec: DiagnosticSpec, position: TextPosition, *, detail: str | None = None) -> ParseError:
        return ParseError(diagnostic_from_spec(spec, position, detail=detail))

    @contextmanager
    def nested(self) -> Iterator[None]:
        """Enter one nesting level, failing once `max_depth` is exceeded."""
        if self._depth >= self._options.max_depth:
            raise self.error(
                PARSER_MAX_DEPTH_EXCEEDED,
                self.current.position,
                detail=f"limit is {self._options.max_depth}",
            )
        self._depth += 1
        try:
            yield
        finally:
            self._depth -= 1
