"""Lexer tokens."""

from dataclasses import dataclass
from enum import IntEnum, IntFlag

from toonpy.text import TextPosition


class TokenKind(IntEnum):
    # -------------------------
    # Special / sentinels
    # -------------------------
    EOF = 1

    # -------------------------
    # Structural tokens (synthesized from layout)
    # -------------------------
    INDENT = 10
    DEDENT = 11
    NEWLINE = 12

    # -------------------------
    # Identifiers / literals
    # -------------------------
    IDENTIFIER = 20  # bare or quoted
    NUMBER = 21

    # -------------------------
    # Punctuation / separators
    # -------------------------
    COLON = 40  # :
    COMMA = 42  # ,

    LBRACE = 60  # {
    RBRACE = 61  # }
    LBRACKET = 62  # [
    RBRACKET = 63  # ]

    @property
    def is_scalar(self) -> bool:
        return self in (TokenKind.IDENTIFIER, TokenKind.NUMBER)


PUNCTUATION: dict[str, TokenKind] = {
    "[": TokenKind.LBRACKET,
    "]": TokenKind.RBRACKET,
    "{": TokenKind.LBRACE,
    "}": TokenKind.RBRACE,
    ":": TokenKind.COLON,
    ",": TokenKind.COMMA,
}


class TokenFlags(IntFlag):
    """Token metadata flags."""

    NONE = 0
    WAS_QUOTED = 1 << 0
    HAS_ESCAPE = 1 << 1


@dataclass(frozen=True, slots=True)
class Token:
    """A single lexed token.

    `lexeme` is the source text of the token, except for quoted identifiers
    where it holds the decoded string without quotes.
    """

    kind: TokenKind
    lexeme: str
    position: TextPosition
    flags: TokenFlags = TokenFlags.NONE

    @property
    def line(self) -> int:
        return self.position.line

    @property
    def column(self) -> int:
        return self.position.column

    def was_quoted(self) -> bool:
        return bool(self.flags & TokenFlags.WAS_QUOTED)

    def describe(self) -> str:
        """Human-readable name used in parse error messages."""
        if self.kind.is_scalar:
            return f"{self.kind.name} {self.lexeme!r}"
        return self.kind.name
