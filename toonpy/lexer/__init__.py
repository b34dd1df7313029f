"""Lexer."""

from toonpy.lexer.indent import IndentStack
from toonpy.lexer.lexer import Lexer, dump_tokens
from toonpy.lexer.tokens import (
    PUNCTUATION,
    Token,
    TokenFlags,
    TokenKind,
)

__all__ = [
    "PUNCTUATION",
    "IndentStack",
    "Lexer",
    "Token",
    "TokenFlags",
    "TokenKind",
    "dump_tokens",
]
