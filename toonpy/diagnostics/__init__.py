"""Diagnostics."""

from toonpy.diagnostics.codes import (
    ENCODER_DUPLICATE_KEY,
    ENCODER_MAX_DEPTH_EXCEEDED,
    ENCODER_ROOT_NOT_MAPPING,
    ENCODER_UNSUPPORTED_SEQUENCE,
    ENCODER_UNSUPPORTED_VALUE,
    LEXER_INCONSISTENT_INDENT,
    LEXER_UNEXPECTED_CHARACTER,
    LEXER_UNTERMINATED_ESCAPE,
    LEXER_UNTERMINATED_STRING,
    PARSER_ARITY_MISMATCH,
    PARSER_DECLARED_SIZE_MISMATCH,
    PARSER_DUPLICATE_KEY,
    PARSER_MAX_DEPTH_EXCEEDED,
    PARSER_UNEXPECTED_TOKEN,
    DiagnosticSpec,
    Severity,
)
from toonpy.diagnostics.diagnostic import Diagnostic, diagnostic_from_spec
from toonpy.diagnostics.errors import EncodeError, LexError, ParseError, ToonError
from toonpy.diagnostics.report import format_diagnostic

__all__ = [
    "ENCODER_DUPLICATE_KEY",
    "ENCODER_MAX_DEPTH_EXCEEDED",
    "ENCODER_ROOT_NOT_MAPPING",
    "ENCODER_UNSUPPORTED_SEQUENCE",
    "ENCODER_UNSUPPORTED_VALUE",
    "LEXER_INCONSISTENT_INDENT",
    "LEXER_UNEXPECTED_CHARACTER",
    "LEXER_UNTERMINATED_ESCAPE",
    "LEXER_UNTERMINATED_STRING",
    "PARSER_ARITY_MISMATCH",
    "PARSER_DECLARED_SIZE_MISMATCH",
    "PARSER_DUPLICATE_KEY",
    "PARSER_MAX_DEPTH_EXCEEDED",
    "PARSER_UNEXPECTED_TOKEN",
    "Diagnostic",
    "DiagnosticSpec",
    "EncodeError",
    "LexError",
    "ParseError",
    "Severity",
    "ToonError",
    "diagnostic_from_spec",
    "format_diagnostic",
]
