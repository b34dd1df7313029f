"""Diagnostic codes and messages."""

from dataclasses import dataclass
from typing import Final, Literal

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    hint: str | None = None
    severity: Severity = "error"
    category: str | None = None


LEXER_UNEXPECTED_CHARACTER: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_UNEXPECTED_CHARACTER",
    message="Unexpected character",
    hint="Quote values that contain spaces or punctuation, e.g. `\"hello world\"`.",
    severity="error",
    category="lexer",
)

LEXER_UNTERMINATED_STRING: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_UNTERMINATED_STRING",
    message="Unterminated string literal",
    hint="Close the string with a double quote before the end of the line.",
    severity="error",
    category="lexer",
)

LEXER_UNTERMINATED_ESCAPE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_UNTERMINATED_ESCAPE",
    message="Unterminated escape sequence",
    hint="A backslash must be followed by `\"`, `\\\\`, `n`, `t` or `r` on the same line.",
    severity="error",
    category="lexer",
)

LEXER_INCONSISTENT_INDENT: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_INCONSISTENT_INDENT",
    message="Inconsistent indentation",
    hint="Dedent to the column of an enclosing block.",
    severity="error",
    category="lexer",
)

PARSER_UNEXPECTED_TOKEN: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_UNEXPECTED_TOKEN",
    message="Unexpected token",
    severity="error",
    category="parser",
)

PARSER_ARITY_MISMATCH: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_ARITY_MISMATCH",
    message="Row value count does not match the schema field count",
    hint="Each row needs exactly one comma-separated value per header field.",
    severity="error",
    category="parser",
)

PARSER_DECLARED_SIZE_MISMATCH: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_DECLARED_SIZE_MISMATCH",
    message="Row count does not match the declared size",
    hint="Update the `[N]` in the header or add/remove rows.",
    severity="error",
    category="parser",
)

PARSER_DUPLICATE_KEY: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_DUPLICATE_KEY",
    message="Duplicate key",
    severity="error",
    category="parser",
)

PARSER_MAX_DEPTH_EXCEEDED: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_MAX_DEPTH_EXCEEDED",
    message="Maximum nesting depth exceeded",
    hint="Raise `ParserOptions.max_depth` if the input is trusted.",
    severity="error",
    category="parser",
)

ENCODER_ROOT_NOT_MAPPING: Final[DiagnosticSpec] = DiagnosticSpec(
    code="ENCODER_ROOT_NOT_MAPPING",
    message="Document root must be a mapping",
    severity="error",
    category="encoder",
)

ENCODER_UNSUPPORTED_VALUE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="ENCODER_UNSUPPORTED_VALUE",
    message="Value cannot be represented",
    hint="Use str, int, float, bool, None, dict, list or tuple values.",
    severity="error",
    category="encoder",
)

ENCODER_UNSUPPORTED_SEQUENCE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="ENCODER_UNSUPPORTED_SEQUENCE",
    message="Sequence must contain only scalars or only mappings",
    severity="error",
    category="encoder",
)

ENCODER_DUPLICATE_KEY: Final[DiagnosticSpec] = DiagnosticSpec(
    code="ENCODER_DUPLICATE_KEY",
    message="Keys collide after identifier sanitization",
    hint="Rename keys so they differ in letters, digits or underscores.",
    severity="error",
    category="encoder",
)

ENCODER_MAX_DEPTH_EXCEEDED: Final[DiagnosticSpec] = DiagnosticSpec(
    code="ENCODER_MAX_DEPTH_EXCEEDED",
    message="Maximum nesting depth exceeded",
    hint="Raise `EncoderOptions.max_depth` for deeply nested documents.",
    severity="error",
    category="encoder",
)
