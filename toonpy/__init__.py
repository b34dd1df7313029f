"""Parser and encoder for an indentation-based notation with tabular schema blocks."""

from toonpy.diagnostics import (
    Diagnostic,
    EncodeError,
    LexError,
    ParseError,
    ToonError,
    format_diagnostic,
)
from toonpy.encoder import EncoderOptions, FieldOrder, encode
from toonpy.format import FormatRunResult, run_format
from toonpy.model import (
    Document,
    Mapping,
    Scalar,
    Sequence,
    Value,
    from_python,
    to_python,
)
from toonpy.parser import ParserOptions, parse

decode = parse

__version__ = "0.1.0"

__all__ = [
    "Diagnostic",
    "Document",
    "EncodeError",
    "EncoderOptions",
    "FieldOrder",
    "FormatRunResult",
    "LexError",
    "Mapping",
    "ParseError",
    "ParserOptions",
    "Scalar",
    "Sequence",
    "ToonError",
    "Value",
    "decode",
    "encode",
    "format_diagnostic",
    "from_python",
    "parse",
    "run_format",
    "to_python",
]
