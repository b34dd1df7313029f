"""Document encoder."""

from toonpy.encoder.encode import encode
from toonpy.encoder.encoder import Encoder
from toonpy.encoder.identifiers import (
    emit_identifier,
    emit_scalar,
    is_identifier,
    sanitize_identifier,
)
from toonpy.encoder.options import EncoderOptions, FieldOrder

__all__ = [
    "Encoder",
    "EncoderOptions",
    "FieldOrder",
    "emit_identifier",
    "emit_scalar",
    "encode",
    "is_identifier",
    "sanitize_identifier",
]
