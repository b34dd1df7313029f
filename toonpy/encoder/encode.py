"""High-level encode entrypoint."""

from typing import Any

from toonpy.encoder.encoder import Encoder
from toonpy.encoder.options import EncoderOptions


def encode(document: Any, options: EncoderOptions | None = None) -> str:
    """Serialize a Document (or plain dict data) to notation text.

    Raises EncodeError when the root is not a mapping or a value cannot be
    represented.
    """
    return Encoder(options).encode_document(document)
