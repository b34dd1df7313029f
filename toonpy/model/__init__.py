"""In-memory document model."""

from toonpy.model.convert import PlainValue, from_python, to_python
from toonpy.model.model import Document, Mapping, Scalar, Sequence, Value

__all__ = [
    "Document",
    "Mapping",
    "PlainValue",
    "Scalar",
    "Sequence",
    "Value",
    "from_python",
    "to_python",
]
