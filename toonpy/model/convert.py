"""Conversion between the document model and plain Python data."""

from __future__ import annotations

from typing import Any

from toonpy.diagnostics import ENCODER_UNSUPPORTED_VALUE, EncodeError, diagnostic_from_spec
from toonpy.model.model import Mapping, Scalar, Sequence, Value

type PlainValue = str | list[PlainValue] | dict[str, PlainValue]


def to_python(value: Value) -> PlainValue:
    """Convert a model value to nested `str`/`list`/`dict` data."""
    match value:
        case Scalar(text=text):
            return text
        case Sequence(items=items):
            return [to_python(item) for item in items]
        case Mapping(entries=entries):
            return {key: to_python(child) for key, child in entries.items()}
        case _:
            raise TypeError(f"Not a document value: {value!r}")


def from_python(obj: Any, *, _path: tuple[str, ...] = ()) -> Value:
    """Convert plain Python data to model values.

    Scalars become their text form: booleans as `true`/`false`, `None` as
    `null`, numbers via `str()`. Model values pass through unchanged.
    """
    if isinstance(obj, (Scalar, Sequence, Mapping)):
        return obj
    if isinstance(obj, str):
        return Scalar(obj)
    if isinstance(obj, bool):
        return Scalar("true" if obj else "false")
    if obj is None:
        return Scalar("null")
    if isinstance(obj, (int, float)):
        return Scalar(str(obj))
    if isinstance(obj, dict):
        return Mapping({str(key): from_python(child, _path=(*_path, str(key))) for key, child in obj.items()})
    if isinstance(obj, (list, tuple)):
        return Sequence(tuple(from_python(item, _path=(*_path, str(index))) for index, item in enumerate(obj)))

    raise EncodeError(
        diagnostic_from_spec(
            ENCODER_UNSUPPORTED_VALUE,
            detail=type(obj).__name__,
            path=_path,
        )
    )
