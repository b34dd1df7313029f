"""Serialize documents back to the notation."""

from __future__ import annotations

from typing import Any

from toonpy.diagnostics import (
    ENCODER_DUPLICATE_KEY,
    ENCODER_MAX_DEPTH_EXCEEDED,
    ENCODER_ROOT_NOT_MAPPING,
    ENCODER_UNSUPPORTED_SEQUENCE,
    ENCODER_UNSUPPORTED_VALUE,
    DiagnosticSpec,
    EncodeError,
    diagnostic_from_spec,
)
from toonpy.encoder.identifiers import PLACEHOLDER_FIELD, emit_identifier, emit_scalar, quote
from toonpy.encoder.options import EncoderOptions, FieldOrder
from toonpy.model import Mapping, Scalar, Sequence, Value, from_python
from toonpy.text import INDENT_UNIT

INDENT = " " * INDENT_UNIT

type Path = tuple[str, ...]


class Encoder:
    """Emits canonical text for a document.

    Choice of form per value:

    - Scalar: `key: value`
    - Sequence of scalar-only Mappings: `key[N]{fields}:` plus one CSV row each
    - Sequence of Mappings holding nested values: `key[N]{fields}:` where every
      row lists its nested blocks first, then its scalar fields as `field: value`
    - Sequence of Scalars: `key: v1,v2`
    - Mapping: `key{fields}:` with scalar fields first, then nested blocks

    Emitting nested content before scalars inside schema rows means a parse of
    the output does not always reproduce the input; re-encoding that parse
    result is stable.
    """

    def __init__(self, options: EncoderOptions | None = None) -> None:
        self._options = options or EncoderOptions()

    def encode_document(self, document: Any) -> str:
        root = from_python(document)
        if not isinstance(root, Mapping):
            raise EncodeError(diagnostic_from_spec(ENCODER_ROOT_NOT_MAPPING, detail=f"got {type(root).__name__}"))

        lines: list[str] = []
        names = self._emit_keys(self._ordered_keys(root), ())
        for key, name in names.items():
            self._encode_entry(name, root[key], 0, (key,), lines)

        return "\n".join(lines) + "\n"

    def _encode_entry(self, name: str, value: Value, depth: int, path: Path, lines: list[str]) -> None:
        match value:
            case Scalar(text=text):
                lines.append(_line(depth, f"{name}: {emit_scalar(text)}"))
            case Sequence() if value.is_mapping_list:
                self._encode_schema(name, value, depth, path, lines)
            case Sequence() if value.is_scalar_list:
                inline = ",".join(emit_scalar(item.text) for item in value.items if isinstance(item, Scalar))
                lines.append(_line(depth, f"{name}: {inline}"))
            case Sequence():
                raise self._error(ENCODER_UNSUPPORTED_SEQUENCE, path)
            case Mapping():
                self._encode_mapping_block(name, value, depth, path, lines)
            case _:
                raise self._error(ENCODER_UNSUPPORTED_VALUE, path, detail=type(value).__name__)

    def _encode_schema(self, name: str, rows: Sequence, depth: int, path: Path, lines: list[str]) -> None:
        self._check_depth(depth, path)
        mappings = [row for row in rows.items if isinstance(row, Mapping)]

        if not any(row.has_complex_values for row in mappings):
            self._encode_flat_rows(name, mappings, depth, path, lines)
            return

        # Header matches the emission order: block-valued fields, then the rest.
        fields = _nested_row_fields(mappings)
        names = self._emit_keys(fields, path)
        lines.append(_line(depth, f"{name}[{len(mappings)}]{{{','.join(names.values())}}}:"))

        for index, row in enumerate(mappings):
            row_path = (*path, str(index))
            for field in fields:
                value = row.get(field)
                if value is not None and _is_block(value):
                    self._encode_entry(names[field], value, depth + 1, (*row_path, field), lines)
            for field in fields:
                value = row.get(field)
                if value is None:
                    lines.append(_line(depth + 1, f"{names[field]}: {quote('')}"))
                elif not _is_block(value):
                    self._encode_entry(names[field], value, depth + 1, (*row_path, field), lines)

    def _encode_flat_rows(self, name: str, rows: list[Mapping], depth: int, path: Path, lines: list[str]) -> None:
        if not rows:
            lines.append(_line(depth, f"{name}[0]{{}}:"))
            return

        fields = self._row_fields(rows)
        if fields:
            header_fields = list(self._emit_keys(fields, path).values())
        else:
            # Rows without keys still need a visible cell each.
            header_fields = [PLACEHOLDER_FIELD]
        lines.append(_line(depth, f"{name}[{len(rows)}]{{{','.join(header_fields)}}}:"))

        for row in rows:
            cells = [_cell(row.get(field)) for field in fields]
            if len(cells) <= 1 and not any(cells):
                cells = [quote("")]
            lines.append(_line(depth + 1, ",".join(cells)))

    def _encode_mapping_block(self, name: str, mapping: Mapping, depth: int, path: Path, lines: list[str]) -> None:
        self._check_depth(depth, path)
        keys = self._ordered_keys(mapping)
        names = self._emit_keys(keys, path)
        scalar_keys = [key for key in keys if not _is_block(mapping[key])]
        nested_keys = [key for key in keys if _is_block(mapping[key])]

        header_keys = scalar_keys or nested_keys
        header_fields = [names[key] for key in header_keys] or [PLACEHOLDER_FIELD]
        lines.append(_line(depth, f"{name}{{{','.join(header_fields)}}}:"))

        for key in scalar_keys + nested_keys:
            self._encode_entry(names[key], mapping[key], depth + 1, (*path, key), lines)

    def _ordered_keys(self, mapping: Mapping) -> list[str]:
        if self._options.sort_keys:
            return sorted(mapping.keys())
        return mapping.keys()

    def _row_fields(self, rows: list[Mapping]) -> list[str]:
        union = _first_seen_keys(rows)
        if self._options.field_order == FieldOrder.SORTED:
            return sorted(union)
        return union

    def _emit_keys(self, keys: list[str], path: Path) -> dict[str, str]:
        """Map raw keys to emitted identifiers, rejecting collisions."""
        names: dict[str, str] = {}
        owners: dict[str, str] = {}
        for key in keys:
            name = emit_identifier(key)
            if name in owners:
                raise self._error(
                    ENCODER_DUPLICATE_KEY,
                    path,
                    detail=f"{owners[name]!r} and {key!r} both emit as {name!r}",
                )
            owners[name] = key
            names[key] = name
        return names

    def _check_depth(self, depth: int, path: Path) -> None:
        if depth >= self._options.max_depth:
            raise self._error(ENCODER_MAX_DEPTH_EXCEEDED, path, detail=f"limit is {self._options.max_depth}")

    def _error(self, spec: DiagnosticSpec, path: Path, *, detail: str | None = None) -> EncodeError:
        return EncodeError(diagnostic_from_spec(spec, detail=detail, path=path))


def _is_block(value: Value) -> bool:
    """True for values emitted as an indented block rather than on one line."""
    if isinstance(value, Mapping):
        return True
    return isinstance(value, Sequence) and value.is_mapping_list


def _first_seen_keys(rows: list[Mapping]) -> list[str]:
    keys: dict[str, None] = {}
    for row in rows:
        keys.update(dict.fromkeys(row.keys()))
    return list(keys)


def _nested_row_fields(rows: list[Mapping]) -> list[str]:
    """First-seen keys, those whose first value is a block ahead of the others."""
    blocks: dict[str, None] = {}
    others: dict[str, None] = {}
    for row in rows:
        for key, value in row.items():
            if key in blocks or key in others:
                continue
            if _is_block(value):
                blocks[key] = None
            else:
                others[key] = None
    return [*blocks, *others]


def _cell(value: Value | None) -> str:
    if value is None:
        return ""
    if isinstance(value, Scalar):
        return emit_scalar(value.text)
    raise TypeError(f"Flat rows hold scalars only, got {type(value).__name__}")


def _line(depth: int, text: str) -> str:
    return f"{INDENT * depth}{text}"
