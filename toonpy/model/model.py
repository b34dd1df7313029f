"""Document data model."""

from __future__ import annotations

from collections import abc
from collections.abc import Iterator
from dataclasses import dataclass, field
from types import MappingProxyType


@dataclass(frozen=True, slots=True)
class Scalar:
    """Leaf value preserved as literal source text."""

    text: str


@dataclass(frozen=True, slots=True)
class Sequence:
    """Ordered list of values: an inline list or the rows of a schema block."""

    items: tuple[Value, ...] = ()

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Value]:
        return iter(self.items)

    def __getitem__(self, index: int) -> Value:
        return self.items[index]

    @property
    def is_scalar_list(self) -> bool:
        return all(isinstance(item, Scalar) for item in self.items)

    @property
    def is_mapping_list(self) -> bool:
        return all(isinstance(item, Mapping) for item in self.items)


@dataclass(frozen=True, slots=True)
class Mapping:
    """Ordered key/value block with unique keys.

    Equality ignores key order, matching dict semantics. Entries are copied
    into a read-only view on construction.
    """

    entries: abc.Mapping[str, Value] = field(default_factory=lambda: MappingProxyType({}))

    def __post_init__(self):
        object.__setattr__(self, "entries", MappingProxyType(dict(self.entries)))

    def __hash__(self) -> int:
        return hash(frozenset(self.entries.items()))

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self.entries)

    def __getitem__(self, key: str) -> Value:
        return self.entries[key]

    def __contains__(self, key: object) -> bool:
        return key in self.entries

    def get(self, key: str) -> Value | None:
        return self.entries.get(key)

    def keys(self) -> list[str]:
        return list(self.entries)

    def items(self) -> list[tuple[str, Value]]:
        return list(self.entries.items())

    @property
    def has_complex_values(self) -> bool:
        return any(not isinstance(value, Scalar) for value in self.entries.values())


type Value = Scalar | Sequence | Mapping
type Document = Mapping


__all__ = [
    "Document",
    "Mapping",
    "Scalar",
    "Sequence",
    "Value",
]
