"""Encoder modes and configuration options."""

from dataclasses import dataclass
from enum import StrEnum


class FieldOrder(StrEnum):
    """How tabular schema fields are ordered in the header."""

    SORTED = "sorted"
    PRESERVE = "preserve"


@dataclass(frozen=True, slots=True)
class EncoderOptions:
    """Output ordering policy and limits."""

    sort_keys: bool = True
    field_order: FieldOrder = FieldOrder.SORTED
    max_depth: int = 128

    def __post_init__(self):
        if self.max_depth < 1:
            raise ValueError("max_depth must be >= 1")
        # Accept plain strings such as "preserve".
        object.__setattr__(self, "field_order", FieldOrder(self.field_order))
