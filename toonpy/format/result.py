"""Format run carrier."""

from __future__ import annotations

from dataclasses import dataclass

from toonpy.model import Document


@dataclass(frozen=True, slots=True)
class FormatRunResult:
    """Outcome of one parse-then-encode formatting pass."""

    source_text: str
    document: Document
    formatted_text: str

    @property
    def changed(self) -> bool:
        return self.formatted_text != self.source_text
