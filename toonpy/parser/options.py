"""Parser configuration options."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ParserOptions:
    """Feature flags and limits controlling the grammar."""

    max_depth: int = 128
    allow_dotted_identifiers: bool = True

    def __post_init__(self):
        if self.max_depth < 1:
            raise ValueError("max_depth must be >= 1")
