from dataclasses import dataclass
from typing import Final

INDENT_UNIT: Final[int] = 2
"""Width of one indentation level, in columns."""

TAB_WIDTH: Final[int] = 2
"""Columns a leading tab counts for when measuring indentation."""


@dataclass(frozen=True, slots=True, order=True)
class TextPosition:
    """
    Location of a character in source text.

    Invariant:
    - line >= 1 and column >= 1 (both 1-based, as editors report them)
    """

    line: int
    column: int

    def __post_init__(self):
        if self.line < 1 or self.column < 1:
            raise ValueError("TextPosition line and column are 1-based")

    @staticmethod
    def start() -> "TextPosition":
        """Position of the first character of a source."""
        return TextPosition(1, 1)

    @staticmethod
    def from_offsets(line_index: int, column_index: int) -> "TextPosition":
        """Create a TextPosition from 0-based line and column indices."""
        return TextPosition(line_index + 1, column_index + 1)

    def as_tuple(self) -> tuple[int, int]:
        """Get the position as a (line, column) tuple."""
        return (self.line, self.column)

    def __str__(self) -> str:
        return f"{self.line}:{self.column}"


def split_lines(source: str) -> list[str]:
    """Split source into physical lines without their terminators.

    `\\n`, `\\r\\n` and a lone `\\r` all end a line. A trailing terminator does
    not produce an extra empty line.
    """
    lines = source.replace("\r\n", "\n").replace("\r", "\n").split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def indentation_width(line: str) -> tuple[int, int]:
    """Measure leading whitespace of a line.

    Returns `(width, length)`: the width in columns (tabs count as TAB_WIDTH)
    and the number of characters consumed.
    """
    width = 0
    length = 0
    for ch in line:
        if ch == " ":
            width += 1
        elif ch == "\t":
            width += TAB_WIDTH
        else:
            break
        length += 1
    return width, length


def is_blank(line: str) -> bool:
    return not line.strip(" \t")
