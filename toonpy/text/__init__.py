"""Source text positions and line helpers."""

from toonpy.text.text import (
    INDENT_UNIT,
    TAB_WIDTH,
    TextPosition,
    indentation_width,
    is_blank,
    split_lines,
)

__all__ = [
    "INDENT_UNIT",
    "TAB_WIDTH",
    "TextPosition",
    "indentation_width",
    "is_blank",
    "split_lines",
]
