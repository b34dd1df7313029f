"""Indentation stack driving INDENT/DEDENT synthesis."""


class IndentStack:
    """Widths of the currently open indentation levels, base level first.

    Starts as `[0]`. The base level is never popped.
    """

    def __init__(self) -> None:
        self._widths: list[int] = [0]

    @property
    def top(self) -> int:
        return self._widths[-1]

    @property
    def depth(self) -> int:
        """Number of open levels above the base level."""
        return len(self._widths) - 1

    @property
    def widths(self) -> tuple[int, ...]:
        return tuple(self._widths)

    def contains(self, width: int) -> bool:
        return width in self._widths

    def levels_above(self, width: int) -> int:
        """How many open levels are wider than `width`."""
        return sum(1 for open_width in self._widths if open_width > width)

    def push(self, width: int) -> None:
        if width <= self.top:
            raise ValueError(f"Indent width {width} must exceed current width {self.top}")
        self._widths.append(width)

    def pop(self) -> int:
        if self.depth == 0:
            raise ValueError("Cannot pop the base indentation level")
        return self._widths.pop()
