"""Lexer."""

from toonpy.diagnostics import (
    LEXER_INCONSISTENT_INDENT,
    LEXER_UNEXPECTED_CHARACTER,
    LEXER_UNTERMINATED_ESCAPE,
    LEXER_UNTERMINATED_STRING,
    LexError,
    diagnostic_from_spec,
)
from toonpy.lexer.indent import IndentStack
from toonpy.lexer.tokens import PUNCTUATION, Token, TokenFlags, TokenKind
from toonpy.text import TextPosition, indentation_width, is_blank, split_lines

_ESCAPES: dict[str, str] = {
    '"': '"',
    "\\": "\\",
    "n": "\n",
    "t": "\t",
    "r": "\r",
}


class Lexer:
    """Line-oriented lexer that turns indentation into INDENT/DEDENT tokens."""

    def __init__(self, source: str, *, allow_dotted_identifiers: bool = True) -> None:
        self._lines = split_lines(source)
        self._line_index = 0
        self._column = 0
        self._at_line_start = True
        self._indent = IndentStack()
        self._pending_dedents = 0
        self._dedent_position = TextPosition.start()
        self._allow_dotted_identifiers = allow_dotted_identifiers

    @property
    def indent_widths(self) -> tuple[int, ...]:
        """Snapshot of the open indentation widths, base level first."""
        return self._indent.widths

    def next_token(self) -> Token:
        if self._pending_dedents > 0:
            self._pending_dedents -= 1
            self._indent.pop()
            return Token(TokenKind.DEDENT, "", self._dedent_position)

        if self._at_line_start:
            while self._line_index < len(self._lines) and is_blank(self._lines[self._line_index]):
                self._line_index += 1
            if self._line_index >= len(self._lines):
                return self._end_of_input()
            structural = self._lex_indentation()
            if structural is not None:
                return structural

        line = self._lines[self._line_index]
        while self._column < len(line) and line[self._column] in " \t":
            self._column += 1

        if self._column >= len(line):
            position = self._position()
            self._advance_line()
            return Token(TokenKind.NEWLINE, "\n", position)

        ch = line[self._column]
        position = self._position()

        kind = PUNCTUATION.get(ch)
        if kind is not None:
            self._column += 1
            return Token(kind, ch, position)

        if _is_digit(ch):
            return Token(TokenKind.NUMBER, self._lex_number(line), position)

        if _is_identifier_start(ch):
            return Token(TokenKind.IDENTIFIER, self._lex_identifier(line), position)

        if ch == '"':
            return self._lex_quoted(line, position)

        raise LexError(diagnostic_from_spec(LEXER_UNEXPECTED_CHARACTER, position, detail=repr(ch)))

    def lex(self) -> list[Token]:
        tokens: list[Token] = []
        while True:
            token = self.next_token()
            tokens.append(token)
            if token.kind == TokenKind.EOF:
                break
        return tokens

    def _lex_indentation(self) -> Token | None:
        line = self._lines[self._line_index]
        width, length = indentation_width(line)
        self._column = length
        self._at_line_start = False
        position = self._position()

        if width > self._indent.top:
            self._indent.push(width)
            return Token(TokenKind.INDENT, "", position)

        if width < self._indent.top:
            if not self._indent.contains(width):
                open_widths = ", ".join(str(w) for w in self._indent.widths)
                raise LexError(
                    diagnostic_from_spec(
                        LEXER_INCONSISTENT_INDENT,
                        position,
                        detail=f"width {width} matches none of the open levels ({open_widths})",
                    )
                )
            # One DEDENT now, the rest on the following calls.
            self._pending_dedents = self._indent.levels_above(width) - 1
            self._dedent_position = position
            self._indent.pop()
            return Token(TokenKind.DEDENT, "", position)

        return None

    def _end_of_input(self) -> Token:
        position = TextPosition.from_offsets(len(self._lines), 0)
        if self._indent.depth > 0:
            self._indent.pop()
            return Token(TokenKind.DEDENT, "", position)
        return Token(TokenKind.EOF, "", position)

    def _lex_number(self, line: str) -> str:
        start = self._column
        self._column += 1
        saw_dot = False
        while self._column < len(line):
            ch = line[self._column]
            if _is_digit(ch):
                self._column += 1
                continue
            if ch == "." and not saw_dot and _is_digit(_char_at(line, self._column + 1)):
                saw_dot = True
                self._column += 1
                continue
            break
        return line[start : self._column]

    def _lex_identifier(self, line: str) -> str:
        start = self._column
        self._column += 1
        while self._column < len(line):
            ch = line[self._column]
            if _is_identifier_char(ch):
                self._column += 1
                continue
            if ch == "." and self._allow_dotted_identifiers:
                self._column += 1
                continue
            break
        return line[start : self._column]

    def _lex_quoted(self, line: str, position: TextPosition) -> Token:
        # Consume opening quote
        self._column += 1
        flags = TokenFlags.WAS_QUOTED
        buffer: list[str] = []

        while self._column < len(line):
            ch = line[self._column]
            if ch == '"':
                self._column += 1
                return Token(TokenKind.IDENTIFIER, "".join(buffer), position, flags)
            if ch == "\\":
                if self._column + 1 >= len(line):
                    raise LexError(diagnostic_from_spec(LEXER_UNTERMINATED_ESCAPE, self._position()))
                escaped = line[self._column + 1]
                # Unknown escapes keep their backslash.
                buffer.append(_ESCAPES.get(escaped, "\\" + escaped))
                flags |= TokenFlags.HAS_ESCAPE
                self._column += 2
                continue
            buffer.append(ch)
            self._column += 1

        raise LexError(diagnostic_from_spec(LEXER_UNTERMINATED_STRING, position))

    def _advance_line(self) -> None:
        self._line_index += 1
        self._column = 0
        self._at_line_start = True

    def _position(self) -> TextPosition:
        return TextPosition.from_offsets(self._line_index, self._column)


def _char_at(line: str, index: int) -> str:
    if index >= len(line):
        return "\0"
    return line[index]


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def _is_identifier_start(ch: str) -> bool:
    return ch == "_" or "a" <= ch <= "z" or "A" <= ch <= "Z"


def _is_identifier_char(ch: str) -> bool:
    return _is_identifier_start(ch) or _is_digit(ch)


def dump_tokens(tokens: list[Token]) -> None:
    """Print token list with kind, position, flags, and lexeme for debugging."""
    for i, tok in enumerate(tokens):
        print(f"{i:03d} {tok.kind.name:<10} at={tok.position.as_tuple()} flags={tok.flags!r} text={tok.lexeme!r}")
