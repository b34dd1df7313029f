"""Grammar routines that build the document tree from the token stream."""

from dataclasses import dataclass

from toonpy.diagnostics import (
    PARSER_ARITY_MISMATCH,
    PARSER_DECLARED_SIZE_MISMATCH,
    PARSER_DUPLICATE_KEY,
    PARSER_UNEXPECTED_TOKEN,
)
from toonpy.lexer import Token, TokenKind
from toonpy.model import Mapping, Scalar, Sequence, Value
from toonpy.parser.parser import Parser
from toonpy.text import TextPosition

KEY_FOLLOW: frozenset[TokenKind] = frozenset(
    {
        TokenKind.COLON,
        TokenKind.LBRACKET,
        TokenKind.LBRACE,
    }
)

CELL_TOKENS: frozenset[TokenKind] = frozenset(
    {
        TokenKind.IDENTIFIER,
        TokenKind.NUMBER,
    }
)


@dataclass(frozen=True, slots=True)
class SchemaHeader:
    """`name[size]{fields}:` line governing the rows beneath it.

    `bracketed` is False for the `name{fields}:` single-row form.
    """

    name: str
    declared_size: int | None
    fields: tuple[str, ...]
    position: TextPosition
    bracketed: bool = True

    @property
    def expected_rows(self) -> int | None:
        if not self.bracketed:
            return 1
        return self.declared_size


def parse_document(parser: Parser) -> Mapping:
    entries = parse_entry_list(parser, stop_at=frozenset({TokenKind.EOF}))
    parser.expect(TokenKind.EOF, "end of input")
    return Mapping(entries)


def parse_entry_list(
    parser: Parser,
    stop_at: frozenset[TokenKind],
    *,
    into: dict[str, Value] | None = None,
) -> dict[str, Value]:
    entries: dict[str, Value] = {} if into is None else into
    while not parser.at_set(stop_at):
        key, value = parse_entry(parser)
        _insert_unique(parser, entries, key, value)
    return entries


def parse_entry(parser: Parser) -> tuple[Token, Value]:
    key = parser.expect(TokenKind.IDENTIFIER, "a key")

    match parser.current_kind:
        case TokenKind.LBRACKET | TokenKind.LBRACE:
            return key, parse_schema_block(parser, key)
        case TokenKind.COLON:
            parser.bump()
            if parser.eat(TokenKind.NEWLINE):
                return key, parse_nested_block(parser)
            value = parse_inline_value(parser)
            parser.expect(TokenKind.NEWLINE, "end of line")
            return key, value
        case _:
            raise parser.unexpected("`:`, `[` or `{` after key")


def parse_nested_block(parser: Parser) -> Mapping:
    # `key:` with nothing indented beneath it is an empty block.
    if not parser.at(TokenKind.INDENT):
        return Mapping()

    with parser.nested():
        parser.bump()
        entries = parse_entry_list(parser, stop_at=frozenset({TokenKind.DEDENT}))
        parser.expect(TokenKind.DEDENT, "dedent")
    return Mapping(entries)


def parse_inline_value(parser: Parser) -> Value:
    cells = parse_cells(parser)
    if len(cells) == 1:
        return cells[0]
    return Sequence(tuple(cells))


def parse_cells(parser: Parser) -> list[Scalar]:
    """Comma-separated scalars up to (not including) the line end.

    Adjacent commas and a trailing comma produce empty cells.
    """
    cells: list[Scalar] = []
    while True:
        if parser.at_set(CELL_TOKENS):
            cells.append(Scalar(parser.bump().lexeme))
        elif parser.at(TokenKind.COMMA) or parser.at(TokenKind.NEWLINE):
            cells.append(Scalar(""))
        else:
            raise parser.unexpected("a value")

        if not parser.eat(TokenKind.COMMA):
            return cells


def parse_schema_header(parser: Parser, key: Token) -> SchemaHeader:
    declared_size: int | None = None
    bracketed = parser.eat(TokenKind.LBRACKET)
    if bracketed:
        if parser.at(TokenKind.NUMBER):
            size = parser.bump()
            if not size.lexeme.isdigit():
                raise parser.error(
                    PARSER_UNEXPECTED_TOKEN,
                    size.position,
                    detail=f"expected an integer row count, found {size.lexeme!r}",
                )
            declared_size = int(size.lexeme)
        parser.expect(TokenKind.RBRACKET, "`]`")

    parser.expect(TokenKind.LBRACE, "`{`")
    fields = parse_field_list(parser)
    parser.expect(TokenKind.RBRACE, "`}`")
    parser.expect(TokenKind.COLON, "`:`")
    parser.expect(TokenKind.NEWLINE, "end of line")

    return SchemaHeader(
        name=key.lexeme,
        declared_size=declared_size,
        fields=fields,
        position=key.position,
        bracketed=bracketed,
    )


def parse_field_list(parser: Parser) -> tuple[str, ...]:
    fields: list[str] = []
    if parser.at(TokenKind.RBRACE):
        return ()

    while True:
        field = parser.expect(TokenKind.IDENTIFIER, "a field name")
        if field.lexeme in fields:
            raise parser.error(PARSER_DUPLICATE_KEY, field.position, detail=f"field {field.lexeme!r}")
        fields.append(field.lexeme)
        if not parser.eat(TokenKind.COMMA):
            return tuple(fields)


def parse_schema_block(parser: Parser, key: Token) -> Value:
    header = parse_schema_header(parser, key)

    rows: list[dict[str, Value]] = []
    if parser.at(TokenKind.INDENT):
        with parser.nested():
            parser.bump()
            rows = parse_schema_rows(parser, header)
            parser.expect(TokenKind.DEDENT, "dedent")
    elif not header.bracketed:
        # `key{...}:` without a body is the canonical empty mapping.
        return Mapping()

    expected = header.expected_rows
    if expected is not None and len(rows) != expected:
        raise parser.error(
            PARSER_DECLARED_SIZE_MISMATCH,
            header.position,
            detail=f"`{header.name}` declares {expected} row(s), found {len(rows)}",
        )

    return Sequence(tuple(Mapping(row) for row in rows))


def parse_schema_rows(parser: Parser, header: SchemaHeader) -> list[dict[str, Value]]:
    rows: list[dict[str, Value]] = []

    while not parser.at(TokenKind.DEDENT):
        if _at_entry(parser):
            # Entry lines fill the previous row until one of its keys repeats.
            key, value = parse_entry(parser)
            if not rows or key.lexeme in rows[-1]:
                rows.append({})
            rows[-1][key.lexeme] = value
            continue

        row_position = parser.current.position
        cells = parse_cells(parser)
        parser.expect(TokenKind.NEWLINE, "end of row")
        if len(cells) != len(header.fields):
            raise parser.error(
                PARSER_ARITY_MISMATCH,
                row_position,
                detail=(
                    f"`{header.name}` has {len(header.fields)} field(s) "
                    f"{{{','.join(header.fields)}}}, row has {len(cells)}"
                ),
            )
        row: dict[str, Value] = dict(zip(header.fields, cells, strict=True))

        # A deeper-indented block under a row adds nested entries to it.
        if parser.at(TokenKind.INDENT):
            with parser.nested():
                parser.bump()
                parse_entry_list(parser, stop_at=frozenset({TokenKind.DEDENT}), into=row)
                parser.expect(TokenKind.DEDENT, "dedent")

        rows.append(row)

    return rows


def _at_entry(parser: Parser) -> bool:
    return parser.at(TokenKind.IDENTIFIER) and parser.nth(1) in KEY_FOLLOW


def _insert_unique(parser: Parser, entries: dict[str, Value], key: Token, value: Value) -> None:
    if key.lexeme in entries:
        raise parser.error(PARSER_DUPLICATE_KEY, key.position, detail=repr(key.lexeme))
    entries[key.lexeme] = value
