import textwrap

import pytest

from toonpy.diagnostics import LexError, ParseError
from toonpy.lexer import Lexer, TokenKind
from toonpy.model import Mapping, Scalar, Sequence, to_python
from toonpy.parser import ParserOptions, TokenSource, parse
from tests._debug import debug_dump_document
from tests._shared_cases import DOCUMENT_CASES, DocumentCase, case_id


def _dedent(text: str) -> str:
    return textwrap.dedent(text).lstrip()


@pytest.mark.parametrize("case", DOCUMENT_CASES, ids=case_id)
def test_parse_shared_cases(case: DocumentCase) -> None:
    document = parse(case.source)
    debug_dump_document(case.name, document, case.source)

    assert to_python(document) == case.expected


def test_simple_schema_produces_mappings_of_literal_text() -> None:
    document = parse("users[2]{id,name}:\n  1,Ada\n  2,Bob\n")

    users = document["users"]
    assert isinstance(users, Sequence)
    assert len(users) == 2
    assert users[0] == Mapping({"id": Scalar("1"), "name": Scalar("Ada")})
    assert users[1] == Mapping({"id": Scalar("2"), "name": Scalar("Bob")})


def test_scalars_are_not_coerced() -> None:
    document = parse("age: 30\nratio: 0.50\nactive: true\n")

    assert document["age"] == Scalar("30")
    assert document["ratio"] == Scalar("0.50")
    assert document["active"] == Scalar("true")


def test_row_mapping_preserves_header_field_order() -> None:
    document = parse("rows[1]{z,a,m}:\n  1,2,3\n")

    rows = document["rows"]
    assert isinstance(rows, Sequence)
    row = rows[0]
    assert isinstance(row, Mapping)
    assert row.keys() == ["z", "a", "m"]


def test_mapping_preserves_input_key_order() -> None:
    document = parse("b: 1\na: 2\nc: 3\n")

    assert document.keys() == ["b", "a", "c"]


def test_schema_without_declared_size_accepts_any_row_count() -> None:
    document = parse("rows[]{a}:\n  1\n  2\n  3\n")

    assert to_python(document) == {"rows": [{"a": "1"}, {"a": "2"}, {"a": "3"}]}


def test_declared_size_mismatch_is_a_parse_error() -> None:
    with pytest.raises(ParseError) as excinfo:
        parse("users[2]{id,name}:\n  1,Ada\n")

    assert excinfo.value.code == "PARSER_DECLARED_SIZE_MISMATCH"
    assert (excinfo.value.line, excinfo.value.column) == (1, 1)
    assert "declares 2 row(s), found 1" in str(excinfo.value)


def test_declared_size_without_rows() -> None:
    assert to_python(parse("users[0]{id,name}:\n")) == {"users": []}

    with pytest.raises(ParseError) as excinfo:
        parse("users[1]{id,name}:\nnext: 1\n")
    assert excinfo.value.code == "PARSER_DECLARED_SIZE_MISMATCH"


def test_row_arity_mismatch_is_a_parse_error() -> None:
    with pytest.raises(ParseError) as excinfo:
        parse("users[1]{id,name}:\n  1,Ada,extra\n")

    assert excinfo.value.code == "PARSER_ARITY_MISMATCH"
    assert (excinfo.value.line, excinfo.value.column) == (2, 3)
    assert "row has 3" in str(excinfo.value)


def test_short_row_is_a_parse_error() -> None:
    with pytest.raises(ParseError) as excinfo:
        parse("users[1]{id,name}:\n  1\n")

    assert excinfo.value.code == "PARSER_ARITY_MISMATCH"


def test_inconsistent_indentation_is_a_lex_error() -> None:
    with pytest.raises(LexError) as excinfo:
        parse("a:\n    b: 1\n  c: 2\n")

    assert excinfo.value.code == "LEXER_INCONSISTENT_INDENT"


def test_empty_cells_in_rows() -> None:
    document = parse('rows[2]{a,b,c}:\n  1,,3\n  ,"",\n')

    assert to_python(document) == {
        "rows": [
            {"a": "1", "b": "", "c": "3"},
            {"a": "", "b": "", "c": ""},
        ]
    }


def test_inline_list_becomes_sequence_of_scalars() -> None:
    document = parse("tags: a,b,c\n")

    assert document["tags"] == Sequence((Scalar("a"), Scalar("b"), Scalar("c")))


def test_braced_single_row_schema() -> None:
    document = parse("config{host,port}:\n  localhost,8080\n")

    assert to_python(document) == {"config": [{"host": "localhost", "port": "8080"}]}


def test_braced_schema_with_two_rows_is_a_size_error() -> None:
    with pytest.raises(ParseError) as excinfo:
        parse("config{host,port}:\n  a,1\n  b,2\n")

    assert excinfo.value.code == "PARSER_DECLARED_SIZE_MISMATCH"
    assert "declares 1 row(s), found 2" in str(excinfo.value)


def test_braced_header_without_body_is_an_empty_mapping() -> None:
    document = parse("meta{_}:\nname: x\n")

    assert document["meta"] == Mapping()
    assert document["name"] == Scalar("x")


def test_braced_header_with_entries_collects_one_row() -> None:
    source = _dedent(
        """
        server{host,port}:
          host: localhost
          port: 8080
          limits{max}:
            max: 10
        """
    )

    assert to_python(parse(source)) == {
        "server": [
            {
                "host": "localhost",
                "port": "8080",
                "limits": [{"max": "10"}],
            }
        ]
    }


def test_key_without_value_or_body_is_an_empty_mapping() -> None:
    assert to_python(parse("empty:\nnext: 1\n")) == {"empty": {}, "next": "1"}


def test_entries_start_a_new_row_when_a_key_repeats() -> None:
    source = _dedent(
        """
        items[2]{users,status}:
          users[1]{id}:
            1
          status: active
          users[1]{id}:
            2
          status: closed
        """
    )

    assert to_python(parse(source)) == {
        "items": [
            {"users": [{"id": "1"}], "status": "active"},
            {"users": [{"id": "2"}], "status": "closed"},
        ]
    }


def test_entries_extend_the_previous_flat_row() -> None:
    source = _dedent(
        """
        users[2]{id,name}:
          1,Ada
          roles: admin,dev
          2,Bob
        """
    )

    assert to_python(parse(source)) == {
        "users": [
            {"id": "1", "name": "Ada", "roles": ["admin", "dev"]},
            {"id": "2", "name": "Bob"},
        ]
    }


def test_deeper_indented_block_under_a_row_nests_into_it() -> None:
    source = _dedent(
        """
        users[2]{id,name}:
          1,Ada
            address:
              city: London
          2,Bob
        """
    )

    assert to_python(parse(source)) == {
        "users": [
            {"id": "1", "name": "Ada", "address": {"city": "London"}},
            {"id": "2", "name": "Bob"},
        ]
    }


def test_nested_entry_colliding_with_row_field_is_rejected() -> None:
    source = _dedent(
        """
        users[1]{id,name}:
          1,Ada
            name: Bob
        """
    )

    with pytest.raises(ParseError) as excinfo:
        parse(source)
    assert excinfo.value.code == "PARSER_DUPLICATE_KEY"
    assert excinfo.value.line == 3


def test_duplicate_key_is_a_parse_error() -> None:
    with pytest.raises(ParseError) as excinfo:
        parse("a: 1\nb: 2\na: 3\n")

    assert excinfo.value.code == "PARSER_DUPLICATE_KEY"
    assert (excinfo.value.line, excinfo.value.column) == (3, 1)


def test_duplicate_field_name_is_a_parse_error() -> None:
    with pytest.raises(ParseError) as excinfo:
        parse("rows[1]{a,a}:\n  1,2\n")

    assert excinfo.value.code == "PARSER_DUPLICATE_KEY"
    assert excinfo.value.column == 11


def test_missing_colon_is_an_unexpected_token() -> None:
    with pytest.raises(ParseError) as excinfo:
        parse("name John\n")

    assert excinfo.value.code == "PARSER_UNEXPECTED_TOKEN"
    assert (excinfo.value.line, excinfo.value.column) == (1, 6)
    assert "IDENTIFIER 'John'" in str(excinfo.value)


def test_unexpected_indent_at_top_level() -> None:
    with pytest.raises(ParseError) as excinfo:
        parse("  a: 1\n")

    assert excinfo.value.code == "PARSER_UNEXPECTED_TOKEN"
    assert "found INDENT" in str(excinfo.value)


def test_unquoted_space_separated_value_is_rejected() -> None:
    with pytest.raises(ParseError) as excinfo:
        parse("name: John Smith\n")

    assert excinfo.value.code == "PARSER_UNEXPECTED_TOKEN"
    assert excinfo.value.column == 12


def test_fractional_declared_size_is_rejected() -> None:
    with pytest.raises(ParseError) as excinfo:
        parse("rows[1.5]{a}:\n  1\n")

    assert excinfo.value.code == "PARSER_UNEXPECTED_TOKEN"
    assert "integer row count" in str(excinfo.value)


def test_bracket_size_requires_field_list() -> None:
    with pytest.raises(ParseError) as excinfo:
        parse("rows[2]: a,b\n")

    assert excinfo.value.code == "PARSER_UNEXPECTED_TOKEN"
    assert "expected `{`" in str(excinfo.value)


def test_max_depth_bounds_nesting() -> None:
    source = "a:\n  b:\n    c:\n      d: 1\n"

    assert to_python(parse(source, ParserOptions(max_depth=3))) == {"a": {"b": {"c": {"d": "1"}}}}
    with pytest.raises(ParseError) as excinfo:
        parse(source, ParserOptions(max_depth=2))
    assert excinfo.value.code == "PARSER_MAX_DEPTH_EXCEEDED"
    assert excinfo.value.line == 4


def test_max_depth_must_be_positive() -> None:
    with pytest.raises(ValueError, match="max_depth"):
        ParserOptions(max_depth=0)


def test_no_partial_document_on_error() -> None:
    result = None
    with pytest.raises(ParseError):
        result = parse("a: 1\nb: 2\nc 3\n")

    assert result is None


def test_token_source_lookahead_stops_at_eof() -> None:
    source = TokenSource(Lexer("a: 1\n"))

    assert source.nth(0).kind == TokenKind.IDENTIFIER
    assert source.nth(1).kind == TokenKind.COLON
    assert source.nth(10).kind == TokenKind.EOF

    for _ in range(10):
        source.bump()
    assert source.current.kind == TokenKind.EOF


def test_dotted_scalars_keep_their_dots() -> None:
    assert to_python(parse("v: v1.\nh: a..b\nhost: api.example.com\n")) == {
        "v": "v1.",
        "h": "a..b",
        "host": "api.example.com",
    }
