"""Parser infrastructure (token source + recursive grammar)."""

from toonpy.parser.grammar import (
    SchemaHeader,
    parse_document,
    parse_entry,
    parse_entry_list,
    parse_schema_block,
)
from toonpy.parser.options import ParserOptions
from toonpy.parser.parser import Parser
from toonpy.parser.token_source import TokenSource
from toonpy.parser.toon import parse

__all__ = [
    "Parser",
    "ParserOptions",
    "SchemaHeader",
    "TokenSource",
    "parse",
    "parse_document",
    "parse_entry",
    "parse_entry_list",
    "parse_schema_block",
]
