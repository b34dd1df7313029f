"""High-level parse entrypoint."""

from toonpy.lexer import Lexer
from toonpy.model import Document
from toonpy.parser.grammar import parse_document
from toonpy.parser.options import ParserOptions
from toonpy.parser.parser import Parser
from toonpy.parser.token_source import TokenSource


def parse(text: str, options: ParserOptions | None = None) -> Document:
    """Parse notation text into a Document.

    Raises LexError or ParseError on malformed input; nothing is returned
    for a partially parsed document.
    """
    resolved_options = options or ParserOptions()

    lexer = Lexer(text, allow_dotted_identifiers=resolved_options.allow_dotted_identifiers)
    source = TokenSource(lexer)
    parser = Parser(source, options=resolved_options)

    return parse_document(parser)
