"""Format runner over a single parse lifecycle."""

from __future__ import annotations

from toonpy.encoder import EncoderOptions, encode
from toonpy.format.result import FormatRunResult
from toonpy.parser import ParserOptions, parse


def run_format(
    text: str,
    options: EncoderOptions | None = None,
    *,
    parse_options: ParserOptions | None = None,
) -> FormatRunResult:
    """Rewrite text in canonical form.

    Parse errors propagate unchanged; a failed run has no partial output.
    """
    document = parse(text, options=parse_options)
    formatted_text = encode(document, options)

    return FormatRunResult(
        source_text=text,
        document=document,
        formatted_text=formatted_text,
    )
