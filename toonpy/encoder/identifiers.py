"""Identifier and scalar emission helpers."""

import re
from typing import Final

_IDENTIFIER_RE: Final = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")
_DISALLOWED_RUN_RE: Final = re.compile(r"[^A-Za-z0-9_]+")
_LEADING_INVALID_RE: Final = re.compile(r"^[^A-Za-z_]+")

# Text the lexer reads back as a single bare token with the same lexeme.
_BARE_IDENTIFIER_RE: Final = re.compile(r"[A-Za-z_][A-Za-z0-9_.]*")
_BARE_NUMBER_RE: Final = re.compile(r"[0-9]+(?:\.[0-9]+)?")

_ESCAPES: Final[dict[str, str]] = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\t": "\\t",
    "\r": "\\r",
}

PLACEHOLDER_FIELD: Final[str] = "_"


def is_identifier(text: str) -> bool:
    return _IDENTIFIER_RE.fullmatch(text) is not None


def sanitize_identifier(text: str) -> str:
    """Coerce arbitrary text into `[A-Za-z_][A-Za-z0-9_]*`.

    >>> sanitize_identifier("first name")
    'first_name'
    >>> sanitize_identifier("2nd-place!")
    'nd_place'
    >>> sanitize_identifier("!!!")
    '_'
    """
    sanitized = _DISALLOWED_RUN_RE.sub("_", text)
    sanitized = _LEADING_INVALID_RE.sub("", sanitized)
    sanitized = sanitized.rstrip("_")
    return sanitized or PLACEHOLDER_FIELD


def emit_identifier(text: str) -> str:
    if is_identifier(text):
        return text
    return sanitize_identifier(text)


def is_bare_scalar(text: str) -> bool:
    return _BARE_IDENTIFIER_RE.fullmatch(text) is not None or _BARE_NUMBER_RE.fullmatch(text) is not None


def quote(text: str) -> str:
    escaped = "".join(_ESCAPES.get(ch, ch) for ch in text)
    return f'"{escaped}"'


def emit_scalar(text: str) -> str:
    """Emit scalar text bare when it lexes back unchanged, quoted otherwise."""
    if is_bare_scalar(text):
        return text
    return quote(text)
