"""Diagnostics helpers."""

from __future__ import annotations

from toonpy.diagnostics.diagnostic import Diagnostic


def format_diagnostic(diagnostic: Diagnostic) -> str:
    """Render a diagnostic as a single line, prefixed with its location."""
    if diagnostic.position is not None:
        location = f"{diagnostic.position}: "
    elif diagnostic.path:
        location = f"{'.'.join(diagnostic.path)}: "
    else:
        location = ""
    return f"{location}{diagnostic.severity}[{diagnostic.code}] {diagnostic.message}"
