"""Diagnostics core types."""

from dataclasses import dataclass

from toonpy.diagnostics.codes import DiagnosticSpec, Severity
from toonpy.text import TextPosition


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic attached to every lexer/parser/encoder failure."""

    code: str
    message: str
    position: TextPosition | None = None
    severity: Severity = "error"
    hint: str | None = None
    category: str | None = None
    path: tuple[str, ...] = ()

    @property
    def line(self) -> int | None:
        return self.position.line if self.position is not None else None

    @property
    def column(self) -> int | None:
        return self.position.column if self.position is not None else None


def diagnostic_from_spec(
    spec: DiagnosticSpec,
    position: TextPosition | None = None,
    *,
    detail: str | None = None,
    path: tuple[str, ...] = (),
) -> Diagnostic:
    """Build a Diagnostic from a DiagnosticSpec constant, appending an optional detail."""
    message = spec.message if detail is None else f"{spec.message}: {detail}"
    return Diagnostic(
        code=spec.code,
        message=message,
        position=position,
        severity=spec.severity,
        hint=spec.hint,
        category=spec.category,
        path=path,
    )
