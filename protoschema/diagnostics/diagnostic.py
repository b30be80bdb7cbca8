"""Diagnostics core types."""

from dataclasses import dataclass

from protoschema.diagnostics.codes import DiagnosticSpec, Severity


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic emitted by the lexer/parser."""

    code: str
    message: str
    line: int
    severity: Severity = "error"
    hint: str | None = None
    category: str | None = None

    def __post_init__(self):
        if self.line < 1:
            raise ValueError("Diagnostic line numbers are 1-based")

    @staticmethod
    def from_spec(spec: DiagnosticSpec, line: int, *, detail: str | None = None) -> "Diagnostic":
        message = spec.message if detail is None else f"{spec.message}: {detail}"
        return Diagnostic(
            code=spec.code,
            message=message,
            line=line,
            severity=spec.severity,
            hint=spec.hint,
            category=spec.category,
        )

    def render(self) -> str:
        prefix = f"{self.category} {self.severity}" if self.category else self.severity
        return f"{prefix} at line {self.line}: {self.message}"
