"""Diagnostic codes and messages."""

from dataclasses import dataclass
from typing import Final, Literal

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    hint: str | None = None
    severity: Severity = "error"
    category: str | None = None


LEXER_UNEXPECTED_CHARACTER: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_UNEXPECTED_CHARACTER",
    message="Unexpected character",
    hint="Only identifiers, `=` delimiters, whitespace and `#` comment lines are allowed.",
    severity="error",
    category="lex",
)

PARSER_EXPECTED_TOKEN: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_EXPECTED_TOKEN",
    message="Expected token",
    severity="error",
    category="syntax",
)

PARSER_UNEXPECTED_TOKEN: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_UNEXPECTED_TOKEN",
    message="Unexpected token",
    severity="error",
    category="syntax",
)

PARSER_UNEXPECTED_EOF: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_UNEXPECTED_EOF",
    message="Unexpected end of input",
    hint="Close every struct with `===`.",
    severity="error",
    category="syntax",
)
