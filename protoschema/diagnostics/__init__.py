"""Diagnostics."""

from protoschema.diagnostics.codes import (
    LEXER_UNEXPECTED_CHARACTER,
    PARSER_EXPECTED_TOKEN,
    PARSER_UNEXPECTED_EOF,
    PARSER_UNEXPECTED_TOKEN,
    DiagnosticSpec,
    Severity,
)
from protoschema.diagnostics.diagnostic import Diagnostic
from protoschema.diagnostics.errors import LexicalError, SchemaError, SchemaSyntaxError

__all__ = [
    "LEXER_UNEXPECTED_CHARACTER",
    "PARSER_EXPECTED_TOKEN",
    "PARSER_UNEXPECTED_EOF",
    "PARSER_UNEXPECTED_TOKEN",
    "Diagnostic",
    "DiagnosticSpec",
    "LexicalError",
    "SchemaError",
    "SchemaSyntaxError",
    "Severity",
]
