"""Fatal schema errors.

Lexing and parsing stop at the first problem. The diagnostic travels inside the
exception and the caller decides how to surface it.
"""

from protoschema.diagnostics.diagnostic import Diagnostic


class SchemaError(Exception):
    """Base class for fatal lexer/parser failures."""

    def __init__(self, diagnostic: Diagnostic) -> None:
        super().__init__(diagnostic.render())
        self.diagnostic = diagnostic

    @property
    def line(self) -> int:
        return self.diagnostic.line

    @property
    def code(self) -> str:
        return self.diagnostic.code


class LexicalError(SchemaError):
    """A character outside the identifier/delimiter/whitespace set."""


class SchemaSyntaxError(SchemaError):
    """A token sequence that does not match the struct grammar."""
