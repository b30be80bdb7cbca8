"""Recursive-descent parser for struct declarations.

    schema     = { structDecl } ;
    structDecl = Symbol StructBegin { fieldDecl } StructEnd ;
    fieldDecl  = Symbol ( ArrayType ( DataType | Symbol ) | DataType | Symbol ) ;
"""

from typing import NoReturn

from protoschema.diagnostics import (
    PARSER_EXPECTED_TOKEN,
    PARSER_UNEXPECTED_EOF,
    PARSER_UNEXPECTED_TOKEN,
    Diagnostic,
    DiagnosticSpec,
    SchemaSyntaxError,
)
from protoschema.lexer import Lexer, Token, TokenKind
from protoschema.model import FieldDeclaration, SchemaModel, StructDeclaration
from protoschema.parser.options import ParserOptions

FIELD_TYPE_KINDS = frozenset({TokenKind.DATA_TYPE, TokenKind.SYMBOL})


class Parser:
    """Fail-fast parser; the first grammar violation raises `SchemaSyntaxError`."""

    def __init__(self, lexer: Lexer, options: ParserOptions | None = None) -> None:
        self._lexer = lexer
        self._options = options or ParserOptions()

    @property
    def lexer(self) -> Lexer:
        return self._lexer

    @property
    def options(self) -> ParserOptions:
        return self._options

    def parse(self) -> SchemaModel:
        structs: list[StructDeclaration] = []
        while not self._lexer.at_end():
            structs.append(self.parse_struct())
        return SchemaModel(structs=tuple(structs))

    def parse_struct(self) -> StructDeclaration:
        name = self.expect(TokenKind.SYMBOL)
        self.expect(TokenKind.STRUCT_BEGIN)

        fields: list[FieldDeclaration] = []
        while True:
            token = self._lexer.next_token()
            if self._closes_struct(token):
                break
            if token.kind != TokenKind.SYMBOL:
                self.error(token, expected="field name or `===`", spec=PARSER_UNEXPECTED_TOKEN)
            fields.append(self.parse_field(token))

        return StructDeclaration(name=name.text, fields=tuple(fields))

    def parse_field(self, name: Token) -> FieldDeclaration:
        token = self._lexer.next_token()
        if token.kind == TokenKind.ARRAY_TYPE:
            element = self._lexer.next_token()
            if element.kind not in FIELD_TYPE_KINDS:
                self.error(element, expected="element type", spec=PARSER_UNEXPECTED_TOKEN)
            return FieldDeclaration(name=name.text, type_name=element.text, is_array=True)

        if token.kind not in FIELD_TYPE_KINDS:
            self.error(token, expected="type name or `array`", spec=PARSER_UNEXPECTED_TOKEN)
        return FieldDeclaration(name=name.text, type_name=token.text, is_array=False)

    def expect(self, kind: TokenKind) -> Token:
        token = self._lexer.next_token()
        if token.kind != kind:
            self.error(token, expected=kind.name)
        return token

    def error(self, found: Token, *, expected: str, spec: DiagnosticSpec = PARSER_EXPECTED_TOKEN) -> NoReturn:
        if found.kind == TokenKind.EOF:
            spec = PARSER_UNEXPECTED_EOF
        detail = f"expected {expected}, found {_describe(found)}"
        raise SchemaSyntaxError(Diagnostic.from_spec(spec, self._lexer.line, detail=detail))

    def _closes_struct(self, token: Token) -> bool:
        if token.kind == TokenKind.STRUCT_END:
            return True
        if not self._options.allow_begin_marker_as_end:
            return False
        # A lone `=` also closes, including one cut short by the end of input.
        return token.kind == TokenKind.STRUCT_BEGIN or (token.kind == TokenKind.EOF and token.after_delimiter)


def _describe(token: Token) -> str:
    if token.text:
        return f"{token.kind.name} {token.text!r}"
    return token.kind.name
