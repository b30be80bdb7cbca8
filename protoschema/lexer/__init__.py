"""Lexer."""

from protoschema.lexer.lexer import Lexer, LexerCheckpoint, dump_tokens
from protoschema.lexer.tokens import (
    ARRAY_KEYWORD,
    EOF_TOKEN,
    PRIMITIVE_TYPES,
    Token,
    TokenKind,
    classify_identifier,
)

__all__ = [
    "ARRAY_KEYWORD",
    "EOF_TOKEN",
    "PRIMITIVE_TYPES",
    "Lexer",
    "LexerCheckpoint",
    "Token",
    "TokenKind",
    "classify_identifier",
    "dump_tokens",
]
