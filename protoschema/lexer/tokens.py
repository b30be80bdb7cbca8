"""Lexer tokens."""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Final


class TokenKind(IntEnum):
    # -------------------------
    # Identifiers
    # -------------------------
    SYMBOL = 1  # struct name, field name, or referenced type
    DATA_TYPE = 2  # reserved primitive type keyword
    ARRAY_TYPE = 3  # `array`

    # -------------------------
    # Delimiters
    # -------------------------
    STRUCT_BEGIN = 10  # `=` or `==`
    STRUCT_END = 11  # `===`

    # -------------------------
    # Special / sentinels
    # -------------------------
    EOF = 20


PRIMITIVE_TYPES: Final[frozenset[str]] = frozenset({"integer", "string", "bytes", "byte", "boolean", "float"})
"""Reserved keywords lexed as DATA_TYPE."""

ARRAY_KEYWORD: Final[str] = "array"


def classify_identifier(text: str) -> TokenKind:
    if text in PRIMITIVE_TYPES:
        return TokenKind.DATA_TYPE
    if text == ARRAY_KEYWORD:
        return TokenKind.ARRAY_TYPE
    return TokenKind.SYMBOL


@dataclass(frozen=True, slots=True)
class Token:
    """A single lexed token.

    `text` holds the identifier literal and is empty for delimiters and EOF.
    `line` and `after_delimiter` are metadata only, so tokens compare by kind and text.
    `after_delimiter` marks an EOF reached while reading a short `=` delimiter.
    """

    kind: TokenKind
    text: str = ""
    line: int = field(default=0, compare=False)
    after_delimiter: bool = field(default=False, compare=False)


# Shared end-of-input sentinel.
EOF_TOKEN: Final[Token] = Token(TokenKind.EOF)
