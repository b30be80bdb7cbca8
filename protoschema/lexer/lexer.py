"""Lexer."""

import sys
from dataclasses import dataclass
from typing import TextIO

from protoschema.diagnostics import LEXER_UNEXPECTED_CHARACTER, Diagnostic, LexicalError
from protoschema.lexer.tokens import EOF_TOKEN, Token, TokenKind, classify_identifier
from protoschema.text import decode_source, strip_comment_lines

DELIMITER_CHAR = "="
DELIMITER_LOOKAHEAD = 2


@dataclass(frozen=True, slots=True)
class LexerCheckpoint:
    """Lexer checkpoint."""

    position: int
    line: int


class Lexer:
    """Single-pass lexer over normalized schema text.

    Whitespace is skipped rather than emitted. The only backtracking is the one
    character pushed back after a short `=` delimiter.
    """

    def __init__(self, source: str | bytes, *, normalize: bool = True) -> None:
        self._source = strip_comment_lines(source) if normalize else decode_source(source)
        self._position = 0
        self._line = 1

    @property
    def source(self) -> str:
        """Normalized source text."""
        return self._source

    @property
    def line(self) -> int:
        """1-based line of the cursor."""
        return self._line

    @property
    def position(self) -> int:
        return self._position

    @property
    def is_eof(self) -> bool:
        return self._position >= len(self._source)

    @property
    def checkpoint(self) -> LexerCheckpoint:
        return LexerCheckpoint(position=self._position, line=self._line)

    def rewind(self, checkpoint: LexerCheckpoint) -> None:
        self._position = checkpoint.position
        self._line = checkpoint.line

    def next_token(self) -> Token:
        self._skip_whitespace()
        if self.is_eof:
            return EOF_TOKEN

        ch = self._current_char()
        if ch == DELIMITER_CHAR:
            return self._lex_delimiter()

        if ch.isalpha():
            return self._lex_identifier()

        raise LexicalError(Diagnostic.from_spec(LEXER_UNEXPECTED_CHARACTER, self._line, detail=repr(ch)))

    def at_end(self) -> bool:
        """Skip whitespace and report whether the input is exhausted."""
        self._skip_whitespace()
        return self.is_eof

    def lex(self) -> list[Token]:
        tokens: list[Token] = []
        while True:
            token = self.next_token()
            tokens.append(token)
            if token.kind == TokenKind.EOF:
                break
        return tokens

    def _lex_delimiter(self) -> Token:
        # `===` closes a struct. `=` or `==` followed by anything else opens one,
        # and the character after them stays in the stream.
        line = self._line
        self._advance(1)
        for _ in range(DELIMITER_LOOKAHEAD):
            if self.is_eof:
                return Token(TokenKind.EOF, line=line, after_delimiter=True)
            if self._current_char() != DELIMITER_CHAR:
                return Token(TokenKind.STRUCT_BEGIN, line=line)
            self._advance(1)
        return Token(TokenKind.STRUCT_END, line=line)

    def _lex_identifier(self) -> Token:
        start = self._position
        self._advance(1)
        while not self.is_eof:
            ch = self._current_char()
            if ch.isalnum() or ch == "_":
                self._advance(1)
                continue
            break
        text = self._source[start : self._position]
        return Token(classify_identifier(text), text, self._line)

    def _skip_whitespace(self) -> None:
        while not self.is_eof:
            ch = self._current_char()
            if not ch.isspace():
                break
            if ch == "\n":
                self._line += 1
            self._advance(1)

    def _current_char(self) -> str:
        if self.is_eof:
            return "\0"
        return self._source[self._position]

    def _advance(self, steps: int) -> None:
        self._position += steps


def dump_tokens(tokens: list[Token], out: TextIO | None = None) -> None:
    """Print token list with kind, line, and text for debugging."""
    stream = out if out is not None else sys.stdout
    for i, tok in enumerate(tokens):
        print(f"{i:03d} {tok.kind.name:<12} line={tok.line} text={tok.text!r}", file=stream)
