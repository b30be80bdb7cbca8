"""High-level parse entrypoints for schema source text."""

from __future__ import annotations

from pathlib import Path

from protoschema.lexer import Lexer
from protoschema.model import SchemaModel
from protoschema.parser.options import ParseMode, ParserOptions
from protoschema.parser.parser import Parser


def _resolve_options(
    options: ParserOptions | None,
    mode: ParseMode | None,
) -> ParserOptions:
    if mode is not None and options is not None:
        raise ValueError("Pass either options or mode, not both")

    if options is not None:
        return options

    if mode is not None:
        return ParserOptions.for_mode(mode)

    return ParserOptions()


def parse_schema(
    text: str | bytes,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
) -> SchemaModel:
    """Parse schema text into a model.

    Raises `LexicalError` or `SchemaSyntaxError` on the first problem; no partial
    model is returned.
    """
    resolved_options = _resolve_options(options=options, mode=mode)
    parser = Parser(Lexer(text), options=resolved_options)
    return parser.parse()


def parse_schema_file(
    path: str | Path,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
) -> SchemaModel:
    return parse_schema(Path(path).read_bytes(), options, mode=mode)
