"""Parser (struct grammar + entrypoints)."""

from protoschema.parser.options import ParseMode, ParserOptions
from protoschema.parser.parser import Parser
from protoschema.parser.schema import parse_schema, parse_schema_file

__all__ = [
    "ParseMode",
    "Parser",
    "ParserOptions",
    "parse_schema",
    "parse_schema_file",
]
