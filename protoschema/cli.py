from __future__ import annotations

import argparse
import json
from pathlib import Path
import sys
from typing import Any

from protoschema.diagnostics import SchemaError
from protoschema.lexer import Lexer, dump_tokens
from protoschema.model import SchemaModel
from protoschema.parser import ParseMode, parse_schema
from protoschema.typemap import TypeMap, TypeMapError, load_type_map, template_functions


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="protoschema",
        description="Parse a struct schema and print its model as JSON.",
    )
    parser.add_argument(
        "schema",
        nargs="?",
        type=Path,
        default=None,
        help="Schema file to read (defaults to stdin).",
    )
    parser.add_argument("--strict", action="store_true", help="Only accept `===` as a struct closing marker.")
    parser.add_argument("--tokens", action="store_true", help="Print the token stream instead of the model.")
    parser.add_argument(
        "--type-map",
        type=Path,
        default=None,
        help="JSON type map (func_map.json layout); adds per-field lookups to the output.",
    )
    parser.add_argument("--indent", type=int, default=2, help="JSON indentation (defaults to 2).")
    return parser


def model_to_json(model: SchemaModel, type_map: TypeMap | None = None) -> dict[str, Any]:
    payload = model.to_dict()
    if type_map is None:
        return payload

    functions = template_functions(type_map)
    for struct in payload["structs"]:
        for field in struct["fields"]:
            field["lookups"] = {name: lookup(field["type"]) for name, lookup in functions.items()}
    payload["unmapped_types"] = list(type_map.missing(model.type_names()))
    return payload


def main(argv: list[str] | None = None) -> int:
    args = build_arg_parser().parse_args(argv)

    try:
        source = args.schema.read_bytes() if args.schema is not None else sys.stdin.buffer.read()
        type_map = load_type_map(args.type_map) if args.type_map is not None else None
    except (OSError, TypeMapError) as exc:
        print(f"Failed to load input: {exc}", file=sys.stderr)
        return 1

    mode = ParseMode.STRICT if args.strict else ParseMode.STANDARD
    try:
        if args.tokens:
            dump_tokens(Lexer(source).lex())
            return 0
        model = parse_schema(source, mode=mode)
    except SchemaError as exc:
        print(exc.diagnostic.render(), file=sys.stderr)
        return 1

    for name in model.unresolved_references():
        print(f"warning: type {name!r} is not declared in this schema", file=sys.stderr)

    print(json.dumps(model_to_json(model, type_map), indent=args.indent))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
