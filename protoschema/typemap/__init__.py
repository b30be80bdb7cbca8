"""Type-name lookup table for the rendering stage."""

from protoschema.typemap.typemap import (
    FuncInfo,
    LangType,
    TypeMap,
    TypeMapError,
    load_type_map,
    template_functions,
    type_map_from_json,
)

__all__ = [
    "FuncInfo",
    "LangType",
    "TypeMap",
    "TypeMapError",
    "load_type_map",
    "template_functions",
    "type_map_from_json",
]
