"""Schema data model handed to code generation."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, overload

from protoschema.lexer.tokens import PRIMITIVE_TYPES


@dataclass(frozen=True, slots=True)
class FieldDeclaration:
    """One field: `name type`, or `name array type` when `is_array` is set."""

    name: str
    type_name: str
    is_array: bool = False

    def __post_init__(self):
        if not self.name:
            raise ValueError("FieldDeclaration name cannot be empty")
        if not self.type_name:
            raise ValueError("FieldDeclaration type_name cannot be empty")

    @property
    def is_primitive(self) -> bool:
        """True when the type is a built-in keyword rather than a struct reference."""
        return self.type_name in PRIMITIVE_TYPES

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "type": self.type_name, "array": self.is_array}


@dataclass(frozen=True, slots=True)
class StructDeclaration:
    """Named record definition; field order is serialization order."""

    name: str
    fields: tuple[FieldDeclaration, ...] = ()

    def __post_init__(self):
        if not self.name:
            raise ValueError("StructDeclaration name cannot be empty")

    @property
    def is_empty(self) -> bool:
        return len(self.fields) == 0

    def field_names(self) -> tuple[str, ...]:
        return tuple(field.name for field in self.fields)

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "fields": [field.to_dict() for field in self.fields]}


@dataclass(frozen=True, slots=True)
class SchemaModel:
    """Ordered struct declarations in source order.

    Duplicate struct names are kept as written.
    """

    structs: tuple[StructDeclaration, ...] = ()

    def __iter__(self) -> Iterator[StructDeclaration]:
        return iter(self.structs)

    def __len__(self) -> int:
        return len(self.structs)

    @overload
    def __getitem__(self, index: int) -> StructDeclaration: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[StructDeclaration, ...]: ...

    def __getitem__(self, index: int | slice) -> StructDeclaration | tuple[StructDeclaration, ...]:
        return self.structs[index]

    def struct_names(self) -> tuple[str, ...]:
        return tuple(struct.name for struct in self.structs)

    def get(self, name: str) -> StructDeclaration | None:
        """First struct declared with `name`."""
        for struct in self.structs:
            if struct.name == name:
                return struct
        return None

    def type_names(self) -> tuple[str, ...]:
        """Every field type name, deduplicated in first-use order."""
        seen: dict[str, None] = {}
        for struct in self.structs:
            for field in struct.fields:
                seen.setdefault(field.type_name, None)
        return tuple(seen)

    def unresolved_references(self) -> tuple[str, ...]:
        """Referenced type names that are neither primitives nor declared structs."""
        declared = set(self.struct_names())
        return tuple(name for name in self.type_names() if name not in PRIMITIVE_TYPES and name not in declared)

    def to_dict(self) -> dict[str, Any]:
        return {"structs": [struct.to_dict() for struct in self.structs]}
