"""Schema model."""

from protoschema.model.schema import FieldDeclaration, SchemaModel, StructDeclaration

__all__ = [
    "FieldDeclaration",
    "SchemaModel",
    "StructDeclaration",
]
