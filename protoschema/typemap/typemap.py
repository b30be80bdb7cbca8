"""Per-type-name generation parameters consulted at render time.

The parser never touches this table. Renderers receive a `TypeMap` value
explicitly and build their lookup helpers from it.
"""

from __future__ import annotations

import json
from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Any, Final

LANGUAGES: Final[tuple[str, ...]] = ("go", "cs")
FUNC_KEYS: Final[tuple[str, ...]] = ("t", "r", "w")


class TypeMapError(ValueError):
    """Malformed type map document."""


@dataclass(frozen=True, slots=True)
class FuncInfo:
    """Target type (`t`), read expression (`r`) and write expression (`w`)."""

    t: str = ""
    r: str = ""
    w: str = ""


@dataclass(frozen=True, slots=True)
class LangType:
    go: FuncInfo = FuncInfo()
    cs: FuncInfo = FuncInfo()

    def for_language(self, language: str) -> FuncInfo:
        if language not in LANGUAGES:
            raise ValueError(f"Unknown target language: {language!r}")
        return getattr(self, language)


class TypeMap(Mapping[str, LangType]):
    """Immutable mapping of schema type name to per-language parameters."""

    __slots__ = ("_entries",)

    def __init__(self, entries: Mapping[str, LangType] | None = None) -> None:
        self._entries: Mapping[str, LangType] = MappingProxyType(dict(entries or {}))

    def __getitem__(self, key: str) -> LangType:
        return self._entries[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"TypeMap({sorted(self._entries)!r})"

    def lookup(self, type_name: str, language: str) -> FuncInfo:
        """Parameters for `type_name`, or empty strings when the name is unmapped."""
        entry = self._entries.get(type_name)
        if entry is None:
            return FuncInfo()
        return entry.for_language(language)

    def missing(self, type_names: tuple[str, ...] | list[str]) -> tuple[str, ...]:
        return tuple(name for name in type_names if name not in self._entries)


def template_functions(type_map: TypeMap) -> dict[str, Callable[[str], str]]:
    """Template lookup helpers: `go_type`, `go_read`, `go_write`, `cs_type`, `cs_read`, `cs_write`."""
    functions: dict[str, Callable[[str], str]] = {}
    attributes = {"t": "type", "r": "read", "w": "write"}
    for language in LANGUAGES:
        for key in FUNC_KEYS:
            name = f"{language}_{attributes[key]}"
            functions[name] = _make_lookup(type_map, language, key, name)
    return functions


def _make_lookup(type_map: TypeMap, language: str, key: str, name: str) -> Callable[[str], str]:
    def lookup(type_name: str) -> str:
        return getattr(type_map.lookup(type_name, language), key)

    lookup.__name__ = name
    return lookup


def type_map_from_json(data: Any) -> TypeMap:
    """Build a type map from decoded JSON.

    Accepts a list of objects (later objects override earlier names) or a single
    object mapping type names to `{"go": {...}, "cs": {...}}`.
    """
    documents = data if isinstance(data, list) else [data]
    entries: dict[str, LangType] = {}
    for index, document in enumerate(documents):
        if not isinstance(document, dict):
            raise TypeMapError(f"Type map entry #{index} must be an object, got {type(document).__name__}")
        for type_name, value in document.items():
            entries[type_name] = _parse_lang_type(type_name, value)
    return TypeMap(entries)


def load_type_map(path: str | Path) -> TypeMap:
    text = Path(path).read_text(encoding="utf-8")
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise TypeMapError(f"{path}: invalid JSON ({exc.msg} at line {exc.lineno})") from exc
    return type_map_from_json(data)


def _parse_lang_type(type_name: str, value: Any) -> LangType:
    if not isinstance(value, dict):
        raise TypeMapError(f"Type map value for {type_name!r} must be an object")
    infos: dict[str, FuncInfo] = {}
    for language in LANGUAGES:
        raw = value.get(language, {})
        if not isinstance(raw, dict):
            raise TypeMapError(f"Type map {type_name!r}.{language} must be an object")
        parts: dict[str, str] = {}
        for key in FUNC_KEYS:
            item = raw.get(key, "")
            if not isinstance(item, str):
                raise TypeMapError(f"Type map {type_name!r}.{language}.{key} must be a string")
            parts[key] = item
        infos[language] = FuncInfo(**parts)
    return LangType(**infos)
