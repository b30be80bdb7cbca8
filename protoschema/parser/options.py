"""Parser modes and configuration options."""

from dataclasses import dataclass
from enum import StrEnum


class ParseMode(StrEnum):
    """Top-level parser behavior profile."""

    STANDARD = "standard"
    STRICT = "strict"


@dataclass(frozen=True, slots=True)
class ParserOptions:
    """Flags controlling which delimiters close a struct body."""

    mode: ParseMode = ParseMode.STANDARD
    allow_begin_marker_as_end: bool = True

    @staticmethod
    def for_mode(mode: ParseMode) -> "ParserOptions":
        if mode == ParseMode.STRICT:
            return ParserOptions(mode=mode, allow_begin_marker_as_end=False)

        return ParserOptions(mode=mode, allow_begin_marker_as_end=True)
