"""Source normalization applied before lexing."""

import re
from typing import Final

COMMENT_LINE_PATTERN: Final[re.Pattern[str]] = re.compile(r"^[^\S\n]*#[^\n]*$", re.MULTILINE)
"""A whole line whose first non-indentation character is `#`."""


def decode_source(source: str | bytes) -> str:
    """Decode raw schema bytes.

    Undecodable bytes are carried through as lone surrogates, so they are never
    silently replaced.
    """
    if isinstance(source, bytes):
        return source.decode("utf-8", errors="surrogateescape")
    return source


def strip_comment_lines(source: str | bytes) -> str:
    """Blank out comment lines, keeping their newlines so line numbers still match.

    Only whole comment lines are removed: `id integer # note` is left untouched.
    """
    return COMMENT_LINE_PATTERN.sub("", decode_source(source))
