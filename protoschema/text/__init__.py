"""Source text helpers."""

from protoschema.text.normalize import COMMENT_LINE_PATTERN, decode_source, strip_comment_lines

__all__ = [
    "COMMENT_LINE_PATTERN",
    "decode_source",
    "strip_comment_lines",
]
