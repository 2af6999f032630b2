"""Text offsets and ranges."""

from jackpy.text.text import LineIndex, TextRange, TextSize

__all__ = [
    "LineIndex",
    "TextRange",
    "TextSize",
]
