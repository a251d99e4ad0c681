"""Data models for regex-based block alignment."""

from .block import Block, Line, Part
from .document import LineRange, Position, Selection, TextDocument, split_lines
from .enums import EndOfLine, PartKind

__all__ = [
    "Block",
    "Line",
    "Part",
    "LineRange",
    "Position",
    "Selection",
    "TextDocument",
    "split_lines",
    "EndOfLine",
    "PartKind",
]
