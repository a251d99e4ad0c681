"""Block data models for regex-based alignment."""

import re
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Iterator, List, Optional

from .enums import EndOfLine, PartKind

if TYPE_CHECKING:
    from ..engine.aligner import BlockAligner


@dataclass
class Part:
    """
    A contiguous span of text within a line.

    Content parts hold literal text around matches; boundary parts hold
    the text realized from a capture group (or the whole match).
    """
    value: str
    kind: PartKind = PartKind.CONTENT
    column_index: int = 0

    @property
    def is_boundary(self) -> bool:
        return self.kind is PartKind.BOUNDARY

    @property
    def is_content(self) -> bool:
        return self.kind is PartKind.CONTENT


@dataclass
class Line:
    """
    One physical line of the block, split into ordered parts.

    ``number`` is the absolute line index in the owning document.
    """
    number: int
    parts: List[Part] = field(default_factory=list)

    def __post_init__(self):
        if not self.parts:
            self.parts = [Part(value="")]

    @property
    def text(self) -> str:
        """Render the line by joining its parts in order."""
        return "".join(part.value for part in self.parts)

    @property
    def column_count(self) -> int:
        """Number of boundary columns present on this line."""
        return sum(1 for part in self.parts if part.is_boundary)

    def boundary_index(self, column: int) -> Optional[int]:
        """Position in ``parts`` of the boundary at ``column``, or None."""
        for index, part in enumerate(self.parts):
            if part.is_boundary and part.column_index == column:
                return index
        return None

    def prefix(self, index: int) -> str:
        """Text of all parts before position ``index``."""
        return "".join(part.value for part in self.parts[:index])


@dataclass
class Block:
    """
    The in-memory representation of the selected region.

    Lines are created by the tokenizer and mutated in place by the trim
    and align passes only.
    """
    lines: List[Line] = field(default_factory=list)
    pattern: Optional[re.Pattern] = None
    eol: EndOfLine = EndOfLine.LF

    def __iter__(self) -> Iterator[Line]:
        return iter(self.lines)

    def __len__(self) -> int:
        return len(self.lines)

    @property
    def column_count(self) -> int:
        """Highest column index present on any line."""
        return max((line.column_count for line in self.lines), default=0)

    def rendered_lines(self) -> List[str]:
        """Text of each line, in block order."""
        return [line.text for line in self.lines]

    def text(self) -> str:
        """Render the whole block joined with its line ending."""
        return self.eol.sequence.join(self.rendered_lines())

    def trim(self, aligner: Optional["BlockAligner"] = None) -> "Block":
        """Normalize whitespace around boundaries; returns self."""
        self._aligner(aligner).trim(self.lines)
        return self

    def align(self, aligner: Optional["BlockAligner"] = None) -> "Block":
        """Pad content so every shared column starts at the same offset."""
        self._aligner(aligner).align(self.lines)
        return self

    @staticmethod
    def _aligner(aligner: Optional["BlockAligner"]) -> "BlockAligner":
        if aligner is not None:
            return aligner
        from ..engine.aligner import BlockAligner
        return BlockAligner()
