"""In-memory text document and selection models."""

import re
from dataclasses import dataclass, field
from typing import List, Optional

from .enums import EndOfLine


@dataclass(frozen=True, order=True)
class Position:
    """Zero-based line and character offset in a document."""
    line: int
    character: int = 0


@dataclass(frozen=True)
class Selection:
    """
    A selection between an anchor and an active position.

    The anchor may come after the active position when the user selects
    upwards; ``start`` and ``end`` are always ordered.
    """
    anchor: Position
    active: Position

    @property
    def start(self) -> Position:
        return min(self.anchor, self.active)

    @property
    def end(self) -> Position:
        return max(self.anchor, self.active)

    @property
    def is_empty(self) -> bool:
        return self.anchor == self.active

    @classmethod
    def of(cls, start_line: int, start_character: int, end_line: int, end_character: int) -> "Selection":
        return cls(Position(start_line, start_character), Position(end_line, end_character))


@dataclass(frozen=True)
class LineRange:
    """Inclusive range of whole lines."""
    start: int
    end: int

    def __len__(self) -> int:
        return self.end - self.start + 1

    def __iter__(self):
        return iter(range(self.start, self.end + 1))


@dataclass
class TextDocument:
    """
    A document held as a list of lines plus its line ending.

    Line content never includes the terminator, so replacing a line keeps
    the document's end-of-line convention untouched.
    """
    lines: List[str] = field(default_factory=lambda: [""])
    eol: EndOfLine = EndOfLine.LF
    uri: Optional[str] = None

    @classmethod
    def from_text(cls, text: str, eol: Optional[EndOfLine] = None, uri: Optional[str] = None) -> "TextDocument":
        """Build a document, detecting the line ending if not given."""
        eol = eol or EndOfLine.detect(text)
        return cls(lines=split_lines(text, eol.sequence), eol=eol, uri=uri)

    @property
    def line_count(self) -> int:
        return len(self.lines)

    def line_at(self, number: int) -> str:
        """Content of a line, without terminator."""
        if not 0 <= number < len(self.lines):
            raise IndexError(f"Line {number} out of range (0..{len(self.lines) - 1})")
        return self.lines[number]

    def get_lines(self, line_range: LineRange) -> List[str]:
        return [self.line_at(number) for number in line_range]

    def replace_line(self, number: int, content: str) -> None:
        self.line_at(number)
        self.lines[number] = content

    def text(self) -> str:
        return self.eol.sequence.join(self.lines)


def split_lines(text: str, eol: Optional[str] = None) -> List[str]:
    """
    Split raw text into lines.

    With an explicit terminator only that sequence splits; otherwise any
    of ``\\r\\n``, ``\\r`` or ``\\n`` does. A trailing terminator yields a
    final empty line.
    """
    if eol:
        return text.split(eol)
    return re.split(r"\r\n|\r|\n", text)
