"""Trim and align passes over tokenized lines.

The trim pass normalizes whitespace around boundaries so that repeated
alignment is stable. The align pass then pads content, column by column
from left to right, so every shared column starts at the same offset.
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Sequence

from ..models.block import Line, Part
from ..models.enums import PartKind


logger = logging.getLogger(__name__)

DEFAULT_GUTTER = 1
DEFAULT_TAB_SIZE = 4


def rendered_width(text: str, tab_size: int = DEFAULT_TAB_SIZE) -> int:
    """
    Width of text from the start of a line, in code points.

    Tabs advance to the next multiple of ``tab_size``.
    """
    if "\t" not in text:
        return len(text)
    return len(text.expandtabs(tab_size))


@dataclass
class ColumnStats:
    """Per-column outcome of the align pass."""
    column: int
    width: int
    line_count: int
    padded_lines: int = 0


class BlockAligner:
    """
    Aligner for tokenized blocks.

    Args:
        gutter: Spaces kept between the widest content and the boundary
            of a column shared by two or more lines.
        tab_size: Tab stop used when measuring rendered width.
    """

    def __init__(self, gutter: int = DEFAULT_GUTTER, tab_size: int = DEFAULT_TAB_SIZE):
        if gutter < 0:
            raise ValueError("gutter must be non-negative")
        if tab_size < 1:
            raise ValueError("tab_size must be at least 1")
        self.gutter = gutter
        self.tab_size = tab_size
        self.last_stats: List[ColumnStats] = []

    # =========================================================================
    # Trim pass
    # =========================================================================

    def trim(self, lines: Sequence[Line]) -> Sequence[Line]:
        """
        Strip whitespace adjacent to boundaries, in place.

        Content before a boundary loses trailing whitespace and content
        after a boundary loses leading whitespace. A first part made only
        of whitespace is the line's indentation and is kept as is.
        """
        for line in lines:
            self._trim_line(line)
        return lines

    def _trim_line(self, line: Line) -> None:
        parts = line.parts
        last = len(parts) - 1
        for index, part in enumerate(parts):
            if not part.is_content:
                continue
            value = part.value
            before_boundary = index < last and parts[index + 1].is_boundary
            after_boundary = index > 0 and parts[index - 1].is_boundary
            if before_boundary and not (index == 0 and not value.strip()):
                value = value.rstrip()
            if after_boundary:
                value = value.lstrip()
            part.value = value

    # =========================================================================
    # Align pass
    # =========================================================================

    def align(self, lines: Sequence[Line]) -> Sequence[Line]:
        """
        Pad content so that each shared column starts at one offset.

        Columns are processed in increasing order; offsets for a column
        are measured after earlier columns have been padded.
        """
        self.last_stats = []
        column = 1
        while True:
            holders = self._holders(lines, column)
            if not holders:
                break
            self.last_stats.append(self._align_column(column, holders))
            column += 1

        logger.debug(f"Aligned {len(lines)} lines across {column - 1} columns")
        return lines

    def _holders(self, lines: Sequence[Line], column: int) -> Dict[int, Line]:
        """Lines that have a boundary at ``column``, keyed by list position."""
        holders = {}
        for position, line in enumerate(lines):
            if line.boundary_index(column) is not None:
                holders[position] = line
        return holders

    def _align_column(self, column: int, holders: Dict[int, Line]) -> ColumnStats:
        offsets = {
            position: self.column_offset(line, column)
            for position, line in holders.items()
        }
        if len(holders) < 2:
            width = max(offsets.values())
            return ColumnStats(column=column, width=width, line_count=len(holders))

        # The gutter follows real content only, so indentation stays put.
        width = max(
            offsets[position] + (self.gutter if self._has_content_before(line, column) else 0)
            for position, line in holders.items()
        )
        stats = ColumnStats(column=column, width=width, line_count=len(holders))
        for position, line in holders.items():
            padding = width - offsets[position]
            if padding > 0:
                self._pad_before(line, column, padding)
                stats.padded_lines += 1
        return stats

    def _has_content_before(self, line: Line, column: int) -> bool:
        return bool(line.prefix(line.boundary_index(column)).strip())

    def column_offset(self, line: Line, column: int) -> int:
        """Rendered start offset of the boundary at ``column``."""
        index = line.boundary_index(column)
        if index is None:
            raise ValueError(f"Line {line.number} has no column {column}")
        return rendered_width(line.prefix(index), self.tab_size)

    def _pad_before(self, line: Line, column: int, padding: int) -> None:
        index = line.boundary_index(column)
        previous = line.parts[index - 1] if index > 0 else None
        if previous is not None and previous.is_content:
            previous.value += " " * padding
        else:
            line.parts.insert(
                index,
                Part(value=" " * padding, kind=PartKind.CONTENT, column_index=column - 1),
            )
