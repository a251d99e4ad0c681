"""Pattern tokenizer for regex-based alignment.

This module splits each line of a block into ordered content and boundary
parts around the matches of a compiled pattern.
"""

import logging
import re
from typing import Iterable, List, Tuple, Union

from ..exceptions import PatternError
from ..models.block import Line, Part
from ..models.enums import PartKind


logger = logging.getLogger(__name__)


def compile_pattern(source: str, flags: int = 0) -> re.Pattern:
    """
    Compile a pattern source into a regular expression.

    Args:
        source: Raw regular expression text.
        flags: Optional ``re`` flags.

    Returns:
        The compiled pattern.

    Raises:
        PatternError: If the source is not a valid regular expression.
    """
    try:
        return re.compile(source, flags)
    except re.error as e:
        raise PatternError(
            message=f"Invalid regular expression: {e.msg}",
            pattern=source,
            details={"position": e.pos},
        ) from e


class PatternTokenizer:
    """
    Tokenizer producing alignment parts from pattern matches.

    Each capture group of the pattern (or the whole match when the
    pattern has none) becomes one boundary part, and so one column.
    """

    def __init__(self, pattern: Union[str, re.Pattern]):
        """
        Initialize the tokenizer.

        Args:
            pattern: Pattern source or an already compiled pattern.

        Raises:
            PatternError: If a pattern source fails to compile.
        """
        if isinstance(pattern, str):
            pattern = compile_pattern(pattern)
        self._pattern = pattern
        # Queried once per compiled pattern, not per line.
        self._group_count = pattern.groups

    @property
    def pattern(self) -> re.Pattern:
        return self._pattern

    @property
    def group_count(self) -> int:
        return self._group_count

    def tokenize(self, lines: Iterable[str], start_line: int = 0) -> List[Line]:
        """
        Tokenize every line of a block.

        Args:
            lines: Raw line strings, without line terminators.
            start_line: Absolute document number of the first line.

        Returns:
            One Line per input string, numbered from ``start_line``.
        """
        result = [
            self.tokenize_line(text, start_line + offset)
            for offset, text in enumerate(lines)
        ]
        logger.debug(
            f"Tokenized {len(result)} lines with pattern {self._pattern.pattern!r}"
        )
        return result

    def tokenize_line(self, text: str, number: int) -> Line:
        """Split a single line into content and boundary parts."""
        if not text:
            return Line(number=number, parts=[Part(value="")])

        parts: List[Part] = []
        cursor = 0
        column = 0

        for match in self._pattern.finditer(text):
            for start, end in self._boundary_spans(match, cursor):
                if start > cursor:
                    parts.append(Part(text[cursor:start], PartKind.CONTENT, column))
                column += 1
                parts.append(Part(text[start:end], PartKind.BOUNDARY, column))
                cursor = end

        if cursor < len(text) or not parts:
            parts.append(Part(text[cursor:], PartKind.CONTENT, column))

        return Line(number=number, parts=parts)

    def _boundary_spans(
        self,
        match: re.Match,
        cursor: int,
    ) -> List[Tuple[int, int]]:
        """
        Spans of the boundaries realized by one match, in group order.

        Groups that did not participate in the match, or that lie inside
        an earlier group, collapse to an empty span at the current cursor
        so the column count stays the same for every match.
        """
        if not self._group_count:
            return [(max(match.start(), cursor), max(match.end(), cursor))]

        spans: List[Tuple[int, int]] = []
        position = max(match.start(), cursor)
        for group in range(1, self._group_count + 1):
            start, end = match.span(group)
            if start < 0:
                start = end = position
            start = max(start, position)
            end = max(end, start)
            spans.append((start, end))
            position = end
        return spans


def tokenize(
    lines: Iterable[str],
    pattern: Union[str, re.Pattern],
    start_line: int = 0,
) -> List[Line]:
    """Convenience wrapper around ``PatternTokenizer.tokenize``."""
    return PatternTokenizer(pattern).tokenize(lines, start_line)
