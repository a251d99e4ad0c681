"""Selection handling for the align command."""

from typing import Optional

from ..models.document import LineRange, Selection, TextDocument


def line_range_for_selection(
    selection: Selection,
    document: TextDocument,
) -> Optional[LineRange]:
    """
    Expand a selection to the whole lines it covers.

    A selection ending at column 0 of a line does not include that line,
    since no character of it is selected.

    Returns:
        The inclusive line range, or None for an empty selection.
    """
    if selection.is_empty:
        return None

    start, end = selection.start, selection.end
    end_line = end.line
    if end.character == 0 and end_line > start.line:
        end_line -= 1

    end_line = min(end_line, document.line_count - 1)
    return LineRange(start=start.line, end=end_line)
