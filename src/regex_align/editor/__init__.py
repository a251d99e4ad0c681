"""Editor integration for the align-by-regex command."""

from .buffer import InMemoryEditor
from .command import COMMAND_ID, AlignByRegexCommand
from .selection import line_range_for_selection
from .session import CommandOptions, InputSession, read_args

__all__ = [
    "InMemoryEditor",
    "COMMAND_ID",
    "AlignByRegexCommand",
    "line_range_for_selection",
    "CommandOptions",
    "InputSession",
    "read_args",
]
