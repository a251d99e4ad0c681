"""
Regex Align

Aligns a block of text into visual columns at the matches of a regular
expression or a named template.
"""

__version__ = "0.1.0"

# Export main components
from .models.block import Block, Line, Part
from .models.document import LineRange, Position, Selection, TextDocument
from .models.enums import EndOfLine, PartKind
from .engine import BlockAligner, PatternTokenizer, compile_pattern, tokenize
from .exceptions import AlignError, PatternError
from .templates import TemplateCollection, resolve
from .pipeline import AlignmentPipeline, PipelineResult, align_block, align_text
from .serialization import BlockSerializer
from .editor import AlignByRegexCommand, InMemoryEditor, InputSession
from .interfaces.editor import ITextEditor
from .config import (
    AlignConfiguration,
    ConfigurationError,
    ConfigurationManager,
    SettingKey,
    ValidationResult,
)

__all__ = [
    "Block",
    "Line",
    "Part",
    "LineRange",
    "Position",
    "Selection",
    "TextDocument",
    "EndOfLine",
    "PartKind",
    "BlockAligner",
    "PatternTokenizer",
    "compile_pattern",
    "tokenize",
    "AlignError",
    "PatternError",
    "TemplateCollection",
    "resolve",
    "AlignmentPipeline",
    "PipelineResult",
    "align_block",
    "align_text",
    "BlockSerializer",
    "AlignByRegexCommand",
    "InMemoryEditor",
    "InputSession",
    "ITextEditor",
    "AlignConfiguration",
    "ConfigurationError",
    "ConfigurationManager",
    "SettingKey",
    "ValidationResult",
]
