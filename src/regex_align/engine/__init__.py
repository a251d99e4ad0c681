"""Block engine: tokenizer plus trim and align passes."""

from .aligner import BlockAligner, ColumnStats, rendered_width
from .tokenizer import PatternTokenizer, compile_pattern, tokenize

__all__ = [
    "BlockAligner",
    "ColumnStats",
    "rendered_width",
    "PatternTokenizer",
    "compile_pattern",
    "tokenize",
]
