"""End-to-end alignment pipeline.

This module wires the tokenizer, the trim and align passes, and template
resolution into the ``align_block`` operation, plus an orchestrating
``AlignmentPipeline`` that reads its settings from a
``ConfigurationManager`` and keeps execution statistics.
"""

import logging
import time
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

from .config.config_manager import ConfigurationManager
from .engine.aligner import BlockAligner
from .engine.tokenizer import PatternTokenizer, compile_pattern
from .exceptions import PatternError
from .models.block import Block, Line, Part
from .models.document import split_lines
from .models.enums import EndOfLine
from .performance import PerformanceMonitor, timed_operation
from .templates import resolve_source


logger = logging.getLogger(__name__)


@timed_operation("align_block")
def align_block(
    text: Sequence[str],
    pattern_source: str,
    start_line: int = 0,
    eol: Union[EndOfLine, str] = EndOfLine.LF,
    templates: Optional[Mapping[str, str]] = None,
    aligner: Optional[BlockAligner] = None,
) -> Block:
    """
    Tokenize, trim and align a block of lines.

    Args:
        text: The lines of the block, without terminators.
        pattern_source: Raw regular expression or template name.
        start_line: Absolute document number of the first line.
        eol: Line ending to render the block with.
        templates: Optional template name to pattern mapping.
        aligner: Aligner to use; a default one is created if None.

    Returns:
        The aligned Block.

    Raises:
        PatternError: If the pattern does not compile. Nothing is
            tokenized in that case.
    """
    eol = EndOfLine.coerce(eol)
    lines = list(text)

    source = resolve_source(pattern_source, templates)
    if not source:
        logger.debug("Empty pattern, block left unchanged")
        return Block(
            lines=[
                Line(number=start_line + offset, parts=[Part(value=value)])
                for offset, value in enumerate(lines)
            ],
            pattern=None,
            eol=eol,
        )

    pattern = compile_pattern(source)
    tokenizer = PatternTokenizer(pattern)
    block = Block(lines=tokenizer.tokenize(lines, start_line), pattern=pattern, eol=eol)
    aligner = aligner or BlockAligner()
    return block.trim(aligner).align(aligner)


def align_text(
    text: str,
    pattern_source: str,
    eol: Optional[Union[EndOfLine, str]] = None,
    templates: Optional[Mapping[str, str]] = None,
    aligner: Optional[BlockAligner] = None,
) -> str:
    """
    Align a raw multi-line string and render it back.

    The line ending is detected from the text when not given.
    """
    if eol is None:
        eol = EndOfLine.detect(text)
    eol = EndOfLine.coerce(eol)
    block = align_block(
        split_lines(text, eol.sequence),
        pattern_source,
        eol=eol,
        templates=templates,
        aligner=aligner,
    )
    return block.text()


@dataclass
class PipelineResult:
    """Result of one pipeline execution."""

    success: bool
    block: Optional[Block] = None
    errors: List[str] = field(default_factory=list)
    processing_time: float = 0.0
    metadata: Dict[str, Any] = field(default_factory=dict)

    @property
    def lines(self) -> List[str]:
        """Rendered lines, empty when the execution failed."""
        return self.block.rendered_lines() if self.block is not None else []


@dataclass
class PipelineStats:
    """Statistics about pipeline execution."""

    total_executions: int = 0
    successful_executions: int = 0
    failed_executions: int = 0
    average_processing_time: float = 0.0
    total_processing_time: float = 0.0


class AlignmentPipeline:
    """
    Alignment pipeline driven by configuration.

    Resolves template names from the configuration manager, builds the
    aligner from its padding settings, and records timings.
    """

    def __init__(
        self,
        config_manager: Optional[ConfigurationManager] = None,
        monitor: Optional[PerformanceMonitor] = None,
    ):
        """
        Initialize the alignment pipeline.

        Args:
            config_manager: Source of templates and settings (created
                with defaults if not provided).
            monitor: Optional performance monitor.
        """
        self.config_manager = config_manager or ConfigurationManager()
        self.performance_monitor = monitor or PerformanceMonitor()
        self.stats = PipelineStats()

    def process(
        self,
        lines: Sequence[str],
        pattern_source: str,
        start_line: int = 0,
        eol: Union[EndOfLine, str] = EndOfLine.LF,
        aligner: Optional[BlockAligner] = None,
    ) -> PipelineResult:
        """
        Align lines, capturing pattern errors in the result.

        Args:
            lines: The lines of the block.
            pattern_source: Raw regular expression or template name.
            start_line: Absolute document number of the first line.
            eol: Line ending to render the block with.
            aligner: Overrides the aligner built from the configuration.

        Returns:
            PipelineResult with the aligned block or the error messages.
        """
        start_time = time.perf_counter()
        metric = self.performance_monitor.start_operation(
            "align_block", line_count=len(lines)
        )
        result = PipelineResult(success=False)

        try:
            block = align_block(
                lines,
                pattern_source,
                start_line=start_line,
                eol=eol,
                templates=self.config_manager.templates,
                aligner=aligner or self.config_manager.create_aligner(),
            )
            result.success = True
            result.block = block
            result.metadata["columns"] = block.column_count
            self.performance_monitor.end_operation(metric)
        except PatternError as e:
            logger.warning(f"Alignment skipped: {e}")
            result.errors.append(str(e))
            result.metadata["error"] = e.to_dict()
            self.performance_monitor.end_operation(metric, success=False, error=str(e))

        result.processing_time = time.perf_counter() - start_time
        self._update_stats(result)
        return result

    def _update_stats(self, result: PipelineResult) -> None:
        """Update pipeline statistics."""
        self.stats.total_executions += 1
        if result.success:
            self.stats.successful_executions += 1
        else:
            self.stats.failed_executions += 1
        self.stats.total_processing_time += result.processing_time
        self.stats.average_processing_time = (
            self.stats.total_processing_time / self.stats.total_executions
        )

    def get_stats(self) -> Dict[str, Any]:
        """Get pipeline execution statistics."""
        return {
            "total_executions": self.stats.total_executions,
            "successful_executions": self.stats.successful_executions,
            "failed_executions": self.stats.failed_executions,
            "average_processing_time": self.stats.average_processing_time,
            "total_processing_time": self.stats.total_processing_time,
            "operations": self.performance_monitor.get_all_stats(),
        }
