"""Performance monitoring utilities for alignment operations.

Tokenize, trim and align are bounded scans over the selection, so these
helpers only record timings and warn when a block takes unusually long.
"""

import functools
import logging
import time
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional, TypeVar


logger = logging.getLogger(__name__)

T = TypeVar('T')


@dataclass
class PerformanceMetrics:
    """Timing of a single alignment operation."""

    operation_name: str
    start_time: float = field(default_factory=time.perf_counter)
    end_time: Optional[float] = None
    duration: Optional[float] = None
    success: bool = True
    error: Optional[str] = None
    metadata: Dict[str, Any] = field(default_factory=dict)

    def finish(self, success: bool = True, error: Optional[str] = None) -> None:
        """Mark the operation as finished."""
        self.end_time = time.perf_counter()
        self.duration = self.end_time - self.start_time
        self.success = success
        self.error = error


class PerformanceMonitor:
    """
    Monitor and track timings of alignment operations.

    Args:
        slow_threshold: Duration in seconds above which an operation is
            logged as slow.
    """

    def __init__(self, slow_threshold: float = 1.0):
        self.slow_threshold = slow_threshold
        self.metrics: Dict[str, list[PerformanceMetrics]] = {}

    def start_operation(self, operation_name: str, **metadata) -> PerformanceMetrics:
        """Start tracking an operation."""
        return PerformanceMetrics(operation_name=operation_name, metadata=metadata)

    def end_operation(
        self,
        metric: PerformanceMetrics,
        success: bool = True,
        error: Optional[str] = None
    ) -> None:
        """Finish a metric and store it in the history."""
        metric.finish(success=success, error=error)
        self.metrics.setdefault(metric.operation_name, []).append(metric)

        if metric.duration is not None and metric.duration > self.slow_threshold:
            logger.warning(
                f"Operation '{metric.operation_name}' was slow: "
                f"{metric.duration:.3f}s > {self.slow_threshold}s"
            )

    def get_operation_stats(self, operation_name: str) -> Dict[str, Any]:
        """
        Get statistics for a specific operation.

        Returns:
            Dictionary with count, average, min, max, total and
            success_rate, or an empty dictionary if never recorded.
        """
        if operation_name not in self.metrics:
            return {}

        durations = [
            m.duration for m in self.metrics[operation_name]
            if m.duration is not None
        ]

        if not durations:
            return {}

        return {
            "count": len(durations),
            "average": sum(durations) / len(durations),
            "min": min(durations),
            "max": max(durations),
            "total": sum(durations),
            "success_rate": sum(
                1 for m in self.metrics[operation_name] if m.success
            ) / len(self.metrics[operation_name])
        }

    def get_all_stats(self) -> Dict[str, Dict[str, Any]]:
        """Get statistics for all tracked operations."""
        return {
            name: self.get_operation_stats(name)
            for name in self.metrics.keys()
        }


def timed_operation(operation_name: str):
    """
    Decorator logging how long an operation took.

    Example:
        @timed_operation("tokenize")
        def tokenize(lines, pattern):
            ...
    """
    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        @functools.wraps(func)
        def wrapper(*args, **kwargs) -> T:
            start_time = time.perf_counter()
            try:
                result = func(*args, **kwargs)
                duration = time.perf_counter() - start_time
                logger.debug(f"{operation_name} completed in {duration:.4f}s")
                return result
            except Exception as e:
                duration = time.perf_counter() - start_time
                logger.error(f"{operation_name} failed after {duration:.4f}s: {e}")
                raise
        return wrapper
    return decorator
