"""Custom exceptions for regex-based block alignment."""

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class AlignError(Exception):
    """
    Base exception for alignment errors.

    Provides the failing pattern source and extra context so that callers
    can surface a useful message to the user.

    Attributes:
        message: Human-readable error description.
        pattern: The pattern source that was being processed, if any.
        details: Additional error details.
    """
    message: str
    pattern: Optional[str] = None
    details: Optional[dict] = field(default_factory=dict)

    def __post_init__(self):
        if self.details is None:
            self.details = {}
        super().__init__(str(self))

    def __str__(self) -> str:
        parts = [self.message]
        if self.pattern is not None:
            parts.append(f"Pattern: {self.pattern}")
        if "position" in (self.details or {}):
            parts.append(f"Position: {self.details['position']}")
        return " | ".join(parts)

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging/serialization."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "pattern": self.pattern,
            "details": self.details,
        }


@dataclass
class PatternError(AlignError):
    """
    Exception raised when a pattern fails to compile as a regular expression.

    No block is produced when this is raised; the caller must leave the
    document untouched.
    """

    @property
    def position(self) -> Optional[int]:
        """Offset in the pattern source where compilation failed."""
        return self.details.get("position")
