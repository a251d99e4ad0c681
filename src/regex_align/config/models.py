"""Data models for configuration management."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from ..engine.aligner import DEFAULT_GUTTER, DEFAULT_TAB_SIZE
from ..templates import TemplateCollection


class SettingKey(Enum):
    """Setting keys understood by the configuration manager."""
    TEMPLATES = "align.by.regex.templates"
    IGNORE_FOCUS_OUT = "align.by.regex.ignoreFocusOut"
    GUTTER = "align.by.regex.gutter"
    TAB_SIZE = "align.by.regex.tabSize"


@dataclass
class ValidationResult:
    """Result of configuration validation."""
    is_valid: bool
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    def add_error(self, message: str) -> None:
        """Add an error message."""
        self.errors.append(message)
        self.is_valid = False

    def add_warning(self, message: str) -> None:
        """Add a warning message."""
        self.warnings.append(message)

    def merge(self, other: "ValidationResult") -> "ValidationResult":
        """Merge another validation result into this one."""
        return ValidationResult(
            is_valid=self.is_valid and other.is_valid,
            errors=self.errors + other.errors,
            warnings=self.warnings + other.warnings
        )


class ConfigurationError(Exception):
    """Exception raised for configuration errors."""

    def __init__(self, message: str, validation_result: Optional[ValidationResult] = None):
        super().__init__(message)
        self.message = message
        self.validation_result = validation_result


@dataclass
class AlignConfiguration:
    """
    Complete alignment configuration.

    Holds the named templates and the settings read by the editor command
    and the block aligner.
    """
    templates: Dict[str, str] = field(default_factory=dict)
    ignore_focus_out: bool = False
    gutter: int = DEFAULT_GUTTER
    tab_size: int = DEFAULT_TAB_SIZE
    metadata: Dict[str, Any] = field(default_factory=dict)

    def template_collection(self) -> TemplateCollection:
        """Read-only view of the configured templates."""
        return TemplateCollection(self.templates)

    def to_settings(self) -> Dict[str, Any]:
        """Export as flat setting keys."""
        return {
            SettingKey.TEMPLATES.value: dict(self.templates),
            SettingKey.IGNORE_FOCUS_OUT.value: self.ignore_focus_out,
            SettingKey.GUTTER.value: self.gutter,
            SettingKey.TAB_SIZE.value: self.tab_size,
        }
