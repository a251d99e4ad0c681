"""Configuration management for regex-based alignment."""

from .config_manager import ConfigurationManager
from .models import (
    AlignConfiguration,
    ConfigurationError,
    SettingKey,
    ValidationResult,
)

__all__ = [
    "ConfigurationManager",
    "AlignConfiguration",
    "ConfigurationError",
    "SettingKey",
    "ValidationResult",
]
