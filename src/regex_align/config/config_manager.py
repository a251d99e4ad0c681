"""Configuration Manager implementation for regex-based alignment.

This module provides functionality to load, validate, and manage the
alignment settings: named pattern templates, prompt behaviour, and the
padding parameters used by the block aligner.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

from ..engine.aligner import BlockAligner
from ..engine.tokenizer import compile_pattern
from ..exceptions import PatternError
from ..templates import TemplateCollection
from .models import (
    AlignConfiguration,
    ConfigurationError,
    SettingKey,
    ValidationResult,
)


logger = logging.getLogger(__name__)

SETTINGS_FILENAME = "settings.json"

_KNOWN_KEYS = {key.value for key in SettingKey}


class ConfigurationManager:
    """
    Manager for alignment configuration.

    Handles loading, validation, and access to templates and settings.
    """

    def __init__(self, config_dir: Optional[Union[str, Path]] = None):
        """
        Initialize the configuration manager.

        Args:
            config_dir: Optional directory path for configuration files.
        """
        self._config_dir = Path(config_dir) if config_dir else None
        self._configuration = AlignConfiguration()
        self._is_loaded = False

    @property
    def configuration(self) -> AlignConfiguration:
        """Get the current alignment configuration."""
        return self._configuration

    @property
    def is_loaded(self) -> bool:
        """Check if configuration has been loaded."""
        return self._is_loaded

    @property
    def templates(self) -> TemplateCollection:
        """Read-only view of the configured templates."""
        return self._configuration.template_collection()

    # =========================================================================
    # Loading
    # =========================================================================

    def load(
        self,
        source: Union[str, Path, Dict[str, Any]]
    ) -> ValidationResult:
        """
        Load and validate alignment settings.

        Supports loading from:
        - JSON file path
        - Dictionary with flat dotted keys (``align.by.regex.gutter``)
        - Nested dictionary (``{"align": {"by": {"regex": {...}}}}``)

        Args:
            source: File path or dictionary.

        Returns:
            ValidationResult indicating success, with warnings for
            unrecognised keys.

        Raises:
            ConfigurationError: If validation fails; the current
                configuration is left unchanged.
        """
        raw_data = self._parse_source(source)
        if not isinstance(raw_data, dict):
            raise ConfigurationError("Settings must be a JSON object")

        settings = self._flatten(raw_data)
        result = ValidationResult(is_valid=True)
        configuration = AlignConfiguration(
            templates=dict(self._configuration.templates),
            ignore_focus_out=self._configuration.ignore_focus_out,
            gutter=self._configuration.gutter,
            tab_size=self._configuration.tab_size,
        )

        for key, value in settings.items():
            if key not in _KNOWN_KEYS:
                result.add_warning(f"Unknown setting '{key}' ignored")
                continue
            result = result.merge(self._apply_setting(configuration, SettingKey(key), value))

        if not result.is_valid:
            raise ConfigurationError(
                "Alignment settings validation failed",
                validation_result=result
            )

        for warning in result.warnings:
            logger.warning(warning)

        self._configuration = configuration
        self._is_loaded = True
        logger.info(
            f"Loaded alignment settings with {len(configuration.templates)} templates"
        )
        return result

    def _apply_setting(
        self,
        configuration: AlignConfiguration,
        key: SettingKey,
        value: Any,
    ) -> ValidationResult:
        """Validate one setting and store it on ``configuration``."""
        result = ValidationResult(is_valid=True)

        if key is SettingKey.TEMPLATES:
            templates_result = self.validate_templates(value)
            if templates_result.is_valid:
                configuration.templates = dict(value)
            return result.merge(templates_result)

        if key is SettingKey.IGNORE_FOCUS_OUT:
            if not isinstance(value, bool):
                result.add_error(f"'{key.value}' must be a boolean")
            else:
                configuration.ignore_focus_out = value
            return result

        minimum = 0 if key is SettingKey.GUTTER else 1
        if isinstance(value, bool) or not isinstance(value, int) or value < minimum:
            result.add_error(f"'{key.value}' must be an integer >= {minimum}")
        elif key is SettingKey.GUTTER:
            configuration.gutter = value
        else:
            configuration.tab_size = value
        return result

    def validate_templates(self, templates: Any) -> ValidationResult:
        """
        Validate a template mapping.

        Names must be non-empty strings and every pattern must compile.
        """
        result = ValidationResult(is_valid=True)
        if not isinstance(templates, dict):
            result.add_error(f"'{SettingKey.TEMPLATES.value}' must be an object")
            return result

        for name, source in templates.items():
            prefix = f"Template [{name!r}]"
            if not isinstance(name, str) or not name:
                result.add_error(f"{prefix}: name must be a non-empty string")
                continue
            if not isinstance(source, str):
                result.add_error(f"{prefix}: pattern must be a string")
                continue
            if not source:
                result.add_warning(f"{prefix}: empty pattern never aligns anything")
                continue
            try:
                compile_pattern(source)
            except PatternError as e:
                result.add_error(f"{prefix}: {e}")
        return result

    def _flatten(self, data: Dict[str, Any], prefix: str = "") -> Dict[str, Any]:
        """Flatten nested objects into dotted keys, stopping at known keys."""
        flat: Dict[str, Any] = {}
        for key, value in data.items():
            dotted = f"{prefix}{key}"
            if dotted in _KNOWN_KEYS or not isinstance(value, dict):
                flat[dotted] = value
            else:
                flat.update(self._flatten(value, f"{dotted}."))
        return flat

    # =========================================================================
    # Template access
    # =========================================================================

    def get_template(self, name: str) -> Optional[str]:
        """Get a template's pattern source by name."""
        return self._configuration.templates.get(name)

    def has_template(self, name: str) -> bool:
        """Check whether a template exists."""
        return name in self._configuration.templates

    def set_template(self, name: str, source: str) -> None:
        """
        Add or replace a template.

        Raises:
            ConfigurationError: If the name or pattern is invalid.
        """
        result = self.validate_templates({name: source})
        if not result.is_valid:
            raise ConfigurationError(
                f"Invalid template '{name}'",
                validation_result=result
            )
        self._configuration.templates[name] = source

    def remove_template(self, name: str) -> bool:
        """Remove a template; returns False if it did not exist."""
        return self._configuration.templates.pop(name, None) is not None

    def create_aligner(self) -> BlockAligner:
        """Build a block aligner from the configured padding settings."""
        return BlockAligner(
            gutter=self._configuration.gutter,
            tab_size=self._configuration.tab_size,
        )

    # =========================================================================
    # Files
    # =========================================================================

    def _parse_source(
        self,
        source: Union[str, Path, Dict[str, Any]]
    ) -> Any:
        """Parse configuration source to raw data."""
        if isinstance(source, dict):
            return source

        path = Path(source)
        if not path.exists():
            raise ConfigurationError(f"Configuration file not found: {path}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                return json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Invalid JSON in {path}: {e}")

    def load_from_directory(self, config_dir: Union[str, Path]) -> ValidationResult:
        """
        Load settings from a directory.

        Expects a file named ``settings.json``; a missing file leaves the
        defaults in place.
        """
        config_dir = Path(config_dir)
        result = ValidationResult(is_valid=True)

        settings_file = config_dir / SETTINGS_FILENAME
        if settings_file.exists():
            result = result.merge(self.load(settings_file))
        else:
            result.add_warning(f"No {SETTINGS_FILENAME} found in {config_dir}")

        self._config_dir = config_dir
        return result

    def save_to_directory(
        self,
        config_dir: Optional[Union[str, Path]] = None
    ) -> Path:
        """
        Save current configuration to a directory.

        Args:
            config_dir: Directory to save to. Uses current config_dir if None.

        Returns:
            Path of the written settings file.
        """
        config_dir = Path(config_dir) if config_dir else self._config_dir
        if not config_dir:
            raise ConfigurationError("No configuration directory specified")

        config_dir.mkdir(parents=True, exist_ok=True)
        path = config_dir / SETTINGS_FILENAME
        with open(path, "w", encoding="utf-8") as f:
            json.dump(self.to_dict(), f, indent=2, ensure_ascii=False)
        return path

    def reset(self) -> None:
        """Reset configuration to defaults."""
        self._configuration = AlignConfiguration()
        self._is_loaded = False

    def to_dict(self) -> Dict[str, Any]:
        """Export current configuration as flat setting keys."""
        return self._configuration.to_settings()
