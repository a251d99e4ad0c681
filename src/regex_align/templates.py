"""Named pattern templates and pattern resolution."""

import logging
import re
from types import MappingProxyType
from typing import Dict, Iterator, Mapping, Optional

from .engine.tokenizer import compile_pattern


logger = logging.getLogger(__name__)


class TemplateCollection(Mapping[str, str]):
    """
    Immutable mapping of template names to pattern sources.

    Names are case-sensitive. The collection copies what it is given, so
    later changes to the caller's mapping are not observed.
    """

    def __init__(self, templates: Optional[Mapping[str, str]] = None):
        self._templates: Mapping[str, str] = MappingProxyType(dict(templates or {}))

    def __getitem__(self, name: str) -> str:
        return self._templates[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._templates)

    def __len__(self) -> int:
        return len(self._templates)

    def __repr__(self) -> str:
        return f"TemplateCollection({dict(self._templates)!r})"

    def has(self, name: str) -> bool:
        """Check whether a template with this exact name exists."""
        return name in self._templates

    def get(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """Get the pattern source of a template, or ``default``."""
        return self._templates.get(name, default)

    def to_dict(self) -> Dict[str, str]:
        return dict(self._templates)


def resolve_source(
    name_or_pattern: str,
    templates: Optional[Mapping[str, str]] = None,
) -> str:
    """Pattern source for a template name, or the input itself."""
    if templates is not None and name_or_pattern in templates:
        source = templates[name_or_pattern]
        logger.debug(f"Resolved template {name_or_pattern!r} to {source!r}")
        return source
    return name_or_pattern


def resolve(
    name_or_pattern: str,
    templates: Optional[Mapping[str, str]] = None,
) -> re.Pattern:
    """
    Resolve a template name or raw pattern into a compiled pattern.

    Args:
        name_or_pattern: A template name present in ``templates`` or a
            regular expression source.
        templates: Mapping of template names to pattern sources.

    Returns:
        The compiled pattern.

    Raises:
        PatternError: If the resolved source does not compile.
    """
    return compile_pattern(resolve_source(name_or_pattern, templates))
