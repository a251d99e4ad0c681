"""Per-session input state and command argument handling."""

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional


logger = logging.getLogger(__name__)


@dataclass
class InputSession:
    """
    Input state owned by one editor session.

    Remembers the last raw input so the next prompt can be prefilled.
    """
    last_input: str = ""

    def remember(self, value: str) -> None:
        if value:
            self.last_input = value


@dataclass
class CommandOptions:
    """Valid options passed as the command's first argument."""
    template: Optional[str] = None


def read_args(arg: Any, templates: Mapping[str, str]) -> CommandOptions:
    """
    Read the valid options contained in a command argument.

    A ``template`` option is kept only when it names an existing
    template; anything else is ignored.
    """
    options = CommandOptions()
    if not arg:
        return options

    template = arg.get("template") if isinstance(arg, Mapping) else getattr(arg, "template", None)
    if isinstance(template, str) and template and template in templates:
        options.template = template
    elif template:
        logger.debug(f"Ignoring unknown template argument {template!r}")
    return options
