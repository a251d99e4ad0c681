"""The align-by-regex editor command."""

import logging
from typing import Any, Optional

from ..config.config_manager import ConfigurationManager
from ..exceptions import PatternError
from ..interfaces.editor import ITextEditor
from ..pipeline import align_block
from .selection import line_range_for_selection
from .session import InputSession, read_args


logger = logging.getLogger(__name__)

COMMAND_ID = "align.by.regex"
PROMPT = "Enter regular expression or template name."


class AlignByRegexCommand:
    """
    Aligns the selected lines of an editor by a regex or template.

    The command owns no global state: templates and settings come from
    the configuration manager, the last input from the session.
    """

    def __init__(
        self,
        config_manager: Optional[ConfigurationManager] = None,
        session: Optional[InputSession] = None,
    ):
        self.config_manager = config_manager or ConfigurationManager()
        self.session = session or InputSession()

    def run(self, editor: ITextEditor, arg: Any = None) -> bool:
        """
        Execute the command against an editor.

        Args:
            editor: The editor to read the selection from and edit.
            arg: Optional command argument, e.g. ``{"template": "assign"}``.

        Returns:
            True if the document was edited.
        """
        templates = self.config_manager.templates
        options = read_args(arg, templates)

        if options.template:
            pattern_source = options.template
        else:
            pattern_source = editor.show_input_box(
                PROMPT,
                value=self.session.last_input,
                ignore_focus_out=self.config_manager.configuration.ignore_focus_out,
            ) or ""

        if not pattern_source:
            return False

        # Template arguments are not remembered as typed input.
        if not options.template:
            self.session.remember(pattern_source)

        document = editor.document
        line_range = line_range_for_selection(editor.selection, document)
        if line_range is None:
            logger.debug("Empty selection, nothing to align")
            return False

        try:
            block = align_block(
                document.get_lines(line_range),
                pattern_source,
                start_line=line_range.start,
                eol=document.eol,
                templates=templates,
                aligner=self.config_manager.create_aligner(),
            )
        except PatternError as e:
            editor.show_error_message(str(e))
            return False

        applied = editor.replace_lines({line.number: line.text for line in block})
        if applied:
            logger.info(
                f"Aligned lines {line_range.start}-{line_range.end} "
                f"by {pattern_source!r}"
            )
        return applied
