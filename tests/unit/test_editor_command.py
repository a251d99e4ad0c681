"""Unit tests for the editor integration layer."""

from unittest.mock import Mock

import pytest

from regex_align.config import ConfigurationManager
from regex_align.editor import (
    AlignByRegexCommand,
    InMemoryEditor,
    InputSession,
    line_range_for_selection,
    read_args,
)
from regex_align.interfaces.editor import ITextEditor
from regex_align.models.document import LineRange, Selection, TextDocument
from regex_align.models.enums import EndOfLine


@pytest.fixture
def config_manager():
    """Configuration with a couple of templates."""
    manager = ConfigurationManager()
    manager.load({
        "align.by.regex.templates": {"assign": "=", "comma": ","},
        "align.by.regex.ignoreFocusOut": True,
    })
    return manager


@pytest.fixture
def document():
    return TextDocument.from_text("x = 1\nlong = 2\nother\n")


class TestLineRangeForSelection:
    """Tests for expanding selections to whole lines."""

    def test_empty_selection(self, document):
        assert line_range_for_selection(Selection.of(1, 2, 1, 2), document) is None

    def test_end_at_column_zero_excludes_line(self, document):
        line_range = line_range_for_selection(Selection.of(0, 3, 2, 0), document)

        assert line_range == LineRange(0, 1)
        assert len(line_range) == 2

    def test_end_inside_line_includes_it(self, document):
        assert line_range_for_selection(Selection.of(0, 0, 2, 1), document) == LineRange(0, 2)

    def test_reversed_selection(self, document):
        assert line_range_for_selection(Selection.of(2, 1, 0, 2), document) == LineRange(0, 2)

    def test_single_line_from_column_zero(self, document):
        assert line_range_for_selection(Selection.of(1, 0, 1, 4), document) == LineRange(1, 1)


class TestReadArgs:
    """Tests for command argument handling."""

    def test_no_argument(self):
        assert read_args(None, {"assign": "="}).template is None

    def test_known_template(self):
        assert read_args({"template": "assign"}, {"assign": "="}).template == "assign"

    @pytest.mark.parametrize("template", ["", "missing", 42])
    def test_invalid_template_is_ignored(self, template):
        assert read_args({"template": template}, {"assign": "="}).template is None

    def test_attribute_argument(self):
        arg = Mock(template="assign")

        assert read_args(arg, {"assign": "="}).template == "assign"


class TestAlignByRegexCommand:
    """Tests for the AlignByRegexCommand class."""

    def test_prompted_pattern_aligns_selection(self, config_manager, document):
        editor = InMemoryEditor(document, Selection.of(0, 0, 2, 0), answers=["="])
        command = AlignByRegexCommand(config_manager)

        assert command.run(editor) is True

        assert document.lines == ["x    =1", "long =2", "other", ""]
        assert command.session.last_input == "="
        assert editor.prompts[0]["ignore_focus_out"] is True

    def test_prompt_prefilled_with_last_input(self, config_manager, document):
        session = InputSession(last_input=",")
        editor = InMemoryEditor(document, Selection.of(0, 0, 1, 3), answers=["="])

        AlignByRegexCommand(config_manager, session).run(editor)

        assert editor.prompts[0]["value"] == ","
        assert session.last_input == "="

    def test_template_argument_skips_prompt(self, config_manager, document):
        session = InputSession(last_input="previous")
        editor = InMemoryEditor(document, Selection.of(0, 0, 1, 3))

        applied = AlignByRegexCommand(config_manager, session).run(
            editor, {"template": "assign"}
        )

        assert applied is True
        assert editor.prompts == []
        assert session.last_input == "previous"
        assert document.lines[:2] == ["x    =1", "long =2"]

    def test_prompted_template_name_is_resolved(self, config_manager, document):
        editor = InMemoryEditor(document, Selection.of(0, 0, 1, 8), answers=["assign"])

        AlignByRegexCommand(config_manager).run(editor)

        assert document.lines[:2] == ["x    =1", "long =2"]

    def test_unknown_template_argument_falls_back_to_prompt(self, config_manager, document):
        editor = InMemoryEditor(document, Selection.of(0, 0, 1, 8), answers=["="])

        AlignByRegexCommand(config_manager).run(editor, {"template": "nope"})

        assert len(editor.prompts) == 1

    def test_invalid_pattern_leaves_document_unchanged(self, config_manager, document):
        editor = InMemoryEditor(document, Selection.of(0, 0, 1, 8), answers=["(="])

        assert AlignByRegexCommand(config_manager).run(editor) is False

        assert document.lines == ["x = 1", "long = 2", "other", ""]
        assert editor.edit_count == 0
        assert "Invalid regular expression" in editor.errors[0]

    def test_dismissed_prompt_is_noop(self, config_manager, document):
        editor = InMemoryEditor(document, Selection.of(0, 0, 1, 8))
        command = AlignByRegexCommand(config_manager, InputSession(last_input="="))

        assert command.run(editor) is False
        assert editor.edit_count == 0
        assert command.session.last_input == "="

    def test_empty_selection_is_noop(self, config_manager, document):
        editor = InMemoryEditor(document, Selection.of(1, 2, 1, 2), answers=["="])

        assert AlignByRegexCommand(config_manager).run(editor) is False
        assert editor.edit_count == 0

    def test_edits_use_absolute_line_numbers(self, config_manager):
        document = TextDocument.from_text("head\na=1\nbb=2\ntail")
        editor = InMemoryEditor(document, Selection.of(1, 0, 2, 4), answers=["="])

        AlignByRegexCommand(config_manager).run(editor)

        assert document.lines == ["head", "a  =1", "bb =2", "tail"]

    def test_crlf_document_keeps_line_endings(self, config_manager):
        document = TextDocument.from_text("a=1\r\nbb=2\r\n")
        editor = InMemoryEditor(document, Selection.of(0, 0, 2, 0), answers=["="])

        AlignByRegexCommand(config_manager).run(editor)

        assert document.eol is EndOfLine.CRLF
        assert document.text() == "a  =1\r\nbb =2\r\n"

    def test_works_with_any_editor_implementation(self, config_manager, document):
        """The command only talks to the ITextEditor interface."""
        editor = Mock(spec=ITextEditor)
        editor.document = document
        editor.selection = Selection.of(0, 0, 1, 8)
        editor.show_input_box.return_value = "="
        editor.replace_lines.return_value = True

        assert AlignByRegexCommand(config_manager).run(editor) is True

        editor.replace_lines.assert_called_once_with({0: "x    =1", 1: "long =2"})
