"""Unit tests for template storage and pattern resolution."""

import pytest

from regex_align.exceptions import PatternError
from regex_align.templates import TemplateCollection, resolve, resolve_source


class TestTemplateCollection:
    """Tests for the TemplateCollection mapping."""

    def test_has_and_get(self):
        templates = TemplateCollection({"assign": r"\s*=\s*", "comma": ","})

        assert templates.has("assign")
        assert templates.get("comma") == ","
        assert templates.get("missing") is None
        assert len(templates) == 2

    def test_names_are_case_sensitive(self):
        templates = TemplateCollection({"Assign": "="})

        assert not templates.has("assign")
        assert templates.has("Assign")

    def test_caller_mapping_changes_are_not_observed(self):
        """The collection keeps its own copy of the mapping."""
        source = {"assign": "="}
        templates = TemplateCollection(source)
        source["comma"] = ","

        assert not templates.has("comma")

    def test_is_read_only(self):
        templates = TemplateCollection({"assign": "="})

        with pytest.raises(TypeError):
            templates["assign"] = ","


class TestResolve:
    """Tests for resolving names or raw patterns."""

    def test_template_name_resolves_to_its_pattern(self):
        pattern = resolve("assign", {"assign": r"\s*=\s*"})

        assert pattern.pattern == r"\s*=\s*"

    def test_unknown_name_is_used_as_pattern(self):
        pattern = resolve("->", {"assign": "="})

        assert pattern.pattern == "->"

    def test_no_templates(self):
        assert resolve_source(",", None) == ","

    def test_unknown_name_that_does_not_compile(self):
        """Falling back to a literal pattern still reports bad regexes."""
        with pytest.raises(PatternError):
            resolve("(unclosed", {"assign": "="})

    def test_template_with_invalid_pattern(self):
        with pytest.raises(PatternError) as exc_info:
            resolve("broken", {"broken": "[a-"})

        assert exc_info.value.pattern == "[a-"
