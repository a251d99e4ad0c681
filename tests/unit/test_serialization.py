"""Unit tests for block serialization."""

import json

import pytest

from regex_align.models.enums import EndOfLine, PartKind
from regex_align.pipeline import align_block
from regex_align.serialization import BlockSerializer


class TestBlockSerializer:
    """Tests for the BlockSerializer class."""

    def test_round_trip_preserves_rendering(self):
        block = align_block(["a=1", "bb=22"], "=", start_line=4, eol=EndOfLine.CRLF)

        restored = BlockSerializer.deserialize(BlockSerializer.serialize(block))

        assert restored.text() == block.text()
        assert restored.eol is EndOfLine.CRLF
        assert restored.pattern.pattern == "="
        assert [line.number for line in restored] == [4, 5]

    def test_serialized_parts(self):
        block = align_block(["a=1"], "=")

        data = json.loads(BlockSerializer.serialize(block))

        assert data["lines"][0]["text"] == "a=1"
        assert [p["kind"] for p in data["lines"][0]["parts"]] == [
            PartKind.CONTENT.value,
            PartKind.BOUNDARY.value,
            PartKind.CONTENT.value,
        ]

    def test_block_without_pattern(self):
        block = align_block(["a=1"], "")

        restored = BlockSerializer.from_dict(BlockSerializer.to_dict(block))

        assert restored.pattern is None
        assert restored.rendered_lines() == ["a=1"]

    def test_invalid_json(self):
        with pytest.raises(ValueError, match="Invalid JSON"):
            BlockSerializer.deserialize("{")

    def test_missing_lines(self):
        with pytest.raises(ValueError, match="lines"):
            BlockSerializer.from_dict({"pattern": "="})
