"""Serialization and deserialization utilities for aligned blocks."""

import json
from typing import Any

from .engine.tokenizer import compile_pattern
from .models.block import Block, Line, Part
from .models.enums import EndOfLine, PartKind


class BlockSerializer:
    """
    Handles serialization and deserialization of Block structures.

    Ensures round-trip consistency: deserialize(serialize(block)) renders
    exactly the same text as block.
    """

    @staticmethod
    def serialize(block: Block) -> str:
        """
        Serialize a Block to JSON string.

        Args:
            block: The Block to serialize.

        Returns:
            JSON string representation of the block.
        """
        return json.dumps(
            BlockSerializer.to_dict(block),
            ensure_ascii=False,
            indent=2
        )

    @staticmethod
    def deserialize(json_str: str) -> Block:
        """
        Deserialize a JSON string to a Block.

        Raises:
            ValueError: If the JSON is invalid or malformed.
            PatternError: If the stored pattern no longer compiles.
        """
        try:
            data = json.loads(json_str)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON: {str(e)}")

        return BlockSerializer.from_dict(data)

    @staticmethod
    def to_dict(block: Block) -> dict[str, Any]:
        """Convert Block to dictionary."""
        return {
            "pattern": block.pattern.pattern if block.pattern is not None else None,
            "flags": block.pattern.flags if block.pattern is not None else 0,
            "eol": block.eol.name,
            "lines": [BlockSerializer._line_to_dict(line) for line in block.lines],
        }

    @staticmethod
    def from_dict(data: dict[str, Any]) -> Block:
        """Convert dictionary to Block."""
        if not isinstance(data, dict):
            raise ValueError("Expected dictionary for Block")

        if "lines" not in data:
            raise ValueError("Missing required field: lines")

        pattern = None
        if data.get("pattern") is not None:
            pattern = compile_pattern(data["pattern"], data.get("flags", 0))

        return Block(
            lines=[BlockSerializer._dict_to_line(line) for line in data["lines"]],
            pattern=pattern,
            eol=EndOfLine.coerce(data.get("eol", "LF")),
        )

    @staticmethod
    def _line_to_dict(line: Line) -> dict[str, Any]:
        return {
            "number": line.number,
            "text": line.text,
            "parts": [
                {
                    "value": part.value,
                    "kind": part.kind.value,
                    "column_index": part.column_index,
                }
                for part in line.parts
            ],
        }

    @staticmethod
    def _dict_to_line(data: dict[str, Any]) -> Line:
        if "number" not in data:
            raise ValueError("Missing required field: number")
        return Line(
            number=data["number"],
            parts=[
                Part(
                    value=part["value"],
                    kind=PartKind(part.get("kind", PartKind.CONTENT.value)),
                    column_index=part.get("column_index", 0),
                )
                for part in data.get("parts", [])
            ],
        )
