"""Enumerations for regex-based block alignment."""

from enum import Enum
from typing import Optional


class PartKind(Enum):
    """Kinds of spans a tokenized line is made of."""
    CONTENT = "content"
    BOUNDARY = "boundary"


class EndOfLine(Enum):
    """Line ending conventions a block can be rendered with."""
    LF = "\n"
    CRLF = "\r\n"
    CR = "\r"

    @property
    def sequence(self) -> str:
        """The literal line terminator."""
        return self.value

    @classmethod
    def detect(cls, text: str, default: Optional["EndOfLine"] = None) -> "EndOfLine":
        """Guess the convention used by text from its first line break."""
        for index, char in enumerate(text):
            if char == "\r":
                if text[index + 1:index + 2] == "\n":
                    return cls.CRLF
                return cls.CR
            if char == "\n":
                return cls.LF
        return default or cls.LF

    @classmethod
    def coerce(cls, value) -> "EndOfLine":
        """Accept a member, its name (``"CRLF"``) or its sequence."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str) and value.upper() in cls.__members__:
            return cls[value.upper()]
        return cls(value)
