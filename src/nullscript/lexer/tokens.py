from __future__ import annotations

from dataclasses import dataclass


WORD = "WORD"
SPACE = "SPACE"
STRING = "STRING"
TEMPLATE = "TEMPLATE"
COMMENT = "COMMENT"
PUNCT = "PUNCT"
REGEX = "REGEX"

LITERAL_TYPES = frozenset({STRING, TEMPLATE, REGEX})
OPAQUE_TYPES = frozenset({STRING, TEMPLATE, REGEX, COMMENT})


@dataclass(frozen=True)
class Token:
    type: str
    text: str
    offset: int
    line: int
    column: int

    @property
    def end(self) -> int:
        return self.offset + len(self.text)

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"Token({self.type}, {self.text!r}, {self.line}:{self.column})"


def is_identifier_char(ch: str) -> bool:
    return ch.isalnum() or ch in "_$"


def is_identifier_start(ch: str) -> bool:
    return (ch.isalpha() or ch in "_$") and not ch.isdigit()


__all__ = [
    "COMMENT",
    "LITERAL_TYPES",
    "OPAQUE_TYPES",
    "PUNCT",
    "REGEX",
    "SPACE",
    "STRING",
    "TEMPLATE",
    "Token",
    "WORD",
    "is_identifier_char",
    "is_identifier_start",
]
