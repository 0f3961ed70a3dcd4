from __future__ import annotations

from pathlib import Path
from typing import Optional


GENERIC_ISSUE = "generic"
SYNTAX_ISSUE = "syntax"
TYPE_ISSUE = "type"


class NullScriptError(Exception):
    """Base error carrying an optional source location."""

    kind = GENERIC_ISSUE

    def __init__(
        self,
        message: str,
        *,
        line: Optional[int] = None,
        column: Optional[int] = None,
        file_path: Optional[str | Path] = None,
        code: Optional[str] = None,
        details: Optional[dict] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.line = line
        self.column = column
        self.file_path = str(file_path) if file_path is not None else None
        self.code = code
        self.details = details

    @property
    def name(self) -> str:
        return type(self).__name__

    def location(self) -> str:
        parts = ""
        if self.file_path:
            parts += f" in {Path(self.file_path).name}"
        if self.line is not None:
            parts += f":{self.line}"
            if self.column is not None:
                parts += f":{self.column}"
        return parts

    def __str__(self) -> str:
        return self.message


class NullScriptTranspileError(NullScriptError):
    kind = GENERIC_ISSUE


class NullScriptSyntaxError(NullScriptTranspileError):
    kind = SYNTAX_ISSUE


class NullScriptTypeError(NullScriptTranspileError):
    kind = TYPE_ISSUE


class KeywordTableError(NullScriptError):
    """Raised when the keyword table cannot be built consistently."""


class ConfigError(NullScriptError):
    pass


def error_for_kind(kind: str) -> type[NullScriptTranspileError]:
    if kind == SYNTAX_ISSUE:
        return NullScriptSyntaxError
    if kind == TYPE_ISSUE:
        return NullScriptTypeError
    return NullScriptTranspileError


__all__ = [
    "ConfigError",
    "GENERIC_ISSUE",
    "KeywordTableError",
    "NullScriptError",
    "NullScriptSyntaxError",
    "NullScriptTranspileError",
    "NullScriptTypeError",
    "SYNTAX_ISSUE",
    "TYPE_ISSUE",
    "error_for_kind",
]
