from __future__ import annotations

from typing import Optional

from nullscript.errors.base import NullScriptError


def format_error(err: NullScriptError, source: Optional[str] = None) -> str:
    base = f"❌ {err.name}{err.location()}\n\n{err.message}"
    if not source or err.line is None:
        return base

    lines = source.splitlines()
    line_index = err.line - 1
    if line_index < 0 or line_index >= len(lines):
        return base

    line_text = lines[line_index]
    column = err.column if err.column is not None else 1
    caret_pos = max(1, min(column, len(line_text) + 1))
    caret_line = " " * (caret_pos - 1) + "^"
    return f"{base}\n\n{line_text}\n{caret_line}"


def split_hint(message: str) -> tuple[str, Optional[str]]:
    head, sep, hint = message.partition("\n💡 ")
    if not sep:
        return message, None
    return head, hint.strip() or None


def to_payload(err: NullScriptError) -> dict:
    message, hint = split_hint(err.message)
    payload = {
        "kind": err.kind,
        "error": err.name,
        "message": message,
        "hint": hint,
        "file": err.file_path,
        "line": err.line,
        "column": err.column,
    }
    if err.code:
        payload["code"] = err.code
    return payload


__all__ = ["format_error", "split_hint", "to_payload"]
