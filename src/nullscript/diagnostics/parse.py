from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional


_LOCATION = re.compile(
    r"([\w.-]+\.tsx?):(\d+):(\d+)\s*-\s*error"
    r"|[\w.-]+\.tsx?\((\d+),(\d+)\)"
    r"|:(\d+):(\d+)"
)
_TS_ERROR = re.compile(r"error (TS\d+): (.+)")
_TS_ERROR_PREFIX = re.compile(r"error TS\d+:\s*")
_FOUND_ERRORS = re.compile(r"^Found \d+ errors?\b")

FALLBACK_FRAGMENTS = (
    "Cannot find name",
    "Unexpected token",
    "Declaration or statement expected",
)
MAX_GENERIC_LINES = 3


@dataclass(frozen=True)
class RawDiagnostic:
    message: str
    code: Optional[str]
    line: Optional[int]
    column: Optional[int]


def extract_location(text: str) -> tuple[Optional[int], Optional[int]]:
    match = _LOCATION.search(text)
    if match is None:
        return None, None
    groups = match.groups()
    for line_idx, col_idx in ((1, 2), (3, 4), (5, 6)):
        if groups[line_idx] is not None:
            return int(groups[line_idx]), int(groups[col_idx])
    return None, None


def extract_message(text: str) -> tuple[str, Optional[str]]:
    lines = text.split("\n")
    for line in lines:
        if "error TS" not in line:
            continue
        match = _TS_ERROR.search(line)
        if match:
            return match.group(2).strip(), match.group(1)
    if any("error TS" in line for line in lines):
        return text, None
    for line in lines:
        if any(fragment in line for fragment in FALLBACK_FRAGMENTS):
            return line.strip(), None
    return text, None


def parse_diagnostic(text: str) -> RawDiagnostic:
    line, column = extract_location(text)
    message, code = extract_message(text)
    return RawDiagnostic(message=message, code=code, line=line, column=column)


def clean_message(text: str) -> str:
    kept: list[str] = []
    for line in _TS_ERROR_PREFIX.sub("", text).split("\n"):
        stripped = line.strip()
        if not stripped:
            continue
        if stripped.startswith("at "):
            continue
        if "Command failed:" in stripped or "(node:" in stripped:
            continue
        if _FOUND_ERRORS.match(stripped):
            continue
        kept.append(stripped)
        if len(kept) == MAX_GENERIC_LINES:
            break
    return "\n".join(kept).strip()


__all__ = [
    "FALLBACK_FRAGMENTS",
    "MAX_GENERIC_LINES",
    "RawDiagnostic",
    "clean_message",
    "extract_location",
    "extract_message",
    "parse_diagnostic",
]
