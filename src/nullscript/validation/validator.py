from __future__ import annotations

import difflib
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from nullscript.errors.base import NullScriptSyntaxError
from nullscript.errors.guidance import with_hint
from nullscript.lang.keywords import PASSTHROUGH_CONNECTORS
from nullscript.lang.table import KeywordTable, default_keyword_table
from nullscript.lexer.scanner import blank_literals
from nullscript.validation.rules import CANONICAL_RULES, LEADING_WORD_ASSIGNMENT, UNKNOWN_WORD_CODE


_LOG = logging.getLogger("nullscript.validation")

KEYWORDS_HINT = "Run 'nullc keywords' to see the correct NullScript syntax."


@dataclass(frozen=True)
class Violation:
    line: int
    column: int
    code: str
    message: str
    hint: str

    def to_dict(self) -> dict:
        return {
            "line": self.line,
            "column": self.column,
            "code": self.code,
            "message": self.message,
            "hint": self.hint,
        }


def collect_violations(source: str, *, table: Optional[KeywordTable] = None) -> List[Violation]:
    table = table or default_keyword_table()
    findings: List[Violation] = []
    for line_no, raw_line in enumerate(blank_literals(source).split("\n"), start=1):
        violation = _check_line(raw_line, line_no, table)
        if violation is not None:
            findings.append(violation)
    return findings


def validate(
    source: str,
    file_path: Optional[str | Path] = None,
    *,
    table: Optional[KeywordTable] = None,
) -> None:
    findings = collect_violations(source, table=table)
    if not findings:
        return
    first = findings[0]
    _LOG.debug("vocabulary check rejected line %d (%s)", first.line, first.code)
    raise NullScriptSyntaxError(
        with_hint(first.message, first.hint),
        line=first.line,
        column=first.column,
        file_path=file_path,
        code=first.code,
        details={"violations": [item.to_dict() for item in findings]},
    )


def _check_line(raw_line: str, line_no: int, table: KeywordTable) -> Optional[Violation]:
    line = raw_line.strip()
    if not line:
        return None
    indent = len(raw_line) - len(raw_line.lstrip())
    for rule in CANONICAL_RULES:
        match = rule.pattern.search(line)
        if match is None:
            continue
        return Violation(
            line=line_no,
            column=indent + match.start() + 1,
            code=rule.code,
            message=(
                f"Invalid syntax on line {line_no}: You're using standard TypeScript/JavaScript syntax "
                f"instead of NullScript keywords ({rule.hint})."
            ),
            hint=KEYWORDS_HINT,
        )
    match = LEADING_WORD_ASSIGNMENT.match(line)
    if match is None:
        return None
    word = match.group(1)
    if table.is_alias(word) or word in PASSTHROUGH_CONNECTORS:
        return None
    return Violation(
        line=line_no,
        column=indent + 1,
        code=UNKNOWN_WORD_CODE,
        message=f"Unknown keyword '{word}' on line {line_no}.",
        hint=_unknown_word_hint(word, table),
    )


def _unknown_word_hint(word: str, table: KeywordTable) -> str:
    candidates = [alias for alias in table.aliases if " " not in alias]
    suggestion = difflib.get_close_matches(word, candidates, n=1, cutoff=0.6)
    if suggestion:
        return f"Did you mean '{suggestion[0]}'? Run 'nullc keywords' to see all available options."
    return "Use valid NullScript keywords. Run 'nullc keywords' to see all available options."


__all__ = ["KEYWORDS_HINT", "Violation", "collect_violations", "validate"]
