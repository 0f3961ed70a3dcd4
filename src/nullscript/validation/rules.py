from __future__ import annotations

import re
from dataclasses import dataclass


_B = r"(?<![\w$.])"


@dataclass(frozen=True)
class CanonicalRule:
    code: str
    pattern: re.Pattern[str]
    canonical: str
    alias: str

    @property
    def hint(self) -> str:
        return f"using '{self.canonical}' instead of '{self.alias}'"


def _rule(canonical: str, alias: str, pattern: str) -> CanonicalRule:
    return CanonicalRule(
        code=f"vocabulary.canonical_{canonical}",
        pattern=re.compile(pattern),
        canonical=canonical,
        alias=alias,
    )


CANONICAL_RULES: tuple[CanonicalRule, ...] = (
    _rule("function", "feels", _B + r"function\s+[\w$]+\s*\("),
    _rule("const", "definitely", _B + r"const\s+[\w$]+"),
    _rule("let", "maybe", _B + r"let\s+[\w$]+"),
    _rule("var", "mayhap", _B + r"var\s+[\w$]+"),
    _rule("if", "checkthis", _B + r"if\s*\("),
    _rule("else", "orelse", _B + r"else\s+"),
    _rule("return", "pls", _B + r"return\s+"),
    _rule("true", "fr", _B + r"true(?![\w$])"),
    _rule("false", "cap", _B + r"false(?![\w$])"),
    _rule("null", "nocap", _B + r"null(?![\w$])"),
    _rule("undefined", "ghost", _B + r"undefined(?![\w$])"),
    _rule("interface", "vibes", _B + r"interface\s+[\w$]+"),
    _rule("type", "vibe", _B + r"type\s+[\w$]+"),
    _rule("class", "bigbrain", _B + r"class\s+[\w$]+"),
    _rule("try", "oops", _B + r"try\s*\{"),
    _rule("catch", "mybad", _B + r"catch\s*\("),
    _rule("finally", "anyway", _B + r"finally\s*\{"),
)

# `<word> <identifier> =` where `=` is an assignment, not `==`, `===` or `=>`.
LEADING_WORD_ASSIGNMENT = re.compile(r"^([\w$]+)\s+[\w$]+\s*=(?![=>])")

UNKNOWN_WORD_CODE = "vocabulary.unknown_keyword"


__all__ = ["CANONICAL_RULES", "CanonicalRule", "LEADING_WORD_ASSIGNMENT", "UNKNOWN_WORD_CODE"]
