from __future__ import annotations

import difflib
import re
from dataclasses import dataclass
from typing import Callable, Optional

from nullscript.errors.base import SYNTAX_ISSUE, TYPE_ISSUE
from nullscript.lang.table import KeywordTable


@dataclass(frozen=True)
class Response:
    kind: str
    message: str
    suggestion: str


Matcher = Callable[[str], Optional[re.Match[str]]]
Responder = Callable[[re.Match[str], KeywordTable], Optional[Response]]


@dataclass(frozen=True)
class DiagnosticRule:
    name: str
    matcher: Matcher
    responder: Responder


def _contains(fragment: str) -> Matcher:
    pattern = re.compile(re.escape(fragment))
    return pattern.search


def _fixed(kind: str, message: str, suggestion: str) -> Responder:
    def respond(_match: re.Match[str], _table: KeywordTable) -> Response:
        return Response(kind, message, suggestion)

    return respond


_MISSING_ALIASES: tuple[tuple[str, str, str], ...] = (
    ("feels", "Invalid function declaration. Use 'feels' followed by a function name.", "Example: feels myFunction() { ... }"),
    ("definitely", "Invalid variable declaration. Use 'definitely' for constants.", "Example: definitely myVar = 'value'"),
    ("maybe", "Invalid variable declaration. Use 'maybe' for variables that can change.", "Example: maybe myVar = 'value'"),
    ("checkthis", "Invalid conditional statement. Use 'checkthis' for if statements.", "Example: checkthis (condition) { ... }"),
    ("orelse", "Invalid else statement. Use 'orelse' for else clauses.", "Example: checkthis (condition) { ... } orelse { ... }"),
    ("pls", "Invalid return statement. Use 'pls' to return values.", "Example: pls myValue"),
    ("fr", "Invalid boolean value. Use 'fr' for true.", "Example: definitely isValid = fr"),
    ("cap", "Invalid boolean value. Use 'cap' for false.", "Example: definitely isValid = cap"),
    ("nocap", "Invalid null value. Use 'nocap' for null.", "Example: definitely value = nocap"),
    ("ghost", "Invalid undefined value. Use 'ghost' for undefined.", "Example: definitely value = ghost"),
    ("vibes", "Invalid interface declaration. Use 'vibes' to define interfaces.", "Example: vibes MyInterface { ... }"),
    ("vibe", "Invalid type alias. Use 'vibe' to define type aliases.", "Example: vibe MyType = string | number"),
    ("bigbrain", "Invalid class declaration. Use 'bigbrain' to define classes.", "Example: bigbrain MyClass { ... }"),
)

_STATEMENT_RULES: tuple[tuple[str, str, str], ...] = (
    (
        "Unexpected keyword or identifier",
        "Invalid NullScript syntax. You're using an undefined keyword or incorrect syntax.",
        "Check that you're using valid NullScript keywords. Run 'nullc keywords' to see all available options.",
    ),
    (
        "Unexpected token",
        "Syntax error in NullScript code. Check for missing keywords or incorrect syntax.",
        "Make sure you're using NullScript keywords correctly. Run 'nullc keywords' to see all available keywords.",
    ),
    (
        "Declaration or statement expected",
        "Invalid statement. Check your NullScript syntax.",
        "Make sure you're using proper NullScript keywords and syntax.",
    ),
    (
        "Function implementation is missing",
        "Function body is missing. Add implementation after your function declaration.",
        "Example: feels myFunction() { /* your code here */ }",
    ),
)

_CANNOT_FIND_NAME = re.compile(r"Cannot find name '([^']+)'")
_NOT_ASSIGNABLE = re.compile(r"Type '([^']+)' is not assignable to type '([^']+)'")
_MISSING_PROPERTY = re.compile(r"Property '([^']+)' does not exist on type '([^']+)'")
# Quoted literal types and property keys (`name:` or `name?:`) keep their spelling.
_TYPE_PART = re.compile(r"""("[^"]*"|`[^`]*`)|\b([A-Za-z_$][\w$]*)\b(\??:)?""")


def _unknown_name(match: re.Match[str], table: KeywordTable) -> Optional[Response]:
    name = match.group(1)
    alias = table.alias_for(name)
    if alias is not None and alias != name:
        return Response(
            SYNTAX_ISSUE,
            f"'{name}' is not NullScript vocabulary. Use '{alias}' instead.",
            "Run 'nullc keywords' to see the alias for every keyword.",
        )
    candidates = [item for item in table.aliases if " " not in item]
    suggestion = difflib.get_close_matches(name, candidates, n=1, cutoff=0.75)
    if not suggestion or suggestion[0] == name:
        return None
    return Response(
        SYNTAX_ISSUE,
        f"Unknown name '{name}'. Did you mean the NullScript keyword '{suggestion[0]}'?",
        f"Example: replace '{name}' with '{suggestion[0]}'",
    )


def _alias_text(text: str, table: KeywordTable) -> str:
    def swap(match: re.Match[str]) -> str:
        literal, word, key = match.groups()
        if literal is not None or key is not None:
            return match.group(0)
        alias = table.alias_for(word)
        return alias if alias is not None and " " not in alias else word

    return _TYPE_PART.sub(swap, text)


def _not_assignable(match: re.Match[str], table: KeywordTable) -> Response:
    source_type = _alias_text(match.group(1), table)
    target_type = _alias_text(match.group(2), table)
    return Response(
        TYPE_ISSUE,
        f"Type mismatch: a value of type '{source_type}' cannot be used where '{target_type}' is expected.",
        "Check the value you assign matches the declared type, or widen the type with 'sus'.",
    )


def _missing_property(match: re.Match[str], table: KeywordTable) -> Response:
    prop = match.group(1)
    owner = _alias_text(match.group(2), table)
    return Response(
        TYPE_ISSUE,
        f"Property '{prop}' does not exist on type '{owner}'.",
        f"Declare '{prop}' in the shape of '{owner}' (for example with 'vibes') or fix the property name.",
    )


def build_catalog() -> tuple[DiagnosticRule, ...]:
    rules: list[DiagnosticRule] = []
    for alias, message, suggestion in _MISSING_ALIASES:
        rules.append(
            DiagnosticRule(
                name=f"missing_alias.{alias}",
                matcher=_contains(f"Cannot find name '{alias}'"),
                responder=_fixed(SYNTAX_ISSUE, message, suggestion),
            )
        )
    rules.append(DiagnosticRule("unknown_name", _CANNOT_FIND_NAME.search, _unknown_name))
    for fragment, message, suggestion in _STATEMENT_RULES:
        rules.append(
            DiagnosticRule(
                name=f"statement.{fragment.lower().replace(' ', '_')}",
                matcher=_contains(fragment),
                responder=_fixed(SYNTAX_ISSUE, message, suggestion),
            )
        )
    rules.append(DiagnosticRule("type.not_assignable", _NOT_ASSIGNABLE.search, _not_assignable))
    rules.append(DiagnosticRule("type.missing_property", _MISSING_PROPERTY.search, _missing_property))
    return tuple(rules)


DIAGNOSTIC_RULES = build_catalog()


def match_catalog(
    message: str,
    table: KeywordTable,
    rules: tuple[DiagnosticRule, ...] = DIAGNOSTIC_RULES,
) -> tuple[DiagnosticRule, Response] | None:
    for rule in rules:
        found = rule.matcher(message)
        if found is None:
            continue
        response = rule.responder(found, table)
        if response is not None:
            return rule, response
    return None


__all__ = ["DIAGNOSTIC_RULES", "DiagnosticRule", "Response", "build_catalog", "match_catalog"]
