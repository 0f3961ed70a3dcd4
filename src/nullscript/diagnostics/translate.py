from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from nullscript.diagnostics.catalog import DIAGNOSTIC_RULES, DiagnosticRule, match_catalog
from nullscript.diagnostics.parse import clean_message, parse_diagnostic
from nullscript.errors.base import NullScriptTranspileError, error_for_kind
from nullscript.errors.guidance import with_hint
from nullscript.lang.table import KeywordTable, default_keyword_table


_LOG = logging.getLogger("nullscript.diagnostics")

GENERIC_SUGGESTION = (
    "This might be due to incorrect NullScript syntax. Run 'nullc keywords' to see available keywords."
)
EMPTY_DIAGNOSTIC = "TypeScript compilation failed"


def translate(
    raw: str,
    file_path: Optional[str | Path] = None,
    *,
    table: Optional[KeywordTable] = None,
    rules: tuple[DiagnosticRule, ...] = DIAGNOSTIC_RULES,
) -> NullScriptTranspileError:
    """Turn raw toolchain output into an error phrased in alias vocabulary.

    The error is returned, not raised. Catalog rules are tried in order and
    the first one that answers wins; anything unmatched becomes a generic
    error carrying a trimmed copy of the raw text.
    """
    table = table or default_keyword_table()
    raw = raw or ""
    diagnostic = parse_diagnostic(raw)
    found = match_catalog(diagnostic.message, table, rules)
    if found is not None:
        rule, response = found
        _LOG.debug("diagnostic matched catalog rule %s", rule.name)
        error_type = error_for_kind(response.kind)
        return error_type(
            with_hint(response.message, response.suggestion),
            line=diagnostic.line,
            column=diagnostic.column,
            file_path=file_path,
            code=diagnostic.code,
            details={"rule": rule.name, "raw": diagnostic.message},
        )
    # Code frames and location prefixes quote the rewritten text; keep only tsc's message.
    source_text = diagnostic.message if diagnostic.code is not None else raw
    cleaned = clean_message(source_text) or EMPTY_DIAGNOSTIC
    _LOG.debug("diagnostic fell through to generic cleanup")
    return NullScriptTranspileError(
        with_hint(f"Transpilation error: {cleaned}", GENERIC_SUGGESTION),
        line=diagnostic.line,
        column=diagnostic.column,
        file_path=file_path,
        code=diagnostic.code,
        details={"rule": None, "raw": diagnostic.message},
    )


__all__ = ["EMPTY_DIAGNOSTIC", "GENERIC_SUGGESTION", "translate"]
