"""Translation of toolchain diagnostics into NullScript terms."""

from __future__ import annotations

from nullscript.diagnostics.catalog import DIAGNOSTIC_RULES, DiagnosticRule, Response, match_catalog
from nullscript.diagnostics.parse import RawDiagnostic, clean_message, parse_diagnostic
from nullscript.diagnostics.translate import translate

__all__ = [
    "DIAGNOSTIC_RULES",
    "DiagnosticRule",
    "RawDiagnostic",
    "Response",
    "clean_message",
    "match_catalog",
    "parse_diagnostic",
    "translate",
]
