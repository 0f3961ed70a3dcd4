from __future__ import annotations

import pytest

from nullscript.errors.base import NullScriptSyntaxError, NullScriptTypeError
from nullscript.pipeline.toolchain import CompileOutcome
from nullscript.pipeline.transpile import TranspileResult, build_unit, transpile, transpile_units
from nullscript.rewrite.engine import RewriteOptions


class RecordingToolchain:
    def __init__(self, outcome: CompileOutcome) -> None:
        self.outcome = outcome
        self.calls: list[str] = []

    def compile(self, canonical_text: str) -> CompileOutcome:
        self.calls.append(canonical_text)
        return self.outcome


def test_transpile_validates_then_rewrites() -> None:
    assert transpile("definitely x = fr;") == "const x = true;"
    with pytest.raises(NullScriptSyntaxError) as excinfo:
        transpile("const x = 1;", "a.ns")
    assert excinfo.value.file_path == "a.ns"


def test_transpile_passes_options() -> None:
    source = "checkthis (fr) {\n  feels f() { }\n}"
    assert "function f()" in transpile(source, options=RewriteOptions(declaration_context="braces"))


def test_build_unit_returns_output_when_toolchain_accepts() -> None:
    toolchain = RecordingToolchain(CompileOutcome(ok=True))
    assert build_unit("maybe n = nocap;", toolchain) == "let n = null;"
    assert toolchain.calls == ["let n = null;"]


def test_build_unit_raises_translated_diagnostic_once() -> None:
    raw = "unit.ts:1:5 - error TS2322: Type 'number' is not assignable to type 'string'."
    toolchain = RecordingToolchain(CompileOutcome(ok=False, diagnostics=raw))
    with pytest.raises(NullScriptTypeError) as excinfo:
        build_unit("maybe n: string = 1;", toolchain, "unit.ns")
    err = excinfo.value
    assert (err.line, err.column) == (1, 5)
    assert err.file_path == "unit.ns"
    assert len(toolchain.calls) == 1


def test_validation_failure_skips_toolchain() -> None:
    toolchain = RecordingToolchain(CompileOutcome(ok=True))
    with pytest.raises(NullScriptSyntaxError):
        build_unit("let n = 1;", toolchain)
    assert toolchain.calls == []


def test_transpile_units_keeps_order() -> None:
    results = transpile_units([("a.ns", "pls fr;"), ("b.ns", "pls cap;")])
    assert results == [
        TranspileResult(input_path="a.ns", output_text="return true;"),
        TranspileResult(input_path="b.ns", output_text="return false;"),
    ]
