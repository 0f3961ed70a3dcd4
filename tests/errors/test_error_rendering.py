from __future__ import annotations

from nullscript.errors.base import NullScriptSyntaxError, NullScriptTranspileError, error_for_kind
from nullscript.errors.guidance import build_guidance_message, with_hint
from nullscript.errors.render import format_error, split_hint, to_payload


def test_format_error_header_and_caret() -> None:
    err = NullScriptSyntaxError("Bad line", line=2, column=3, file_path="/tmp/src/app.ns")
    text = format_error(err, "maybe a = 1;\n  const b = 2;\n")
    assert text == "❌ NullScriptSyntaxError in app.ns:2:3\n\nBad line\n\n  const b = 2;\n  ^"


def test_format_error_without_source_or_location() -> None:
    err = NullScriptTranspileError("Generic failure")
    assert format_error(err) == "❌ NullScriptTranspileError\n\nGeneric failure"
    assert format_error(err, "anything") == "❌ NullScriptTranspileError\n\nGeneric failure"


def test_payload_splits_hint() -> None:
    err = NullScriptSyntaxError(with_hint("Nope", "Try this"), line=1, column=1, code="TS1005")
    payload = to_payload(err)
    assert payload["kind"] == "syntax"
    assert payload["message"] == "Nope"
    assert payload["hint"] == "Try this"
    assert payload["code"] == "TS1005"
    assert split_hint("plain") == ("plain", None)


def test_guidance_message_layout() -> None:
    text = build_guidance_message(what="Broken.", why="Because.", fix="Fix it.", example="pls fr")
    assert text == "Broken.\nWhy: Because.\nFix: Fix it.\nExample: pls fr"


def test_error_for_kind() -> None:
    assert error_for_kind("syntax") is NullScriptSyntaxError
    assert error_for_kind("unknown") is NullScriptTranspileError
