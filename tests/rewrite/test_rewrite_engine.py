from __future__ import annotations

import pytest

from nullscript.errors.base import ConfigError
from nullscript.lang.table import build_keyword_table
from nullscript.rewrite.engine import RewriteOptions, Rewriter, rewrite
from tests.conftest import rewrite_source


def test_canonical_input_is_unchanged() -> None:
    source = (
        "const total = 5;\n"
        "function add(a: number, b: number): number {\n"
        "  if (a > b) {\n"
        "    return a + b;\n"
        "  }\n"
        "  return null;\n"
        "}\n"
    )
    assert rewrite_source(source) == source


def test_single_token_aliases_rewrite() -> None:
    source = "definitely ok = fr;\nmaybe gone = ghost;\nmayhap none = nocap;\n"
    assert rewrite_source(source) == "const ok = true;\nlet gone = undefined;\nvar none = null;\n"


@pytest.mark.parametrize(
    "word",
    ["fr_value", "my_fr", "frosty", "capital", "maybeLater", "plsHelp"],
)
def test_alias_inside_identifier_is_left_alone(word: str) -> None:
    assert rewrite_source(f"definitely {word} = 1;") == f"const {word} = 1;"


def test_standalone_alias_next_to_identifier_rewrites() -> None:
    assert rewrite_source("definitely fr_value = fr;") == "const fr_value = true;"


def test_strings_and_comments_are_opaque() -> None:
    source = (
        "definitely label = 'fr cap nocap';\n"
        "// maybe checkthis pls\n"
        "/* feels remove dis */\n"
        'definitely quote = "pls ghost";\n'
    )
    expected = (
        "const label = 'fr cap nocap';\n"
        "// maybe checkthis pls\n"
        "/* feels remove dis */\n"
        'const quote = "pls ghost";\n'
    )
    assert rewrite_source(source) == expected


def test_template_text_is_opaque_but_interpolation_rewrites() -> None:
    source = "definitely msg = `fr says ${checkthis_ok ? fr : cap}`;"
    assert rewrite_source(source) == "const msg = `fr says ${checkthis_ok ? true : false}`;"


def test_top_level_function_declaration() -> None:
    assert rewrite_source("feels add(a, b) {\n  pls a + b;\n}") == "function add(a, b) {\n  return a + b;\n}"


def test_indented_function_declaration_drops_keyword() -> None:
    source = "bigbrain Counter {\n  feels increment(step) {\n    pls step;\n  }\n}"
    expected = "class Counter {\n  increment(step) {\n    return step;\n  }\n}"
    assert rewrite_source(source) == expected


def test_generic_declaration() -> None:
    assert rewrite_source("feels pick<T>(items: T[]): T {") == "function pick<T>(items: T[]): T {"


def test_async_alias_is_always_two_words() -> None:
    assert rewrite_source("feels async load() {") == "async function load() {"
    assert rewrite_source("  feels async load() {") == "  async function load() {"


def test_bare_function_alias_falls_back_to_keyword() -> None:
    assert rewrite_source("definitely cb = feels (x) { pls x; };") == "const cb = function (x) { return x; };"


def test_declaration_name_is_not_rewritten() -> None:
    assert rewrite_source("feels is(x) {") == "function is(x) {"


def test_multi_word_phrase() -> None:
    assert rewrite_source("orsomething (x) { }") == "else if (x) { }"
    source = "checkthis (a) {\n} orsomething   (b) {\n} orelse {\n}"
    assert rewrite_source(source) == "if (a) {\n} else if (b) {\n} else {\n}"


def test_multi_word_alias_without_space_is_left() -> None:
    assert rewrite_source("orsomething(x)") == "orsomething(x)"


def test_remove_keeps_operand() -> None:
    assert rewrite_source("remove obj.a.b[0];") == "delete obj.a.b[0];"
    assert rewrite_source("remove   dis.cache[key];") == "delete this.cache[key];"


def test_bare_remove_is_untouched() -> None:
    assert rewrite_source("definitely remove = 1;") == "const remove = 1;"


def test_property_names_are_not_rewritten() -> None:
    source = "definitely v = config.fr + dis.#pls + list.remove(fr);"
    assert rewrite_source(source) == "const v = config.fr + this.#pls + list.remove(true);"


def test_spread_is_not_property_access() -> None:
    assert rewrite_source("definitely all = [...parent];") == "const all = [...super];"


def test_rewrite_runs_twice_without_change() -> None:
    once = rewrite_source("definitely x = fr;\nfeels go() { pls nocap; }")
    assert rewrite_source(once) == once


def test_options_reject_unknown_context() -> None:
    with pytest.raises(ConfigError):
        RewriteOptions(declaration_context="tabs")


def test_custom_table_is_used() -> None:
    table = build_keyword_table((("values", "Values", (("yup", "true"),)),))
    assert rewrite("definitely x = yup;", table=table) == "definitely x = true;"


def test_rewriter_classifies_tokens(table) -> None:
    kinds = [token.kind for token in Rewriter(table).tokens("feels f() { pls 'x'; } // c") if token.text.strip()]
    assert kinds[0] == "FunctionDeclAlias"
    assert "Alias" in kinds
    assert "StringLiteral" in kinds
    assert kinds[-1] == "Comment"


def test_quote_inside_regex_does_not_open_a_string() -> None:
    assert rewrite_source("checkthis (/'/.test(s)) { pls fr; }") == "if (/'/.test(s)) { return true; }"


def test_comment_opener_inside_regex_class_keeps_later_lines() -> None:
    source = "definitely r = /[/*]/;\ndefinitely a = fr;\ndefinitely b = cap; // */\n"
    expected = "const r = /[/*]/;\nconst a = true;\nconst b = false; // */\n"
    assert rewrite_source(source) == expected


def test_regex_body_is_opaque_but_division_is_code() -> None:
    source = "definitely m = /fr|cap/.test(s) ? total / 2 : nocap;"
    assert rewrite_source(source) == "const m = /fr|cap/.test(s) ? total / 2 : null;"
