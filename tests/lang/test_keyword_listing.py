from __future__ import annotations

import pytest

from nullscript.errors.base import NullScriptError
from nullscript.lang.listing import format_keyword_listing, keyword_rows


def test_single_category_listing(table) -> None:
    text = format_keyword_listing(table, "values")
    lines = text.splitlines()
    assert lines[0] == "📋 Values Keywords:"
    assert lines[1] == "─" * 50
    assert "  fr             → true" in lines
    assert "  ghost          → undefined" in lines


def test_full_listing_mentions_every_category(table) -> None:
    text = format_keyword_listing(table)
    assert text.startswith("🎭 NullScript Keywords")
    for category in table.categories():
        assert f"📋 {category.title}:" in text
    assert "Available categories: control-flow" in text


def test_unknown_category_lists_choices(table) -> None:
    with pytest.raises(NullScriptError) as excinfo:
        format_keyword_listing(table, "spells")
    err = excinfo.value
    assert err.message.startswith("Unknown category: spells")
    assert "values" in err.details["available"]


def test_keyword_rows_cover_table(table) -> None:
    rows = keyword_rows(table)
    assert len(rows) == len(table.aliases)
    assert {"category": "multi-word", "alias": "orsomething", "canonical": "else if"} in rows
