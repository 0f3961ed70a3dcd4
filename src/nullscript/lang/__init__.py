"""Keyword vocabulary and catalog helpers for NullScript."""

from nullscript.lang.listing import format_keyword_listing, keyword_rows
from nullscript.lang.table import Category, KeywordTable, build_keyword_table, default_keyword_table

__all__ = [
    "Category",
    "KeywordTable",
    "build_keyword_table",
    "default_keyword_table",
    "format_keyword_listing",
    "keyword_rows",
]
