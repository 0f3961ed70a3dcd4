from __future__ import annotations

from nullscript.errors.base import NullScriptError
from nullscript.errors.guidance import build_guidance_message
from nullscript.lang.table import Category, KeywordTable


_ALIAS_WIDTH = 15


def format_keyword_listing(table: KeywordTable, category: str | None = None) -> str:
    if category:
        found = table.category(category)
        if found is None:
            raise NullScriptError(
                build_guidance_message(
                    what=f"Unknown category: {category}",
                    fix="Pick one of the available categories.",
                    example=", ".join(table.category_slugs()),
                ),
                details={"category": category, "available": table.category_slugs()},
            )
        lines = [f"📋 {found.title} Keywords:", "─" * 50]
        lines.extend(_entry_lines(found))
        return "\n".join(lines)

    lines = ["🎭 NullScript Keywords", "=" * 50]
    for item in table.categories():
        lines.append("")
        lines.append(f"📋 {item.title}:")
        lines.append("─" * 30)
        lines.extend(_entry_lines(item))
    lines.append("")
    lines.append("💡 Tip: Use 'nullc keywords --category <name>' to see specific categories")
    lines.append("   Available categories: " + ", ".join(table.category_slugs()))
    return "\n".join(lines)


def keyword_rows(table: KeywordTable) -> list[dict[str, str]]:
    rows: list[dict[str, str]] = []
    for item in table.categories():
        for alias, canonical in item.entries.items():
            rows.append({"category": item.slug, "alias": alias, "canonical": canonical})
    return rows


def _entry_lines(category: Category) -> list[str]:
    return [f"  {alias.ljust(_ALIAS_WIDTH)}→ {canonical}" for alias, canonical in category.entries.items()]


__all__ = ["format_keyword_listing", "keyword_rows"]
