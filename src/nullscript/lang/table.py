from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from functools import lru_cache
from types import MappingProxyType

from nullscript.errors.base import KeywordTableError
from nullscript.errors.guidance import build_guidance_message
from nullscript.lang.keywords import FUNCTION_DECLARATION_CATEGORY, KEYWORD_CATEGORIES


_LOG = logging.getLogger("nullscript.lang")


@dataclass(frozen=True)
class Category:
    slug: str
    title: str
    entries: Mapping[str, str]


@dataclass(frozen=True, eq=False)
class KeywordTable:
    """Immutable alias vocabulary plus the maps derived from it."""

    _categories: tuple[Category, ...]
    aliases: Mapping[str, str]
    multi_word: Mapping[str, str]
    function_declarations: Mapping[str, str]
    _reverse: Mapping[str, str]

    def categories(self) -> tuple[Category, ...]:
        return self._categories

    def category(self, slug: str) -> Category | None:
        for category in self._categories:
            if category.slug == slug:
                return category
        return None

    def category_slugs(self) -> list[str]:
        return [category.slug for category in self._categories]

    def is_alias(self, word: str) -> bool:
        return word in self.aliases

    def canonical_for(self, alias: str) -> str | None:
        return self.aliases.get(alias)

    def alias_for(self, canonical: str) -> str | None:
        return self._reverse.get(canonical)

    def single_token_aliases(self) -> Mapping[str, str]:
        return MappingProxyType(
            {
                alias: canonical
                for alias, canonical in self.aliases.items()
                if alias not in self.multi_word and alias not in self.function_declarations
            }
        )


def build_keyword_table(
    categories: Iterable[tuple[str, str, Iterable[tuple[str, str]] | Mapping[str, str]]] = KEYWORD_CATEGORIES,
    *,
    function_category: str = FUNCTION_DECLARATION_CATEGORY,
) -> KeywordTable:
    built: list[Category] = []
    owners: dict[str, str] = {}
    flattened: dict[str, str] = {}
    for slug, title, raw_entries in categories:
        items = raw_entries.items() if isinstance(raw_entries, Mapping) else raw_entries
        entries: dict[str, str] = {}
        for alias, canonical in items:
            if not alias or not alias.strip() or not canonical or not canonical.strip():
                raise KeywordTableError(f"Category '{slug}' has an empty alias or canonical entry.")
            if alias in owners:
                raise KeywordTableError(
                    build_guidance_message(
                        what=f"Alias '{alias}' is defined in both '{owners[alias]}' and '{slug}'.",
                        why="Every alias must map to exactly one canonical keyword.",
                        fix="Remove the alias from one of the categories.",
                    ),
                    details={"alias": alias, "categories": [owners[alias], slug]},
                )
            owners[alias] = slug
            entries[alias] = canonical
            flattened[alias] = canonical
        built.append(Category(slug=slug, title=title, entries=MappingProxyType(entries)))

    _check_canonical_spellings(flattened)

    function_entries: dict[str, str] = {}
    for category in built:
        if category.slug == function_category:
            function_entries.update(category.entries)
    multi_word = {
        alias: canonical
        for alias, canonical in flattened.items()
        if alias not in function_entries and len(canonical.split()) > 1
    }
    reverse: dict[str, str] = {}
    for alias, canonical in flattened.items():
        reverse.setdefault(canonical, alias)

    table = KeywordTable(
        _categories=tuple(built),
        aliases=MappingProxyType(flattened),
        multi_word=MappingProxyType(multi_word),
        function_declarations=MappingProxyType(function_entries),
        _reverse=MappingProxyType(reverse),
    )
    _LOG.debug(
        "keyword table built: %d categories, %d aliases, %d multi-word, %d function",
        len(built),
        len(flattened),
        len(multi_word),
        len(function_entries),
    )
    return table


def _check_canonical_spellings(flattened: Mapping[str, str]) -> None:
    # A canonical word that is also an alias for something else would be
    # rewritten again on a second run.
    for alias, canonical in flattened.items():
        for word in canonical.split():
            target = flattened.get(word)
            if target is not None and target != word:
                raise KeywordTableError(
                    build_guidance_message(
                        what=f"Canonical '{canonical}' for alias '{alias}' reuses alias '{word}'.",
                        why=f"'{word}' is itself rewritten to '{target}', so output would not be stable.",
                        fix=f"Rename the alias '{word}'.",
                    ),
                    details={"alias": alias, "canonical": canonical, "conflict": word},
                )


@lru_cache(maxsize=1)
def default_keyword_table() -> KeywordTable:
    return build_keyword_table()


__all__ = ["Category", "KeywordTable", "build_keyword_table", "default_keyword_table"]
