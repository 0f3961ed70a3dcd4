from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from nullscript.lang.table import KeywordTable
from nullscript.lexer.tokens import COMMENT, LITERAL_TYPES, PUNCT, SPACE, WORD, Token


ALIAS = "Alias"
MULTI_WORD_ALIAS = "MultiWordAlias"
FUNCTION_DECL_ALIAS = "FunctionDeclAlias"
STRING_LITERAL = "StringLiteral"
COMMENT_SPAN = "Comment"
PLAIN_TEXT = "PlainText"

ALIAS_KINDS = frozenset({ALIAS, MULTI_WORD_ALIAS, FUNCTION_DECL_ALIAS})


@dataclass(frozen=True)
class RewriteToken:
    kind: str
    text: str
    source: Token
    category: Optional[str] = None
    alias: Optional[str] = None
    canonical: Optional[str] = None
    resolved: bool = False

    @property
    def is_alias(self) -> bool:
        return self.kind in ALIAS_KINDS

    @property
    def is_space(self) -> bool:
        return self.source.type == SPACE

    @property
    def is_word(self) -> bool:
        return self.source.type == WORD

    def is_punct(self, text: str) -> bool:
        return self.source.type == PUNCT and self.source.text == text


def classify(tokens: List[Token], table: KeywordTable) -> List[RewriteToken]:
    categories = _alias_categories(table)
    classified: List[RewriteToken] = []
    for idx, token in enumerate(tokens):
        if token.type in LITERAL_TYPES:
            classified.append(RewriteToken(STRING_LITERAL, token.text, token))
            continue
        if token.type == COMMENT:
            classified.append(RewriteToken(COMMENT_SPAN, token.text, token))
            continue
        if token.type != WORD or _is_property_name(tokens, idx):
            classified.append(RewriteToken(PLAIN_TEXT, token.text, token))
            continue
        word = token.text
        if word in table.function_declarations:
            kind = FUNCTION_DECL_ALIAS
        elif word in table.multi_word:
            kind = MULTI_WORD_ALIAS
        elif word in table.aliases:
            kind = ALIAS
        else:
            classified.append(RewriteToken(PLAIN_TEXT, token.text, token))
            continue
        classified.append(
            RewriteToken(
                kind,
                token.text,
                token,
                category=categories.get(word),
                alias=word,
                canonical=table.aliases[word],
            )
        )
    return classified


def render(tokens: List[RewriteToken]) -> str:
    return "".join(token.text for token in tokens)


def _is_property_name(tokens: List[Token], idx: int) -> bool:
    if idx == 0:
        return False
    prev = tokens[idx - 1]
    if prev.type != PUNCT:
        return False
    if prev.text == "#":
        return True
    if prev.text != ".":
        return False
    # `...spread` is not member access.
    return not (idx >= 2 and tokens[idx - 2].type == PUNCT and tokens[idx - 2].text == ".")


def _alias_categories(table: KeywordTable) -> dict[str, str]:
    owners: dict[str, str] = {}
    for category in table.categories():
        for alias in category.entries:
            owners[alias] = category.slug
    return owners


__all__ = [
    "ALIAS",
    "ALIAS_KINDS",
    "COMMENT_SPAN",
    "FUNCTION_DECL_ALIAS",
    "MULTI_WORD_ALIAS",
    "PLAIN_TEXT",
    "RewriteToken",
    "STRING_LITERAL",
    "classify",
    "render",
]
