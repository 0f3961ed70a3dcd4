from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional

from nullscript.errors.base import ConfigError
from nullscript.lang.table import KeywordTable, default_keyword_table
from nullscript.lexer.scanner import scan
from nullscript.rewrite.context import DECLARATION_CONTEXTS, INDENT, build_context
from nullscript.rewrite.passes import function_declaration_pass, multi_word_pass, single_token_pass
from nullscript.rewrite.tokens import RewriteToken, classify, render


_LOG = logging.getLogger("nullscript.rewrite")


@dataclass(frozen=True)
class RewriteOptions:
    declaration_context: str = INDENT

    def __post_init__(self) -> None:
        if self.declaration_context not in DECLARATION_CONTEXTS:
            raise ConfigError(
                f"declaration_context must be one of: {', '.join(DECLARATION_CONTEXTS)}. "
                f"Got: '{self.declaration_context}'"
            )


class Rewriter:
    """Rewrites alias vocabulary into canonical keywords.

    Passes run in a fixed order: function declarations, single tokens,
    then multi-word phrases. A span rewritten by one pass is never
    revisited, and string, template and comment text is never touched.
    """

    def __init__(self, table: Optional[KeywordTable] = None, options: Optional[RewriteOptions] = None) -> None:
        self.table = table or default_keyword_table()
        self.options = options or RewriteOptions()

    def tokens(self, source: str) -> List[RewriteToken]:
        return classify(scan(source), self.table)

    def rewrite(self, source: str) -> str:
        tokens = self.tokens(source)
        context = build_context(self.options.declaration_context, source, tokens)
        tokens, declarations = function_declaration_pass(tokens, self.table, context)
        tokens, singles = single_token_pass(tokens)
        tokens, phrases = multi_word_pass(tokens)
        _LOG.debug(
            "rewrite: %d function declarations, %d single tokens, %d phrases",
            declarations,
            singles,
            phrases,
        )
        return render(tokens)


def rewrite(
    source: str,
    *,
    table: Optional[KeywordTable] = None,
    options: Optional[RewriteOptions] = None,
) -> str:
    return Rewriter(table, options).rewrite(source)


__all__ = ["RewriteOptions", "Rewriter", "rewrite"]
