from __future__ import annotations

from dataclasses import replace
from typing import List, Optional

from nullscript.lang.keywords import ASYNC_FUNCTION_ALIAS, DELETE_ALIAS
from nullscript.lang.table import KeywordTable
from nullscript.lexer.tokens import is_identifier_start
from nullscript.rewrite.context import DeclarationContext
from nullscript.rewrite.tokens import ALIAS, FUNCTION_DECL_ALIAS, MULTI_WORD_ALIAS, RewriteToken


def function_declaration_pass(
    tokens: List[RewriteToken],
    table: KeywordTable,
    context: DeclarationContext,
) -> tuple[List[RewriteToken], int]:
    out = list(tokens)
    count = 0
    async_canonical = table.function_declarations.get(ASYNC_FUNCTION_ALIAS)
    async_word = ASYNC_FUNCTION_ALIAS.split()[-1]
    for idx, token in enumerate(out):
        if token.kind != FUNCTION_DECL_ALIAS or token.resolved:
            continue
        name_idx = _word_after_space(out, idx)
        if name_idx is None:
            continue
        if async_canonical and out[name_idx].text == async_word:
            # `feels async` is always the two-word form, whatever the indentation.
            out[idx] = _resolved(token, async_canonical)
            for gap in range(idx + 1, name_idx + 1):
                out[gap] = _resolved(out[gap], "")
            count += 1
            continue
        if not _is_declaration(out, name_idx):
            continue
        if context.is_member(idx):
            out[idx] = _resolved(token, "")
            for gap in range(idx + 1, name_idx):
                out[gap] = _resolved(out[gap], "")
        else:
            out[idx] = _resolved(token, token.canonical or "")
            for gap in range(idx + 1, name_idx):
                out[gap] = _resolved(out[gap], " " if gap == idx + 1 else "")
        out[name_idx] = _resolved(out[name_idx], out[name_idx].text)
        count += 1

    # Fallback: bare aliases that do not introduce a named declaration.
    for idx, token in enumerate(out):
        if token.kind == FUNCTION_DECL_ALIAS and not token.resolved:
            out[idx] = _resolved(token, token.canonical or token.text)
            count += 1
    return out, count


def single_token_pass(tokens: List[RewriteToken]) -> tuple[List[RewriteToken], int]:
    out = list(tokens)
    count = 0
    for idx, token in enumerate(out):
        if token.kind != ALIAS or token.resolved:
            continue
        if token.alias == DELETE_ALIAS:
            operand_idx = _word_after_space(out, idx)
            if operand_idx is None or not is_identifier_start(out[operand_idx].text[0]):
                continue
            # The operand path stays in the stream and is rewritten like any other code.
            out[idx] = _resolved(token, token.canonical or token.text)
            for gap in range(idx + 1, operand_idx):
                out[gap] = _resolved(out[gap], " " if gap == idx + 1 else "")
            count += 1
            continue
        out[idx] = _resolved(token, token.canonical or token.text)
        count += 1
    return out, count


def multi_word_pass(tokens: List[RewriteToken]) -> tuple[List[RewriteToken], int]:
    out = list(tokens)
    count = 0
    for idx, token in enumerate(out):
        if token.kind != MULTI_WORD_ALIAS or token.resolved:
            continue
        if idx + 1 >= len(out) or not out[idx + 1].is_space or out[idx + 1].resolved:
            continue
        out[idx] = _resolved(token, token.canonical or token.text)
        out[idx + 1] = _resolved(out[idx + 1], " ")
        count += 1
    return out, count


def _resolved(token: RewriteToken, text: str) -> RewriteToken:
    return replace(token, text=text, resolved=True)


def _word_after_space(tokens: List[RewriteToken], idx: int) -> Optional[int]:
    nxt = idx + 1
    if nxt >= len(tokens) or not tokens[nxt].is_space:
        return None
    nxt += 1
    if nxt >= len(tokens) or not tokens[nxt].is_word:
        return None
    return nxt


def _is_declaration(tokens: List[RewriteToken], name_idx: int) -> bool:
    name = tokens[name_idx]
    if not is_identifier_start(name.text[0]):
        return False
    idx = _skip_space(tokens, name_idx + 1)
    if idx < len(tokens) and tokens[idx].is_punct("<"):
        idx = _skip_generics(tokens, idx)
        if idx is None:
            return False
        idx = _skip_space(tokens, idx)
    return idx < len(tokens) and tokens[idx].is_punct("(")


def _skip_space(tokens: List[RewriteToken], idx: int) -> int:
    while idx < len(tokens) and tokens[idx].is_space:
        idx += 1
    return idx


def _skip_generics(tokens: List[RewriteToken], idx: int) -> Optional[int]:
    depth = 0
    while idx < len(tokens):
        token = tokens[idx]
        if token.is_punct("<"):
            depth += 1
        elif token.is_punct(">") and not (idx > 0 and tokens[idx - 1].is_punct("=")):
            depth -= 1
            if depth == 0:
                return idx + 1
        elif token.is_punct(";"):
            return None
        idx += 1
    return None


__all__ = ["function_declaration_pass", "multi_word_pass", "single_token_pass"]
