from __future__ import annotations

from typing import List, Protocol

from nullscript.lang.keywords import CLASS_ALIAS
from nullscript.rewrite.tokens import COMMENT_SPAN, RewriteToken


INDENT = "indent"
BRACES = "braces"
DECLARATION_CONTEXTS = (INDENT, BRACES)

_CLASS_WORDS = frozenset({CLASS_ALIAS, "class"})
# A `{` right after one of these opens an object literal, not a block.
_OBJECT_OPENERS = frozenset({"=", "(", ",", ":", "[", "?", "pls", "return"})
_BLOCK = "block"
_CLASS_BODY = "class"
_OBJECT = "object"


class DeclarationContext(Protocol):
    def is_member(self, index: int) -> bool:
        ...


class IndentContext:
    """Treats any declaration on an indented line as a class member."""

    def __init__(self, source: str, tokens: List[RewriteToken]) -> None:
        self.source = source
        self.tokens = tokens

    def is_member(self, index: int) -> bool:
        offset = self.tokens[index].source.offset
        line_start = self.source.rfind("\n", 0, offset) + 1
        line = self.source[line_start:offset]
        return len(line) - len(line.lstrip(" \t")) > 0


class BraceContext:
    """Tracks open `{` blocks and reports members of class bodies or object literals."""

    def __init__(self, source: str, tokens: List[RewriteToken]) -> None:
        self.source = source
        self.tokens = tokens
        self._innermost = self._walk(tokens)

    def is_member(self, index: int) -> bool:
        return self._innermost[index] in (_CLASS_BODY, _OBJECT)

    @staticmethod
    def _walk(tokens: List[RewriteToken]) -> List[str | None]:
        stack: List[str] = []
        innermost: List[str | None] = []
        pending_class = False
        previous = ""
        for token in tokens:
            innermost.append(stack[-1] if stack else None)
            if token.is_space or token.kind == COMMENT_SPAN:
                continue
            text = token.source.text
            if token.is_word and text in _CLASS_WORDS:
                pending_class = True
            elif token.is_punct("{"):
                if pending_class:
                    stack.append(_CLASS_BODY)
                    pending_class = False
                elif previous in _OBJECT_OPENERS:
                    stack.append(_OBJECT)
                else:
                    stack.append(_BLOCK)
            elif token.is_punct("}"):
                if stack:
                    stack.pop()
            elif token.is_punct(";"):
                pending_class = False
            previous = text
        return innermost


def build_context(mode: str, source: str, tokens: List[RewriteToken]) -> DeclarationContext:
    if mode == BRACES:
        return BraceContext(source, tokens)
    return IndentContext(source, tokens)


__all__ = [
    "BRACES",
    "BraceContext",
    "DECLARATION_CONTEXTS",
    "DeclarationContext",
    "INDENT",
    "IndentContext",
    "build_context",
]
