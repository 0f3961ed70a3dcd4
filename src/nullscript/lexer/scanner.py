from __future__ import annotations

from bisect import bisect_right
from typing import List

from nullscript.lexer.tokens import (
    COMMENT,
    OPAQUE_TYPES,
    PUNCT,
    REGEX,
    SPACE,
    STRING,
    TEMPLATE,
    WORD,
    Token,
    is_identifier_char,
)


# A `/` after one of these starts a regex literal rather than a division.
_REGEX_AFTER_PUNCT = frozenset("(,=:[!&|?{};<>~^")
_REGEX_AFTER_WORDS = frozenset(
    {
        "return",
        "typeof",
        "instanceof",
        "in",
        "of",
        "new",
        "delete",
        "void",
        "throw",
        "case",
        "yield",
        "await",
        "pls",
        "fresh",
        "remove",
        "whenits",
        "and",
        "or",
        "not",
        "is",
        "aint",
    }
)


class Scanner:
    """Splits source into classified spans without dropping a single character.

    Joining the text of every returned token reproduces the input exactly.
    Template literal interpolations (``${ ... }``) are scanned as code.
    """

    def __init__(self, source: str) -> None:
        self.source = source
        self._line_starts = [0]
        for idx, ch in enumerate(source):
            if ch == "\n":
                self._line_starts.append(idx + 1)

    def tokenize(self) -> List[Token]:
        tokens: List[Token] = []
        self._scan_code(0, tokens, nested=False)
        return tokens

    def position(self, offset: int) -> tuple[int, int]:
        line_idx = bisect_right(self._line_starts, offset) - 1
        return line_idx + 1, offset - self._line_starts[line_idx] + 1

    def _emit(self, tokens: List[Token], token_type: str, start: int, end: int) -> None:
        if end <= start:
            return
        line, column = self.position(start)
        tokens.append(Token(token_type, self.source[start:end], start, line, column))

    def _scan_code(self, i: int, tokens: List[Token], *, nested: bool) -> int:
        src = self.source
        depth = 0
        while i < len(src):
            ch = src[i]
            if ch.isspace():
                end = i
                while end < len(src) and src[end].isspace():
                    end += 1
                self._emit(tokens, SPACE, i, end)
                i = end
                continue
            if is_identifier_char(ch):
                end = i
                while end < len(src) and is_identifier_char(src[end]):
                    end += 1
                self._emit(tokens, WORD, i, end)
                i = end
                continue
            if ch == "/" and src.startswith("//", i):
                end = src.find("\n", i)
                end = len(src) if end == -1 else end
                self._emit(tokens, COMMENT, i, end)
                i = end
                continue
            if ch == "/" and src.startswith("/*", i):
                end = src.find("*/", i + 2)
                end = len(src) if end == -1 else end + 2
                self._emit(tokens, COMMENT, i, end)
                i = end
                continue
            if ch == "/" and _regex_allowed(tokens):
                end = self._read_regex(i)
                if end is not None:
                    self._emit(tokens, REGEX, i, end)
                    i = end
                    continue
            if ch in "'\"":
                end = self._read_quoted(i, ch)
                self._emit(tokens, STRING, i, end)
                i = end
                continue
            if ch == "`":
                i = self._scan_template(i, tokens)
                continue
            if nested:
                if ch == "{":
                    depth += 1
                elif ch == "}":
                    if depth == 0:
                        return i
                    depth -= 1
            self._emit(tokens, PUNCT, i, i + 1)
            i += 1
        return i

    def _read_quoted(self, start: int, quote: str) -> int:
        src = self.source
        i = start + 1
        while i < len(src):
            ch = src[i]
            if ch == "\\":
                i += 2
                continue
            if ch == quote:
                return i + 1
            if ch == "\n":
                # Unterminated: stop before the newline so the next line scans as code.
                return i
            i += 1
        return len(src)

    def _read_regex(self, start: int) -> int | None:
        src = self.source
        i = start + 1
        in_class = False
        while i < len(src):
            ch = src[i]
            if ch == "\n":
                return None
            if ch == "\\":
                i += 2
                continue
            if ch == "[":
                in_class = True
            elif ch == "]":
                in_class = False
            elif ch == "/" and not in_class:
                i += 1
                while i < len(src) and is_identifier_char(src[i]):
                    i += 1
                return i
            i += 1
        return None

    def _scan_template(self, start: int, tokens: List[Token]) -> int:
        src = self.source
        chunk_start = start
        i = start + 1
        while i < len(src):
            ch = src[i]
            if ch == "\\":
                i += 2
                continue
            if ch == "`":
                self._emit(tokens, TEMPLATE, chunk_start, i + 1)
                return i + 1
            if ch == "$" and src.startswith("${", i):
                self._emit(tokens, TEMPLATE, chunk_start, i + 2)
                i = self._scan_code(i + 2, tokens, nested=True)
                # i now points at the closing brace (or the end of input).
                chunk_start = i
                i += 1
                continue
            i += 1
        self._emit(tokens, TEMPLATE, chunk_start, len(src))
        return len(src)


def _regex_allowed(tokens: List[Token]) -> bool:
    for token in reversed(tokens):
        if token.type in (SPACE, COMMENT):
            continue
        if token.type == PUNCT:
            return token.text in _REGEX_AFTER_PUNCT
        if token.type == WORD:
            return token.text in _REGEX_AFTER_WORDS
        if token.type == TEMPLATE:
            return token.text.endswith("${")
        return False
    return True


def scan(source: str) -> List[Token]:
    return Scanner(source).tokenize()


def blank_literals(source: str, tokens: List[Token] | None = None) -> str:
    """Return ``source`` with literal and comment text replaced by spaces.

    Newlines are kept so line numbers stay aligned with the input.
    """
    tokens = tokens if tokens is not None else scan(source)
    parts: List[str] = []
    for token in tokens:
        if token.type in OPAQUE_TYPES:
            parts.append("".join("\n" if ch == "\n" else " " for ch in token.text))
        else:
            parts.append(token.text)
    return "".join(parts)


__all__ = ["Scanner", "blank_literals", "scan"]
