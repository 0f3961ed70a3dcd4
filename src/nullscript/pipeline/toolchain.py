from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class CompileOutcome:
    ok: bool
    diagnostics: str = ""


class Toolchain(Protocol):
    """External type checker that accepts canonical TypeScript text."""

    def compile(self, canonical_text: str) -> CompileOutcome:
        ...


__all__ = ["CompileOutcome", "Toolchain"]
