from __future__ import annotations

from nullscript.rewrite.engine import RewriteOptions, Rewriter, rewrite

__all__ = ["RewriteOptions", "Rewriter", "rewrite"]
