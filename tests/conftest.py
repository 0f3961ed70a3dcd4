import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parent.parent
SRC = ROOT / "src"
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from nullscript.lang.table import default_keyword_table  # noqa: E402
from nullscript.rewrite.engine import RewriteOptions, Rewriter  # noqa: E402


def rewrite_source(code: str, mode: str = "indent") -> str:
    """Rewrite alias source with the default table."""
    return Rewriter(default_keyword_table(), RewriteOptions(declaration_context=mode)).rewrite(code)


@pytest.fixture
def table():
    return default_keyword_table()


@pytest.fixture(autouse=True)
def _clear_declaration_env(monkeypatch):
    monkeypatch.delenv("NULLSCRIPT_DECLARATION_CONTEXT", raising=False)
