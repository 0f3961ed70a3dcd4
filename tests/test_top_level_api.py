from __future__ import annotations

import nullscript


def test_top_level_helpers_delegate() -> None:
    assert nullscript.transpile("definitely ok = fr;") == "const ok = true;"
    assert nullscript.rewrite("pls ghost;") == "return undefined;"
    assert nullscript.validate("maybe a = 1;") is None
    assert nullscript.translate("x.ts:1:1 - error TS1434: Unexpected token.").line == 1
