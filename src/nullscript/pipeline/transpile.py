from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional, Tuple

from nullscript.diagnostics.translate import translate
from nullscript.lang.table import KeywordTable, default_keyword_table
from nullscript.pipeline.toolchain import Toolchain
from nullscript.rewrite.engine import RewriteOptions, Rewriter
from nullscript.validation.validator import validate


_LOG = logging.getLogger("nullscript.pipeline")


@dataclass(frozen=True)
class TranspileResult:
    input_path: str
    output_text: str


def transpile(
    source: str,
    file_path: Optional[str | Path] = None,
    *,
    table: Optional[KeywordTable] = None,
    options: Optional[RewriteOptions] = None,
) -> str:
    table = table or default_keyword_table()
    validate(source, file_path, table=table)
    return Rewriter(table, options).rewrite(source)


def build_unit(
    source: str,
    toolchain: Toolchain,
    file_path: Optional[str | Path] = None,
    *,
    table: Optional[KeywordTable] = None,
    options: Optional[RewriteOptions] = None,
) -> str:
    """Transpile one unit and hand it to the toolchain exactly once.

    A rejected unit raises the translated diagnostic.
    """
    table = table or default_keyword_table()
    output = transpile(source, file_path, table=table, options=options)
    outcome = toolchain.compile(output)
    if outcome.ok:
        return output
    _LOG.debug("toolchain rejected %s", file_path or "<source>")
    raise translate(outcome.diagnostics, file_path, table=table)


def transpile_units(
    units: Iterable[Tuple[str | Path, str]],
    *,
    table: Optional[KeywordTable] = None,
    options: Optional[RewriteOptions] = None,
) -> List[TranspileResult]:
    table = table or default_keyword_table()
    rewriter = Rewriter(table, options)
    results: List[TranspileResult] = []
    for input_path, source in units:
        validate(source, input_path, table=table)
        results.append(TranspileResult(input_path=str(input_path), output_text=rewriter.rewrite(source)))
    _LOG.debug("transpiled %d units", len(results))
    return results


__all__ = ["TranspileResult", "build_unit", "transpile", "transpile_units"]
