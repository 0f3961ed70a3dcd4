from nullscript.pipeline.toolchain import CompileOutcome, Toolchain
from nullscript.pipeline.transpile import TranspileResult, build_unit, transpile, transpile_units

__all__ = ["CompileOutcome", "Toolchain", "TranspileResult", "build_unit", "transpile", "transpile_units"]
