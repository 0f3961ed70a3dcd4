from __future__ import annotations

from dataclasses import dataclass, field

from nullscript.rewrite.context import INDENT
from nullscript.rewrite.engine import RewriteOptions


REPORT_FORMATS = ("html", "json", "text")


@dataclass
class ReportsConfig:
    dir: str = "reports"
    default_format: str = "html"


@dataclass
class CompilerOptions:
    root_dir: str = "./src"
    out_dir: str = "./dist"
    declaration_context: str = INDENT
    reports: ReportsConfig = field(default_factory=ReportsConfig)


@dataclass
class ProjectConfig:
    compiler_options: CompilerOptions = field(default_factory=CompilerOptions)
    include: list[str] = field(default_factory=lambda: ["src/**/*.ns"])
    exclude: list[str] = field(default_factory=lambda: ["node_modules", "dist", "reports"])

    def rewrite_options(self) -> RewriteOptions:
        return RewriteOptions(declaration_context=self.compiler_options.declaration_context)


__all__ = ["CompilerOptions", "ProjectConfig", "REPORT_FORMATS", "ReportsConfig"]
