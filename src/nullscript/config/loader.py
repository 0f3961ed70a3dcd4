from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

from nullscript.config.model import REPORT_FORMATS, ProjectConfig
from nullscript.errors.base import ConfigError
from nullscript.errors.guidance import build_guidance_message
from nullscript.rewrite.context import DECLARATION_CONTEXTS


_LOG = logging.getLogger("nullscript.config")

CONFIG_FILENAME = "nsconfig.json"
ENV_DECLARATION_CONTEXT = "NULLSCRIPT_DECLARATION_CONTEXT"

_ROOT_FIELDS = ("compilerOptions", "include", "exclude")
_COMPILER_FIELDS = ("rootDir", "outDir", "declarationContext", "reports")
_REPORTS_FIELDS = ("dir", "defaultFormat")


@dataclass(frozen=True)
class ConfigSource:
    kind: str
    path: str | None = None


def load_config(root: Path | str | None = None) -> ProjectConfig:
    config, _ = resolve_config(root)
    return config


def resolve_config(root: Path | str | None = None) -> tuple[ProjectConfig, list[ConfigSource]]:
    config = ProjectConfig()
    sources: list[ConfigSource] = []
    if root is not None:
        config_path = Path(root).resolve() / CONFIG_FILENAME
        if config_path.exists():
            data = parse_config_text(config_path.read_text(encoding="utf-8"), config_path)
            apply_config_data(config, data)
            sources.append(ConfigSource(kind="json", path=config_path.as_posix()))
            _LOG.debug("loaded %s", config_path)
        else:
            _LOG.debug("no %s under %s, using defaults", CONFIG_FILENAME, config_path.parent)
    if apply_env_overrides(config):
        sources.append(ConfigSource(kind="env", path=None))
    return config, sources


def parse_config_text(text: str, path: Path | None = None) -> Dict[str, Any]:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as err:
        raise ConfigError(
            build_guidance_message(
                what=f"Invalid JSON format in {CONFIG_FILENAME}.",
                why=err.msg,
                fix="Fix the JSON syntax or regenerate the file with the default layout.",
            ),
            line=err.lineno,
            column=err.colno,
            file_path=path,
        ) from err
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a JSON object.", file_path=path)
    return data


def apply_config_data(config: ProjectConfig, data: Dict[str, Any]) -> None:
    _reject_unknown(data, _ROOT_FIELDS, CONFIG_FILENAME)
    if "compilerOptions" in data:
        _apply_compiler_options(config, _require_object(data["compilerOptions"], "compilerOptions"))
    if "include" in data:
        config.include = _string_list(data["include"], "include")
        if not config.include:
            raise ConfigError("include must list at least one pattern.")
    if "exclude" in data:
        config.exclude = _string_list(data["exclude"], "exclude")


def apply_env_overrides(config: ProjectConfig) -> bool:
    value = os.getenv(ENV_DECLARATION_CONTEXT)
    if not value:
        return False
    value = value.strip().lower()
    if value not in DECLARATION_CONTEXTS:
        raise ConfigError(
            f"{ENV_DECLARATION_CONTEXT} must be one of: {', '.join(DECLARATION_CONTEXTS)}. Got: '{value}'"
        )
    config.compiler_options.declaration_context = value
    return True


def config_to_json(config: ProjectConfig) -> str:
    options = config.compiler_options
    payload = {
        "compilerOptions": {
            "rootDir": options.root_dir,
            "outDir": options.out_dir,
            "declarationContext": options.declaration_context,
            "reports": {
                "dir": options.reports.dir,
                "defaultFormat": options.reports.default_format,
            },
        },
        "include": list(config.include),
        "exclude": list(config.exclude),
    }
    return json.dumps(payload, indent=2)


def _apply_compiler_options(config: ProjectConfig, table: Dict[str, Any]) -> None:
    _reject_unknown(table, _COMPILER_FIELDS, "compilerOptions")
    options = config.compiler_options
    if "rootDir" in table:
        options.root_dir = _non_empty(table["rootDir"], "compilerOptions.rootDir")
    if "outDir" in table:
        options.out_dir = _non_empty(table["outDir"], "compilerOptions.outDir")
    if "declarationContext" in table:
        mode = _non_empty(table["declarationContext"], "compilerOptions.declarationContext")
        if mode not in DECLARATION_CONTEXTS:
            raise ConfigError(
                f"compilerOptions.declarationContext must be one of: {', '.join(DECLARATION_CONTEXTS)}. "
                f"Got: '{mode}'"
            )
        options.declaration_context = mode
    if "reports" in table:
        reports = _require_object(table["reports"], "compilerOptions.reports")
        _reject_unknown(reports, _REPORTS_FIELDS, "reports")
        if "dir" in reports:
            options.reports.dir = _non_empty(reports["dir"], "compilerOptions.reports.dir")
        if "defaultFormat" in reports:
            fmt = _non_empty(reports["defaultFormat"], "compilerOptions.reports.defaultFormat")
            if fmt not in REPORT_FORMATS:
                raise ConfigError(
                    f"compilerOptions.reports.defaultFormat must be one of: {', '.join(REPORT_FORMATS)}. "
                    f"Got: '{fmt}'"
                )
            options.reports.default_format = fmt


def _reject_unknown(table: Dict[str, Any], allowed: tuple[str, ...], where: str) -> None:
    for key in table:
        if key not in allowed:
            quoted = ", ".join(f"'{name}'" for name in allowed)
            raise ConfigError(
                build_guidance_message(
                    what=f"Unknown field '{key}' in {where}.",
                    why=f"Only {quoted} are allowed.",
                    fix=f"Remove '{key}' from {where}.",
                ),
                details={"field": key, "allowed": list(allowed)},
            )


def _require_object(value: Any, name: str) -> Dict[str, Any]:
    if not isinstance(value, dict):
        raise ConfigError(f"{name} must be a JSON object.")
    return value


def _non_empty(value: Any, name: str) -> str:
    if not isinstance(value, str):
        raise ConfigError(f"{name} must be a string.")
    if not value.strip():
        raise ConfigError(f"{name} cannot be empty.")
    return value


def _string_list(value: Any, name: str) -> list[str]:
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise ConfigError(f"{name} must be a list of strings.")
    for item in value:
        if not item.strip():
            raise ConfigError(f"{name} cannot contain empty patterns.")
    return list(value)


__all__ = [
    "CONFIG_FILENAME",
    "ConfigSource",
    "ENV_DECLARATION_CONTEXT",
    "apply_config_data",
    "apply_env_overrides",
    "config_to_json",
    "load_config",
    "parse_config_text",
    "resolve_config",
]
