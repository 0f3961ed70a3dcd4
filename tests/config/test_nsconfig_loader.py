from __future__ import annotations

import json

import pytest

from nullscript.config.loader import CONFIG_FILENAME, ConfigSource, config_to_json, load_config, resolve_config
from nullscript.config.model import ProjectConfig
from nullscript.errors.base import ConfigError


def _write(tmp_path, payload) -> None:
    text = payload if isinstance(payload, str) else json.dumps(payload)
    (tmp_path / CONFIG_FILENAME).write_text(text, encoding="utf-8")


def test_defaults_without_file(tmp_path) -> None:
    config, sources = resolve_config(tmp_path)
    assert sources == []
    assert config.compiler_options.root_dir == "./src"
    assert config.compiler_options.out_dir == "./dist"
    assert config.compiler_options.declaration_context == "indent"
    assert config.compiler_options.reports.default_format == "html"
    assert config.include == ["src/**/*.ns"]
    assert config.exclude == ["node_modules", "dist", "reports"]


def test_file_values_are_applied(tmp_path) -> None:
    _write(
        tmp_path,
        {
            "compilerOptions": {
                "rootDir": "./lib",
                "outDir": "./out",
                "declarationContext": "braces",
                "reports": {"dir": "r", "defaultFormat": "json"},
            },
            "include": ["lib/**/*.ns"],
            "exclude": [],
        },
    )
    config, sources = resolve_config(tmp_path)
    assert sources == [ConfigSource(kind="json", path=(tmp_path / CONFIG_FILENAME).resolve().as_posix())]
    assert config.compiler_options.root_dir == "./lib"
    assert config.compiler_options.reports.dir == "r"
    assert config.include == ["lib/**/*.ns"]
    assert config.exclude == []
    assert config.rewrite_options().declaration_context == "braces"


@pytest.mark.parametrize(
    "payload",
    [
        {"compilerOptions": {}, "watch": True},
        {"compilerOptions": {"target": "es2020"}},
        {"compilerOptions": {"reports": {"color": "red"}}},
        {"compilerOptions": {"rootDir": "  "}},
        {"compilerOptions": {"reports": {"defaultFormat": "pdf"}}},
        {"compilerOptions": {"declarationContext": "tabs"}},
        {"include": []},
        {"include": "src"},
        ["not", "an", "object"],
    ],
)
def test_strict_schema_rejects_bad_files(tmp_path, payload) -> None:
    _write(tmp_path, payload)
    with pytest.raises(ConfigError):
        load_config(tmp_path)


def test_invalid_json_reports_location(tmp_path) -> None:
    _write(tmp_path, '{\n  "include": [,]\n}')
    with pytest.raises(ConfigError) as excinfo:
        load_config(tmp_path)
    err = excinfo.value
    assert err.message.startswith("Invalid JSON format in nsconfig.json.")
    assert err.line == 2


def test_unknown_field_names_allowed_fields(tmp_path) -> None:
    _write(tmp_path, {"watch": True})
    with pytest.raises(ConfigError) as excinfo:
        load_config(tmp_path)
    assert excinfo.value.details == {"field": "watch", "allowed": ["compilerOptions", "include", "exclude"]}


def test_env_override_wins(tmp_path, monkeypatch) -> None:
    monkeypatch.setenv("NULLSCRIPT_DECLARATION_CONTEXT", "BRACES")
    config, sources = resolve_config(tmp_path)
    assert config.compiler_options.declaration_context == "braces"
    assert sources == [ConfigSource(kind="env", path=None)]


def test_env_override_is_validated(monkeypatch) -> None:
    monkeypatch.setenv("NULLSCRIPT_DECLARATION_CONTEXT", "spaces")
    with pytest.raises(ConfigError):
        load_config()


def test_config_to_json_round_trips(tmp_path) -> None:
    config = ProjectConfig()
    config.compiler_options.out_dir = "./build"
    _write(tmp_path, config_to_json(config))
    assert load_config(tmp_path) == config
