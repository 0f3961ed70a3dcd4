from nullscript.config.loader import CONFIG_FILENAME, ConfigSource, config_to_json, load_config, resolve_config
from nullscript.config.model import CompilerOptions, ProjectConfig, ReportsConfig

__all__ = [
    "CONFIG_FILENAME",
    "CompilerOptions",
    "ConfigSource",
    "ProjectConfig",
    "ReportsConfig",
    "config_to_json",
    "load_config",
    "resolve_config",
]
