from .config_loader import (
    ClassLoomConfig,
    ConfigError,
    get_config_path,
    get_config_value,
    load_config,
    load_unified_config,
    reload_configs,
)

__all__ = [
    "ClassLoomConfig",
    "ConfigError",
    "get_config_path",
    "get_config_value",
    "load_config",
    "load_unified_config",
    "reload_configs",
]
