"""Configuration loading for ClassLoom.

Reads ``config/classloom.yaml`` (or ``$CLASSLOOM_CONFIG_DIR/classloom.yaml``),
applies environment overrides, and validates the result into a
ClassLoomConfig. Loaded values are cached until reload_configs() is called.
"""

import copy
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError, field_validator

from ..uml_parser.utils import DEFAULT_NOTATION, SUPPORTED_NOTATIONS

load_dotenv()

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = "classloom.yaml"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# Environment variable → (section path, key)
_ENV_OVERRIDES = {
    "CLASSLOOM_NOTATION": (("classloom",), "notation"),
    "CLASSLOOM_LOG_LEVEL": (("classloom",), "log_level"),
    "CLASSLOOM_JSON_INDENT": (("classloom", "output"), "json_indent"),
}

# Cache for the parsed YAML document, keyed by file path
_config_cache: Dict[str, Dict[str, Any]] = {}


class ConfigError(ValueError):
    """Raised when a configuration file cannot be read or validated."""


class ClassLoomConfig(BaseModel):
    """Validated runtime configuration."""
    notation: str = Field(DEFAULT_NOTATION, description="Diagram notation to parse")
    log_level: str = Field("INFO", description="Root logging level")
    json_indent: Optional[int] = Field(2, ge=0, description="Indent for JSON output, None for compact")

    @field_validator("notation")
    @classmethod
    def _check_notation(cls, value: str) -> str:
        if value not in SUPPORTED_NOTATIONS:
            raise ValueError(f"unsupported notation {value!r}, expected one of {list(SUPPORTED_NOTATIONS)}")
        return value

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"unknown log level {value!r}")
        return level


def get_config_path() -> Path:
    """Return the directory holding classloom.yaml."""
    override = os.getenv("CLASSLOOM_CONFIG_DIR")
    if override:
        return Path(override)
    return Path(__file__).parent.parent.parent.parent / "config"


def load_unified_config(config_file: Union[str, Path, None] = None) -> Dict[str, Any]:
    """Load the raw YAML configuration document.

    A missing file is not an error: an empty document is returned and
    defaults apply. Callers receive a copy of the cached document.

    Raises:
        ConfigError: If the file exists but cannot be read or parsed
    """
    path = Path(config_file) if config_file else get_config_path() / CONFIG_FILE_NAME
    key = str(path)

    if key in _config_cache:
        return copy.deepcopy(_config_cache[key])

    if not path.exists():
        logger.warning(f"{CONFIG_FILE_NAME} not found at {path}, using defaults")
        _config_cache[key] = {}
        return {}

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Cannot load config {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Config {path} must be a mapping, got {type(data).__name__}")

    logger.debug(f"Loaded config from {path}")
    _config_cache[key] = data
    return copy.deepcopy(data)


def get_config_value(*keys: str, default: Any = None, config_file: Union[str, Path, None] = None) -> Any:
    """Look up a nested value, e.g. get_config_value("classloom", "notation")."""
    node: Any = load_unified_config(config_file)
    for key in keys:
        if not isinstance(node, dict) or key not in node:
            return default
        node = node[key]
    return node


def _apply_env_overrides(section: Dict[str, Any]) -> Dict[str, Any]:
    merged = dict(section)
    output = merged.get("output") or {}
    if not isinstance(output, dict):
        raise ConfigError("'classloom.output' section must be a mapping")
    output = dict(output)

    for env_name, (path, key) in _ENV_OVERRIDES.items():
        value = os.getenv(env_name)
        if value is None:
            continue
        target = output if path[-1] == "output" else merged
        target[key] = value

    merged["output"] = output
    return merged


def load_config(config_file: Union[str, Path, None] = None) -> ClassLoomConfig:
    """Build a validated ClassLoomConfig from YAML plus environment.

    Raises:
        ConfigError: If the file is malformed or a value fails validation
    """
    section = get_config_value("classloom", default={}, config_file=config_file) or {}
    if not isinstance(section, dict):
        raise ConfigError("'classloom' section must be a mapping")

    section = _apply_env_overrides(section)
    values: Dict[str, Any] = {
        k: section[k] for k in ("notation", "log_level") if k in section
    }
    if "json_indent" in section["output"]:
        values["json_indent"] = section["output"]["json_indent"]

    try:
        return ClassLoomConfig(**values)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}") from e


def reload_configs() -> None:
    """Clear cached config documents so the next read hits the disk."""
    _config_cache.clear()
