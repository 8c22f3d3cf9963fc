# Lazy imports to avoid triggering the config dependency chain.
# This allows targeted imports like `from classloom.core.uml_parser import parse_text`
# without loading YAML, dotenv or pydantic.

__all__ = [
    "ClassLoom",
    "ClassLoomConfig",
    "ConfigError",
    "load_config",
    "parse_text",
]

_IMPORT_MAP = {
    "ClassLoom": ".builder",
    "ClassLoomConfig": ".config",
    "ConfigError": ".config",
    "load_config": ".config",
    "parse_text": ".uml_parser",
}


def __getattr__(name):
    if name in _IMPORT_MAP:
        import importlib
        module = importlib.import_module(_IMPORT_MAP[name], __package__)
        return getattr(module, name)
    raise AttributeError(f"module 'classloom.core' has no attribute {name}")
