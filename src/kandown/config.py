"""Tool settings read from the `kandown` key of a board's front-matter."""

from typing import Any

CONFIG_KEY = "kandown"

DEFAULTS: dict[str, Any] = {
    "default-view": None,
    "strict-display": False,
}


def _python_key(key: str) -> str:
    """Convert YAML-style key (hyphenated) to Python-style (underscored)."""
    return key.replace("-", "_")


def _config_key(python_key: str) -> str:
    """Convert Python-style key (underscored) to YAML-style (hyphenated)."""
    return python_key.replace("_", "-")


def _coerce_value(key: str, raw: Any) -> Any:
    """Type-coerce a setting using the type of its default."""
    if key not in DEFAULTS:
        return raw
    default = DEFAULTS[key]
    if isinstance(default, bool):
        if isinstance(raw, bool):
            return raw
        return str(raw).lower() in ("true", "yes", "1")
    if raw is None:
        return None
    return str(raw)


def read_config(meta: dict[str, Any] | None) -> dict[str, Any]:
    """Read settings into a {python_key: value} dict.

    Missing keys take their defaults; keys unknown to DEFAULTS pass
    through unchanged.
    """
    section = meta.get(CONFIG_KEY) if isinstance(meta, dict) else None
    if not isinstance(section, dict):
        section = {}

    result = {_python_key(key): default for key, default in DEFAULTS.items()}
    for key, raw in section.items():
        key = _config_key(str(key))
        result[_python_key(key)] = _coerce_value(key, raw)
    return result
