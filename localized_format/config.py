"""Formatter settings, optionally loaded from a JSON, YAML or TOML file."""

import json
import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, cast

try:
    import yaml
except ImportError:
    yaml = None

try:
    import tomli
except ImportError:
    tomli = None


SECTION = "localized_format"


@dataclass(frozen=True)
class FormatterConfig:
    """
    Settings for :class:`~localized_format.engine.SubstitutionEngine`.

    Args:
        default_locale: Locale used when a call does not name one
        max_depth: Deepest allowed nesting of pluralization sub-templates
        cache_max_size: Number of parsed templates kept in memory
    """

    default_locale: str = "en"
    max_depth: int = 16
    cache_max_size: int = 2048

    def __post_init__(self):
        if not isinstance(self.default_locale, str) or not self.default_locale:
            raise ValueError("default_locale must be a non-empty string")
        for name in ("max_depth", "cache_max_size"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                raise ValueError(f"{name} must be a positive integer")

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "FormatterConfig":
        """Build a config from a plain mapping, ignoring unknown keys."""
        if isinstance(data.get(SECTION), dict):
            data = data[SECTION]

        known = {field.name for field in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            logging.warning("Ignoring unknown formatter settings: %s", ", ".join(unknown))
        return cls(**{key: value for key, value in data.items() if key in known})


def _load_path(path: Path) -> dict[str, Any]:
    suffix = path.suffix.lower()
    if suffix == ".json":
        with open(path, "r", encoding="utf-8") as f:
            return cast(dict[str, Any], json.load(f))
    if suffix in [".yaml", ".yml"]:
        if yaml is None:
            raise ImportError("PyYAML is required for YAML support. Install with: pip install pyyaml")
        with open(path, "r", encoding="utf-8") as f:
            return cast(dict[str, Any], yaml.safe_load(f) or {})
    if suffix == ".toml":
        if tomli is None:
            raise ImportError("tomli is required for TOML support. Install with: pip install tomli")
        with open(path, "rb") as f:
            return cast(dict[str, Any], tomli.load(f))
    raise ValueError(f"Unsupported file format: {suffix}. Supported formats: .json, .yaml, .yml, .toml")


def load_config(file_path: str | Path) -> FormatterConfig:
    """
    Load formatter settings from a file (JSON, YAML, or TOML).

    Settings may sit at the top level or under a ``localized_format`` table.

    Args:
        file_path: Path to the settings file

    Returns:
        The parsed settings
    """
    path = Path(file_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {file_path}")

    data = _load_path(path)
    if not isinstance(data, dict):
        raise ValueError(f"Config file {file_path} must contain a mapping")
    return FormatterConfig.from_dict(data)
