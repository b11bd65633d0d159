"""Read-only settings for typetutor.

Settings come from an optional JSON file. A missing or broken file never
stops the app from starting; defaults are used instead.
"""
from __future__ import annotations
import json
import logging
import os
import sys
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional, Union

from app.errors import ConfigError
from services.text_generator import GeneratorKind

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "TYPETUTOR_CONFIG"


@dataclass(frozen=True)
class Settings:
    default_generator: GeneratorKind = GeneratorKind.RANDOM_WORDS
    word_count: int = 25
    sentence_count: int = 3
    mixed_case_count: int = 25
    time_limit_seconds: float = 60.0
    tick_ms: int = 100
    theme: str = "Monkeytype Dark"

    def count_for(self, kind: GeneratorKind) -> int:
        if kind is GeneratorKind.SENTENCES:
            return self.sentence_count
        if kind is GeneratorKind.MIXED_CASE:
            return self.mixed_case_count
        return self.word_count


def get_config_path() -> Path:
    """Platform-appropriate config file path, overridable via TYPETUTOR_CONFIG."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override)
    if sys.platform == "win32":
        base = os.environ.get("LOCALAPPDATA", os.path.expanduser("~"))
        config_dir = Path(base) / "Typetutor"
    elif sys.platform == "darwin":
        config_dir = Path.home() / "Library" / "Application Support" / "Typetutor"
    else:
        xdg_config = os.environ.get("XDG_CONFIG_HOME", os.path.join(os.path.expanduser("~"), ".config"))
        config_dir = Path(xdg_config) / "typetutor"
    return config_dir / "config.json"


def _int_at_least(d: Dict[str, Any], key: str, minimum: int) -> int:
    value = d[key]
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"{key} must be an integer, got {value!r}")
    if value < minimum:
        raise ConfigError(f"{key} must be >= {minimum}, got {value}")
    return value


def settings_from_dict(d: Dict[str, Any]) -> Settings:
    """Validate a raw mapping into Settings. Unknown keys are ignored."""
    if not isinstance(d, dict):
        raise ConfigError("Settings file must contain a JSON object")
    known = {f.name for f in fields(Settings)}
    values: Dict[str, Any] = {}
    for key in d:
        if key not in known:
            logger.debug("Ignoring unknown setting %r", key)
    if "default_generator" in d:
        values["default_generator"] = GeneratorKind.parse(d["default_generator"])
    for key in ("word_count", "sentence_count", "mixed_case_count"):
        if key in d:
            values[key] = _int_at_least(d, key, 1)
    if "tick_ms" in d:
        values["tick_ms"] = _int_at_least(d, "tick_ms", 10)
    if "time_limit_seconds" in d:
        limit = d["time_limit_seconds"]
        if isinstance(limit, bool) or not isinstance(limit, (int, float)) or limit < 0:
            raise ConfigError(f"time_limit_seconds must be a number >= 0, got {limit!r}")
        values["time_limit_seconds"] = float(limit)
    if "theme" in d:
        if not isinstance(d["theme"], str) or not d["theme"].strip():
            raise ConfigError("theme must be a non-empty string")
        values["theme"] = d["theme"].strip()
    return replace(Settings(), **values)


def load_settings(path: Optional[Union[str, Path]] = None) -> Settings:
    """Load settings from disk, falling back to defaults on any problem."""
    config_path = Path(path) if path is not None else get_config_path()
    if not config_path.exists():
        return Settings()
    try:
        data = json.loads(config_path.read_text(encoding="utf-8"))
        return settings_from_dict(data)
    except (ConfigError, json.JSONDecodeError, OSError) as e:
        logger.warning("Ignoring settings file %s: %s", config_path, e)
        return Settings()
