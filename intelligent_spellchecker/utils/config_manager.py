# config_manager.py - JSON config manager

from __future__ import annotations

import json
import logging
import os
from typing import Any, Dict, Iterator, Optional, Tuple

from typing_extensions import TypedDict

logger = logging.getLogger(__name__)

TIE_BREAKS = ("discovery", "alphabetic")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigError(ValueError):
    """Raised when a configuration value is invalid. Construction must not proceed."""


class ConfigData(TypedDict):
    dictionary_path: str
    fp_rate: float
    max_radius: int
    max_suggestions: int
    lowercase: bool
    tie_break: str
    parallel_build: bool
    log_level: str
    log_path: str


def default_config() -> ConfigData:
    return {
        "dictionary_path": "dictionary.txt",
        "fp_rate": 0.01,  # bloom filter target false-positive rate
        "max_radius": 2,  # largest edit distance searched for suggestions
        "max_suggestions": 5,  # shown per word by the cli, 0 = all
        "lowercase": True,
        "tie_break": "discovery",
        "parallel_build": True,
        "log_level": "WARNING",
        "log_path": "",  # empty = no log file
    }


def _cast(default: Any, val: Any) -> Any:
    """Cast val to the type of default. Strings like 'false'/'0' count as False for bools."""
    if isinstance(default, bool):
        if isinstance(val, str):
            low = val.strip().lower()
            if low in ("1", "true", "yes", "on"):
                return True
            if low in ("0", "false", "no", "off"):
                return False
            raise ConfigError(f"not a boolean: {val!r}")
        return bool(val)
    if isinstance(default, int) and isinstance(val, float) and not val.is_integer():
        raise ConfigError(f"not a whole number: {val!r}")
    try:
        return type(default)(val)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"bad value {val!r}: {e}") from e


class Config:
    """
    Defaults overlaid by an optional JSON file.
    Values are validated on load and on every `set`, so a Config that exists is usable.
    """

    def __init__(self, path: Optional[str] = None, **overrides: Any):
        self.path = path
        self.data: ConfigData = default_config()
        if path:
            self._load()
        for key, val in overrides.items():
            if val is not None:
                self._assign(key, val)
        self.validate()

    def _load(self) -> None:
        if not os.path.exists(self.path):
            logger.warning("config file %s not found, writing defaults there", self.path)
            self.save()
            return
        try:
            with open(self.path, "r", encoding="utf8") as f:
                raw = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"{self.path}: malformed JSON ({e})") from e
        if not isinstance(raw, dict):
            raise ConfigError(f"{self.path}: expected a JSON object")
        for key, val in raw.items():
            self._assign(key, val)
        logger.debug("loaded config from %s", self.path)

    def _assign(self, key: str, val: Any) -> None:
        if key not in self.data:
            raise ConfigError(f"no such option: {key}")
        self.data[key] = _cast(self.data[key], val)  # type: ignore[literal-required]

    def validate(self) -> None:
        d = self.data
        if not 0.0 < d["fp_rate"] < 1.0:
            raise ConfigError(f"fp_rate must be in (0, 1), got {d['fp_rate']}")
        if d["max_radius"] < 0:
            raise ConfigError(f"max_radius must be >= 0, got {d['max_radius']}")
        if d["max_suggestions"] < 0:
            raise ConfigError(f"max_suggestions must be >= 0, got {d['max_suggestions']}")
        if d["tie_break"] not in TIE_BREAKS:
            raise ConfigError(f"tie_break must be one of {TIE_BREAKS}, got {d['tie_break']!r}")
        d["log_level"] = d["log_level"].upper()
        if d["log_level"] not in LOG_LEVELS:
            raise ConfigError(f"log_level must be one of {LOG_LEVELS}, got {d['log_level']!r}")

    def __getitem__(self, key: str) -> Any:
        return self.data[key]  # type: ignore[literal-required]

    def items(self) -> Iterator[Tuple[str, Any]]:
        return iter(self.data.items())

    def as_dict(self) -> Dict[str, Any]:
        return dict(self.data)

    def save(self, path: Optional[str] = None) -> None:
        target = path or self.path
        if not target:
            raise ConfigError("no path to save config to")
        with open(target, "w", encoding="utf8") as f:
            json.dump(self.data, f, indent=2)

    def set(self, key: str, val: Any) -> None:
        """Set one option (cast to the default's type), re-validate and save if file-backed."""
        old = self.data.get(key)
        self._assign(key, val)
        try:
            self.validate()
        except ConfigError:
            self.data[key] = old  # type: ignore[literal-required]
            raise
        if self.path:
            self.save()
