"""
FieldCheck Configuration
========================

Layered configuration for the validation engine.

Configuration Loading Priority (highest to lowest):
1. Runtime overrides (``Config.set``)
2. Environment variables (FIELDCHECK_*)
3. Mappings added with ``load_from_mapping``
4. Built-in defaults

Environment variables use a double underscore as the nesting
separator, so ``FIELDCHECK_VALIDATION__ERROR_FORMAT=keyed`` sets
``validation.error_format``.

Example:
    config = get_config()
    config.set("validation.language", "fr")

    language = config.get("validation.language")  # "fr"
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, TypeVar, Union

T = TypeVar("T")

ENV_PREFIX = "FIELDCHECK_"
ENV_NESTING = "__"

DEFAULTS: Dict[str, Any] = {
    "validation": {
        "language": "en",
        "error_format": "default",
        "datetime_format": "%Y-%m-%d %H:%M:%S",
    },
    "logging": {
        "level": "WARNING",
        "format": "text",
    },
}


@dataclass
class ConfigSource:
    """Represents a configuration source with priority."""
    name: str
    data: Dict[str, Any]
    priority: int = 0


class Config:
    """
    Configuration container.

    Sources are merged by priority; values are read with dot
    notation.

    Example:
        config = Config()
        config.set("validation.language", "es")

        config.get("validation.language")          # "es"
        config.get("validation.missing", "x")      # "x"
    """

    def __init__(self, defaults: Optional[Mapping[str, Any]] = None) -> None:
        self._sources: List[ConfigSource] = []
        self._cache: Dict[str, Any] = {}
        self._merged: Dict[str, Any] = {}
        self._dirty = True

        self.add_source("defaults", _deep_copy(defaults if defaults is not None else DEFAULTS))

    def load_from_mapping(
        self,
        name: str,
        data: Mapping[str, Any],
        priority: int = 10,
    ) -> Config:
        """
        Load configuration from a nested mapping.

        Args:
            name: Source name
            data: Nested configuration values
            priority: Merge priority

        Returns:
            Self for chaining
        """
        self.add_source(name, _deep_copy(data), priority=priority)
        return self

    def load_env_overrides(
        self,
        environ: Optional[Mapping[str, str]] = None,
    ) -> Config:
        """Load overrides from FIELDCHECK_* environment variables."""
        environ = os.environ if environ is None else environ
        overrides: Dict[str, Any] = {}

        for key, value in environ.items():
            if not key.startswith(ENV_PREFIX):
                continue
            # FIELDCHECK_VALIDATION__LANGUAGE -> validation.language
            config_key = key[len(ENV_PREFIX):].lower().replace(ENV_NESTING, ".")
            if config_key:
                overrides[config_key] = self._parse_env_value(value)

        if overrides:
            self.add_source("env_vars", self._unflatten(overrides), priority=100)

        return self

    def _parse_env_value(self, value: str) -> Any:
        """Parse environment variable value to appropriate type."""
        if value.lower() in ("true", "yes"):
            return True
        if value.lower() in ("false", "no"):
            return False

        try:
            return int(value)
        except ValueError:
            pass

        try:
            return float(value)
        except ValueError:
            pass

        if value.startswith(("{", "[")):
            try:
                return json.loads(value)
            except json.JSONDecodeError:
                pass

        return value

    def _unflatten(self, flat: Dict[str, Any]) -> Dict[str, Any]:
        """Convert flat dot-notation keys to nested dict."""
        result: Dict[str, Any] = {}

        for key, value in flat.items():
            parts = key.split(".")
            current = result

            for part in parts[:-1]:
                if not isinstance(current.get(part), dict):
                    current[part] = {}
                current = current[part]

            current[parts[-1]] = value

        return result

    def add_source(
        self,
        name: str,
        data: Dict[str, Any],
        priority: int = 0,
    ) -> None:
        """Add a configuration source."""
        self._sources.append(ConfigSource(name=name, data=data, priority=priority))
        self._dirty = True

    def _merge(self) -> None:
        """Merge all sources into single configuration."""
        if not self._dirty:
            return

        # Lower priority first, so higher overrides
        sorted_sources = sorted(self._sources, key=lambda s: s.priority)

        self._merged = {}
        for source in sorted_sources:
            _deep_merge(self._merged, source.data)

        self._dirty = False
        self._cache.clear()

    def get(
        self,
        key: str,
        default: T = None,
    ) -> Union[Any, T]:
        """
        Get configuration value using dot notation.

        Args:
            key: Configuration key (e.g., "validation.language")
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        self._merge()

        if key in self._cache:
            return self._cache[key]

        current: Any = self._merged
        for part in key.split("."):
            if not isinstance(current, dict) or part not in current:
                return default
            current = current[part]

        self._cache[key] = current
        return current

    def get_int(self, key: str, default: int = 0) -> int:
        """Get configuration value as integer."""
        value = self.get(key, default)
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    def get_bool(self, key: str, default: bool = False) -> bool:
        """Get configuration value as boolean."""
        value = self.get(key, default)
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            return value.lower() in ("true", "yes", "1")
        return bool(value)

    def get_list(self, key: str, default: Optional[List] = None) -> List:
        """Get configuration value as list."""
        value = self.get(key, default)
        if value is None:
            return default or []
        if isinstance(value, list):
            return value
        return [value]

    def set(self, key: str, value: Any) -> None:
        """
        Set a runtime configuration value.

        Runtime values have the highest priority.
        """
        runtime_source = next(
            (source for source in self._sources if source.name == "runtime"),
            None,
        )
        if runtime_source is None:
            runtime_source = ConfigSource(name="runtime", data={}, priority=1000)
            self._sources.append(runtime_source)

        parts = key.split(".")
        current = runtime_source.data

        for part in parts[:-1]:
            if not isinstance(current.get(part), dict):
                current[part] = {}
            current = current[part]

        current[parts[-1]] = value
        self._dirty = True

    def has(self, key: str) -> bool:
        """Check if configuration key exists."""
        return self.get(key) is not None

    def section(self, prefix: str) -> Dict[str, Any]:
        """Get all values under a prefix."""
        value = self.get(prefix)
        if isinstance(value, dict):
            return _deep_copy(value)
        return {}

    def __getitem__(self, key: str) -> Any:
        value = self.get(key)
        if value is None:
            raise KeyError(key)
        return value

    def __setitem__(self, key: str, value: Any) -> None:
        self.set(key, value)

    def __contains__(self, key: str) -> bool:
        return self.has(key)


def _deep_merge(base: Dict, override: Mapping) -> None:
    """Deep merge override into base."""
    for key, value in override.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, Mapping):
            _deep_merge(base[key], value)
        elif isinstance(value, Mapping):
            base[key] = _deep_copy(value)
        else:
            base[key] = value


def _deep_copy(data: Mapping) -> Dict[str, Any]:
    return {
        key: _deep_copy(value) if isinstance(value, Mapping) else value
        for key, value in data.items()
    }


# Process configuration instance
_config: Optional[Config] = None


def get_config() -> Config:
    """Get process configuration, loading env overrides on first use."""
    global _config
    if _config is None:
        _config = Config().load_env_overrides()
    return _config


def reset_config() -> None:
    """Drop the process configuration (next access rebuilds it)."""
    global _config
    _config = None


def config(key: str, default: Any = None) -> Any:
    """Shortcut function for configuration access."""
    return get_config().get(key, default)
