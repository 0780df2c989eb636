"""
FieldCheck Core
===============

Configuration and exception types shared by all components.
"""

from fieldcheck.core.config import Config, config, get_config, reset_config
from fieldcheck.core.exceptions import (
    ConfigurationError,
    FieldCheckError,
    FieldNotFoundError,
    UnsupportedFormatError,
    UnsupportedLanguageError,
)

__all__ = [
    "Config",
    "config",
    "get_config",
    "reset_config",
    "FieldCheckError",
    "FieldNotFoundError",
    "ConfigurationError",
    "UnsupportedLanguageError",
    "UnsupportedFormatError",
]
