"""
FieldCheck - Field Validation for Request Data
==============================================

Declare rules against field paths of a nested mapping (typically a
parsed form or JSON body), then ask whether the data is valid and
collect localized error messages.

Quick Start:
    from fieldcheck import Validator

    validator = (
        Validator({"user": {"email": "bad"}})
        .required("user[email]")
        .email("user[email]")
    )

    validator.is_valid()          # False
    validator.get_errors("keyed")
    # {"user[email].email": "The field user[email] must be a valid email address"}
"""

from __future__ import annotations

__version__ = "1.4.0"
__license__ = "MIT"

from fieldcheck.core.config import Config, get_config
from fieldcheck.core.exceptions import (
    ConfigurationError,
    FieldCheckError,
    FieldNotFoundError,
    UnsupportedFormatError,
    UnsupportedLanguageError,
)
from fieldcheck.i18n.localizer import (
    MessageLocalizer,
    get_default_language,
    set_default_language,
)
from fieldcheck.validation.report import ErrorFormat
from fieldcheck.validation.validator import ValidationError, Validator


def __getattr__(name: str):
    """Lazy loading of logging helpers."""
    _imports = {
        "Logger": "fieldcheck.utils.logger",
        "get_logger": "fieldcheck.utils.logger",
        "configure_logging": "fieldcheck.utils.logger",
    }

    if name in _imports:
        import importlib
        module = importlib.import_module(_imports[name])
        return getattr(module, name)

    raise AttributeError(f"module 'fieldcheck' has no attribute '{name}'")


__all__ = [
    # Metadata
    "__version__",
    "__license__",
    # Validation
    "Validator",
    "ValidationError",
    "ErrorFormat",
    # Localization
    "MessageLocalizer",
    "get_default_language",
    "set_default_language",
    # Configuration
    "Config",
    "get_config",
    # Errors
    "FieldCheckError",
    "FieldNotFoundError",
    "ConfigurationError",
    "UnsupportedLanguageError",
    "UnsupportedFormatError",
    # Logging (lazy)
    "Logger",
    "get_logger",
    "configure_logging",
]
