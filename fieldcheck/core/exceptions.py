"""
FieldCheck Exceptions
=====================

Programming and configuration errors.

Validation failures are never raised: they are collected by the
Validator and reported through ``is_valid()`` / ``get_errors()``.
The exceptions below signal misuse of the library itself.
"""

from __future__ import annotations

from typing import Iterable, Optional


class FieldCheckError(Exception):
    """Base FieldCheck error."""
    pass


class FieldNotFoundError(FieldCheckError, KeyError):
    """Field path does not resolve in the input data."""

    def __init__(self, key: str) -> None:
        super().__init__(f"Key not found: {key}")
        self.key = key

    def __str__(self) -> str:
        # KeyError would repr() the message
        return self.args[0]


class ConfigurationError(FieldCheckError):
    """Invalid library configuration."""
    pass


class UnsupportedLanguageError(ConfigurationError):
    """Requested message language has no catalog."""

    def __init__(
        self,
        language: str,
        supported: Optional[Iterable[str]] = None,
    ) -> None:
        self.language = language
        self.supported = tuple(supported or ())
        message = f"Unsupported language: {language!r}"
        if self.supported:
            message += f" (supported: {', '.join(self.supported)})"
        super().__init__(message)


class UnsupportedFormatError(ConfigurationError):
    """Requested error output format does not exist."""

    def __init__(self, error_format: object) -> None:
        super().__init__(f"Unsupported error format: {error_format!r}")
        self.error_format = error_format
