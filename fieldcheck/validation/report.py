"""
FieldCheck Error Reporter
=========================

Turns collected validation errors into output shapes:

- ``default``: list of messages
- ``keyed``: ``{"<field>.<rule>": message}``
- ``structured``: ``[{"code": "<field>.<rule>", "message": message}]``
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any, Dict, Iterable, List, Optional, Union

from fieldcheck.core.exceptions import UnsupportedFormatError
from fieldcheck.i18n.localizer import MessageLocalizer

if TYPE_CHECKING:
    from fieldcheck.validation.validator import ValidationError


class ErrorFormat(str, Enum):
    """Output shapes for ``Validator.get_errors``."""

    DEFAULT = "default"
    KEYED = "keyed"
    STRUCTURED = "structured"

    @classmethod
    def parse(cls, value: Union[str, ErrorFormat]) -> ErrorFormat:
        """
        Resolve a format name.

        Raises:
            UnsupportedFormatError: Unknown format
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise UnsupportedFormatError(value) from None


class ErrorReporter:
    """
    Renders validation errors.

    Args:
        localizer: Message localizer
        messages: Custom messages keyed by ``"<field>.<rule>"``
        attributes: Display names keyed by field path
    """

    def __init__(
        self,
        localizer: MessageLocalizer,
        messages: Optional[Dict[str, str]] = None,
        attributes: Optional[Dict[str, str]] = None,
    ) -> None:
        self.localizer = localizer
        self.messages = messages if messages is not None else {}
        self.attributes = attributes if attributes is not None else {}

    def render(self, error: ValidationError) -> str:
        """Render a single error, custom messages first."""
        if error.code in self.messages:
            return self.messages[error.code]
        return error.render(self.localizer, self.attributes.get(error.key))

    def format(
        self,
        errors: Iterable[ValidationError],
        error_format: Union[str, ErrorFormat] = ErrorFormat.DEFAULT,
    ) -> Union[List[str], Dict[str, str], List[Dict[str, Any]]]:
        """
        Format errors in insertion order.

        Raises:
            UnsupportedFormatError: Unknown format
        """
        error_format = ErrorFormat.parse(error_format)

        if error_format is ErrorFormat.KEYED:
            return {error.code: self.render(error) for error in errors}

        if error_format is ErrorFormat.STRUCTURED:
            return [
                {"code": error.code, "message": self.render(error)}
                for error in errors
            ]

        return [self.render(error) for error in errors]
