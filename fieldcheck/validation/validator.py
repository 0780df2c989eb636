"""
FieldCheck Validator
====================

Core validation engine.

A Validator wraps the input data of one validation session. Rule
methods are chained; each failing rule records an error for its
field, replacing any earlier error for the same field, so the last
failing rule declared on a field is the one reported.

Example:
    validator = (
        Validator(request_data)
        .required_and_not_empty("name", "user[email]")
        .email("user[email]")
        .length("name", 2, 50)
    )

    if not validator.is_valid():
        return {"errors": validator.get_errors("keyed")}
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Pattern, Union

from fieldcheck.core.config import config
from fieldcheck.core.exceptions import FieldNotFoundError, UnsupportedFormatError
from fieldcheck.i18n.localizer import MessageLocalizer
from fieldcheck.utils.logger import get_logger
from fieldcheck.validation.paths import is_mapping, resolve
from fieldcheck.validation.report import ErrorFormat, ErrorReporter
from fieldcheck.validation.rules import (
    DEFAULT_DATETIME_FORMAT,
    AlphaNumerical,
    Array,
    Between,
    Boolean,
    DateTime,
    Email,
    Equal,
    Float,
    Integer,
    Length,
    Match,
    NotEmpty,
    NotNull,
    PatternMatch,
    Rule,
    Slug,
    Url,
)

logger = get_logger("fieldcheck.validation")


@dataclass
class ValidationError:
    """
    One failed rule on one field.

    Attributes:
        key: Field path as given to the rule
        rule: Rule name, e.g. "required" or "minLength"
        attributes: Rule parameters used in the message
    """

    key: str
    rule: str
    attributes: List[Any] = field(default_factory=list)

    @property
    def code(self) -> str:
        return f"{self.key}.{self.rule}"

    def render(
        self,
        localizer: MessageLocalizer,
        display_name: Optional[str] = None,
    ) -> str:
        """Render the message, naming the field ``display_name`` if given."""
        return localizer.render(self.rule, display_name or self.key, self.attributes)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "key": self.key,
            "rule": self.rule,
            "attributes": list(self.attributes),
            "code": self.code,
        }

    def __str__(self) -> str:
        return self.render(MessageLocalizer())


class Validator:
    """
    Rule engine over a nested input mapping.

    Args:
        params: Input data (e.g. a parsed request body)
        localizer: Message localizer for rendered errors
        language: Message language; overrides the localizer's language
        error_format: Default shape returned by ``get_errors``
        messages: Custom messages keyed by ``"<field>.<rule>"``
        attributes: Display names keyed by field path

    Raises:
        UnsupportedLanguageError: Unknown ``language``
        UnsupportedFormatError: Unknown ``error_format``
    """

    def __init__(
        self,
        params: Optional[Mapping[str, Any]] = None,
        *,
        localizer: Optional[MessageLocalizer] = None,
        language: Optional[str] = None,
        error_format: Optional[Union[str, ErrorFormat]] = None,
        messages: Optional[Mapping[str, str]] = None,
        attributes: Optional[Mapping[str, str]] = None,
    ) -> None:
        self.params = params if params is not None else {}

        if localizer is None:
            localizer = MessageLocalizer(language)
        elif language is not None and language != localizer.language:
            localizer = localizer.with_language(language)
        self.localizer = localizer

        if error_format is None:
            error_format = config("validation.error_format", ErrorFormat.DEFAULT)
        self.error_format = ErrorFormat.parse(error_format)

        self.reporter = ErrorReporter(self.localizer, dict(messages or {}), dict(attributes or {}))

        self._errors: Dict[str, ValidationError] = {}

    @property
    def messages(self) -> Dict[str, str]:
        """Custom messages by error code, e.g. ``{"age.between": "Too young"}``."""
        return self.reporter.messages

    @messages.setter
    def messages(self, value: Dict[str, str]) -> None:
        self.reporter.messages = value

    @property
    def attributes(self) -> Dict[str, str]:
        """Display names by field path."""
        return self.reporter.attributes

    @attributes.setter
    def attributes(self, value: Dict[str, str]) -> None:
        self.reporter.attributes = value

    # ------------------------------------------------------------------
    # Presence rules
    # ------------------------------------------------------------------

    def required(self, *keys: str) -> Validator:
        """
        Fields must be present.

        A field present with a None value passes; combine with
        ``not_null`` to reject it.
        """
        for key in keys:
            try:
                self.get_value(key, enforce_existence=True)
            except FieldNotFoundError:
                self.add_error(key, "required")

        return self

    def not_null(self, *keys: str) -> Validator:
        """
        Present fields must not be None.

        Missing fields are left to ``required``.
        """
        for key in keys:
            if resolve(key, self.params).found:
                self._check(key, NotNull())
        return self

    def not_empty(self, *keys: str) -> Validator:
        """Fields that are not None must not be empty."""
        for key in keys:
            self._check(key, NotEmpty())
        return self

    def required_and_not_empty(self, *keys: str) -> Validator:
        self.required(*keys)
        self.not_empty(*keys)
        return self

    # ------------------------------------------------------------------
    # Format rules (empty values are skipped)
    # ------------------------------------------------------------------

    def length(
        self,
        key: str,
        min: Optional[int],
        max: Optional[int] = None,
    ) -> Validator:
        """
        Length in characters within [min, max].

        Reports ``betweenLength``, ``minLength`` and ``maxLength`` in
        that order; the last one detected is kept.
        """
        return self._check(key, Length(min_length=min, max_length=max))

    def date_time(self, key: str, format: Optional[str] = None) -> Validator:
        """
        Value must parse as a date with ``format`` (strptime syntax).

        Out-of-range dates such as February 30 are rejected.
        """
        if format is None:
            format = config("validation.datetime_format", DEFAULT_DATETIME_FORMAT)
        return self._check(key, DateTime(format=format))

    def slug(self, key: str) -> Validator:
        return self._check(key, Slug())

    def url(self, key: str) -> Validator:
        return self._check(key, Url())

    def match(self, key: str, expected: Any) -> Validator:
        """Value must loosely equal ``expected`` (both non-empty)."""
        return self._check(key, Match(expected=expected))

    def equal(self, key: str, other_key: str) -> Validator:
        """Value must loosely equal the value of ``other_key``."""
        return self._check(key, Equal(other_key=other_key, other_value=self.get_value(other_key)))

    def email(self, key: str) -> Validator:
        return self._check(key, Email())

    def array(self, *keys: str) -> Validator:
        for key in keys:
            self._check(key, Array())
        return self

    def integer(self, *keys: str) -> Validator:
        for key in keys:
            self._check(key, Integer())
        return self

    def float(self, *keys: str) -> Validator:
        """
        Digits, one separator character, digits.

        The separator may be any non-digit character ("1.5", "1,5"),
        while a plain digit run such as "15" is rejected.
        """
        for key in keys:
            self._check(key, Float())
        return self

    def boolean(self, *keys: str) -> Validator:
        """
        Value must be a boolean-like literal.

        Only "" and None are skipped, so 0 and False are checked.
        """
        for key in keys:
            self._check(key, Boolean())
        return self

    def between(
        self,
        key: str,
        min: int,
        max: int,
        strict: bool = False,
    ) -> Validator:
        """
        Integer value within [min, max], or (min, max) when strict.

        Values that are not ints (including numeric strings) are
        ignored.
        """
        return self._check(key, Between(min_value=min, max_value=max, strict=strict))

    def pattern_match(self, key: str, pattern: Union[str, Pattern]) -> Validator:
        """Value must contain a match for ``pattern`` (``re.search``)."""
        return self._check(key, PatternMatch(pattern=pattern))

    def alpha_numerical(self, *keys: str) -> Validator:
        for key in keys:
            self._check(key, AlphaNumerical())
        return self

    # ------------------------------------------------------------------
    # Results
    # ------------------------------------------------------------------

    def is_valid(self) -> bool:
        """Return True when no rule has failed."""
        return not self._errors

    def get_errors(
        self,
        error_format: Optional[Union[str, ErrorFormat]] = None,
    ) -> Union[List[str], Dict[str, str], List[Dict[str, Any]]]:
        """
        Get rendered errors.

        Args:
            error_format: "default", "keyed" or "structured"; the
                validator's default format if omitted

        Returns:
            Messages list, ``{code: message}`` dict, or list of
            ``{"code", "message"}`` records
        """
        if error_format is None:
            error_format = self.error_format

        try:
            return self.reporter.format(self._errors.values(), error_format)
        except UnsupportedFormatError:
            logger.warning(
                "Unknown error format, using default",
                error_format=error_format,
            )
            return self.reporter.format(self._errors.values(), ErrorFormat.DEFAULT)

    @property
    def errors(self) -> Mapping[str, ValidationError]:
        """Read-only view of the errors keyed by field path."""
        return MappingProxyType(self._errors)

    def has_error(self, key: str) -> bool:
        return key in self._errors

    def get_error(self, key: str) -> Optional[ValidationError]:
        return self._errors.get(key)

    def first_error(self) -> Optional[str]:
        """Get first error message."""
        for error in self._errors.values():
            return self.reporter.render(error)
        return None

    # ------------------------------------------------------------------
    # Data access
    # ------------------------------------------------------------------

    def get_value(self, key: str, enforce_existence: bool = False) -> Any:
        """
        Get the value at a field path.

        Args:
            key: Field path, e.g. "user[address][city]"
            enforce_existence: Raise instead of returning None when the
                field is missing

        Raises:
            FieldNotFoundError: Missing field with ``enforce_existence``
        """
        resolution = resolve(key, self.params)
        if not resolution.found:
            if enforce_existence:
                raise FieldNotFoundError(key)
            return None
        return resolution.value

    def exists(self, key: str) -> bool:
        """Check for a top-level key (no path parsing)."""
        return is_mapping(self.params) and bool(self.params) and key in self.params

    def add_error(self, key: str, rule: str, attributes: Optional[List[Any]] = None) -> None:
        """Record an error, replacing any previous error for ``key``."""
        self._errors[key] = ValidationError(key, rule, list(attributes or []))
        logger.debug("Validation rule failed", field=key, rule=rule)

    def _check(self, key: str, rule: Rule) -> Validator:
        for rule_name, attributes in rule.violations(self.get_value(key)):
            self.add_error(key, rule_name, attributes)
        return self

    def __repr__(self) -> str:
        return f"<Validator fields={len(self.params)} errors={len(self._errors)}>"
