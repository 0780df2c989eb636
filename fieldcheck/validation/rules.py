"""
FieldCheck Validation Rules
===========================

Predicates behind the Validator's rule methods.

Each rule decides whether it applies to a value (most format rules
skip empty values, leaving presence to ``required``/``not_null``/
``not_empty``) and, if so, which violations the value produces.
A violation is a ``(rule_name, attributes)`` pair.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, ClassVar, List, Optional, Pattern, Tuple, Union

from email_validator import EmailNotValidError, validate_email

from fieldcheck.validation.paths import is_mapping, is_sequence

Violation = Tuple[str, List[Any]]

DEFAULT_DATETIME_FORMAT = "%Y-%m-%d %H:%M:%S"

SLUG_PATTERN = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*-?$")
URL_PATTERN = re.compile(
    r"^https?://"
    r"[a-z0-9-]+(?:\.[a-z0-9-]+)*"
    r"(?::[0-9]+)?"
    r"(?:/.*)?$",
    re.IGNORECASE,
)
INTEGER_PATTERN = re.compile(r"^[0-9]+(?:-[0-9]+)*-?$")
# The separator is an unescaped "." on purpose: any single
# non-digit character is accepted between the two digit runs.
FLOAT_PATTERN = re.compile(r"^[0-9]{0,64}+.[0-9]{0,64}$")
NUMERIC_STRING_PATTERN = re.compile(
    r"^\s*[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?\s*$"
)


def is_empty(value: Any) -> bool:
    """Python truthiness: None, False, 0, "", and empty containers."""
    return not value


def to_string(value: Any) -> str:
    """String form used by pattern rules; booleans become "1"/"0"."""
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, str):
        return value
    return str(value)


def _as_number(value: Any) -> Optional[Union[int, float]]:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return value
    if isinstance(value, str) and NUMERIC_STRING_PATTERN.match(value):
        return float(value)
    return None


def loose_equals(left: Any, right: Any) -> bool:
    """
    Equality with type coercion.

    Example:
        >>> loose_equals("1", 1)
        True
        >>> loose_equals("1e1", "10")
        True
        >>> loose_equals("abc", 0)
        False
        >>> loose_equals(["1", "2"], [1, 2])
        True
    """
    if isinstance(left, bool) or isinstance(right, bool):
        return bool(left) == bool(right)
    if left is None or right is None:
        return is_empty(left) and is_empty(right)
    if left == right:
        return True

    # Containers compare element by element
    if is_sequence(left) and is_sequence(right):
        return len(left) == len(right) and all(
            loose_equals(a, b) for a, b in zip(left, right)
        )
    if is_mapping(left) and is_mapping(right):
        return left.keys() == right.keys() and all(
            loose_equals(left[key], right[key]) for key in left
        )

    left_number, right_number = _as_number(left), _as_number(right)
    if left_number is not None and right_number is not None:
        return left_number == right_number

    if isinstance(left, (int, float)) and isinstance(right, str):
        return to_string(left) == right
    if isinstance(left, str) and isinstance(right, (int, float)):
        return left == to_string(right)

    return False


class Rule(ABC):
    """
    Abstract validation rule.

    Example:
        @dataclass
        class Positive(Rule):
            name = "positive"

            def validate(self, value: Any) -> bool:
                return isinstance(value, int) and value > 0
    """

    name: ClassVar[str] = "invalid"

    def applies(self, value: Any) -> bool:
        """Whether the rule checks this value at all."""
        return not is_empty(value)

    @abstractmethod
    def validate(self, value: Any) -> bool:
        """Return True if the value satisfies the rule."""
        ...

    def attributes(self) -> List[Any]:
        """Parameters reported with the error."""
        return []

    def violations(self, value: Any) -> List[Violation]:
        """Violations for ``value``, in the order they are detected."""
        if not self.applies(value) or self.validate(value):
            return []
        return [(self.name, self.attributes())]

    def __call__(self, value: Any) -> bool:
        return not self.violations(value)


@dataclass
class NotNull(Rule):
    """Value must not be None (a missing field resolves to None)."""

    name: ClassVar[str] = "notNull"

    def applies(self, value: Any) -> bool:
        return True

    def validate(self, value: Any) -> bool:
        return value is not None


@dataclass
class NotEmpty(Rule):
    """Non-null value must not be empty."""

    name: ClassVar[str] = "empty"

    def applies(self, value: Any) -> bool:
        return value is not None

    def validate(self, value: Any) -> bool:
        return not is_empty(value)


@dataclass
class Length(Rule):
    """String length (in code points) within bounds."""

    min_length: Optional[int]
    max_length: Optional[int] = None

    def validate(self, value: Any) -> bool:
        return not self.violations(value)

    def violations(self, value: Any) -> List[Violation]:
        if not self.applies(value):
            return []

        if is_mapping(value) or is_sequence(value):
            length = len(value)
        else:
            length = len(to_string(value))
        too_short = self.min_length is not None and length < self.min_length
        too_long = self.max_length is not None and length > self.max_length
        found: List[Violation] = []

        if self.min_length is not None and self.max_length is not None and (too_short or too_long):
            found.append(("betweenLength", [self.min_length, self.max_length]))
        if too_short:
            found.append(("minLength", [self.min_length]))
        if too_long:
            found.append(("maxLength", [self.max_length]))

        return found


@dataclass
class DateTime(Rule):
    """Value must parse with ``format`` (strptime directives)."""

    format: str = DEFAULT_DATETIME_FORMAT
    name: ClassVar[str] = "datetime"

    def validate(self, value: Any) -> bool:
        if isinstance(value, (datetime, date)):
            return True
        try:
            datetime.strptime(to_string(value), self.format)
        except ValueError:
            return False
        return True

    def attributes(self) -> List[Any]:
        return [self.format]


@dataclass
class Slug(Rule):
    """Lowercase alphanumeric groups joined by single hyphens."""

    name: ClassVar[str] = "slug"

    def validate(self, value: Any) -> bool:
        return bool(SLUG_PATTERN.match(to_string(value)))


@dataclass
class Url(Rule):
    """http(s) URL with optional port and path."""

    name: ClassVar[str] = "url"

    def validate(self, value: Any) -> bool:
        return bool(URL_PATTERN.match(to_string(value)))


@dataclass
class Match(Rule):
    """Value must loosely equal a literal."""

    expected: Any
    name: ClassVar[str] = "match"

    def applies(self, value: Any) -> bool:
        return not is_empty(value) and not is_empty(self.expected)

    def validate(self, value: Any) -> bool:
        return loose_equals(value, self.expected)

    def attributes(self) -> List[Any]:
        return [self.expected]


@dataclass
class Equal(Rule):
    """Value must loosely equal another field's value."""

    other_key: str
    other_value: Any
    name: ClassVar[str] = "notEqual"

    def applies(self, value: Any) -> bool:
        return not is_empty(value) and not is_empty(self.other_value)

    def validate(self, value: Any) -> bool:
        return loose_equals(value, self.other_value)

    def attributes(self) -> List[Any]:
        return [self.other_key]


@dataclass
class Email(Rule):
    """Syntactically valid email address (no DNS lookups)."""

    name: ClassVar[str] = "email"

    def validate(self, value: Any) -> bool:
        try:
            validate_email(to_string(value), check_deliverability=False)
        except EmailNotValidError:
            return False
        return True


@dataclass
class Array(Rule):
    """Value must be a mapping or a sequence."""

    name: ClassVar[str] = "array"

    def validate(self, value: Any) -> bool:
        return is_mapping(value) or is_sequence(value)


@dataclass
class Integer(Rule):
    """Digit groups, optionally hyphen-joined."""

    name: ClassVar[str] = "integer"

    def validate(self, value: Any) -> bool:
        return bool(INTEGER_PATTERN.match(to_string(value)))


@dataclass
class Float(Rule):
    """Digits, any single separator character, digits."""

    name: ClassVar[str] = "float"

    def validate(self, value: Any) -> bool:
        return bool(FLOAT_PATTERN.match(to_string(value)))


@dataclass
class Boolean(Rule):
    """True/False, "true"/"false", 0/1 or "0"/"1"."""

    name: ClassVar[str] = "boolean"

    def applies(self, value: Any) -> bool:
        return value is not None and not (isinstance(value, str) and value == "")

    def validate(self, value: Any) -> bool:
        if isinstance(value, bool):
            return True
        if type(value) is int:
            return value in (0, 1)
        if isinstance(value, str):
            return value in ("true", "false", "0", "1")
        return False


@dataclass
class Between(Rule):
    """
    Integer within [min, max], or (min, max) when strict.

    Values that are not ints are not checked.
    """

    min_value: int
    max_value: int
    strict: bool = False

    @property
    def name(self) -> str:  # type: ignore[override]
        return "betweenStrict" if self.strict else "between"

    def applies(self, value: Any) -> bool:
        return not is_empty(value) and isinstance(value, int) and not isinstance(value, bool)

    def validate(self, value: Any) -> bool:
        if self.strict:
            return self.min_value < value < self.max_value
        return self.min_value <= value <= self.max_value

    def attributes(self) -> List[Any]:
        return [self.min_value, self.max_value]


@dataclass
class PatternMatch(Rule):
    """Regular expression found anywhere in the value."""

    pattern: Union[str, Pattern]
    name: ClassVar[str] = "patternMatch"

    def __post_init__(self):
        if isinstance(self.pattern, str):
            self.pattern = re.compile(self.pattern)

    def validate(self, value: Any) -> bool:
        return bool(self.pattern.search(to_string(value)))


@dataclass
class AlphaNumerical(Rule):
    """ASCII letters and digits only."""

    name: ClassVar[str] = "alphaNumerical"

    def validate(self, value: Any) -> bool:
        text = to_string(value)
        return text.isascii() and text.isalnum()
