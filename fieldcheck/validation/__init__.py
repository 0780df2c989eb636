"""
FieldCheck Validation
=====================

Rule engine for nested request data.

Features:
- Bracketed field paths (``user[address][city]``)
- Chainable rule methods
- One error per field, last failing rule wins
- Localized error messages in three output formats
"""

from fieldcheck.validation.paths import NOT_FOUND, Resolution, parse_path, resolve
from fieldcheck.validation.report import ErrorFormat, ErrorReporter
from fieldcheck.validation.rules import (
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
    is_empty,
    loose_equals,
)
from fieldcheck.validation.validator import ValidationError, Validator

__all__ = [
    # Core
    "Validator",
    "ValidationError",
    "ErrorFormat",
    "ErrorReporter",
    # Paths
    "NOT_FOUND",
    "Resolution",
    "parse_path",
    "resolve",
    # Rules
    "Rule",
    "NotNull",
    "NotEmpty",
    "Length",
    "DateTime",
    "Slug",
    "Url",
    "Match",
    "Equal",
    "Email",
    "Array",
    "Integer",
    "Float",
    "Boolean",
    "Between",
    "PatternMatch",
    "AlphaNumerical",
    "is_empty",
    "loose_equals",
]
