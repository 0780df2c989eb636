"""
FieldCheck Path Resolver
========================

Resolves bracketed field paths against nested input data.

A field path is a base key followed by optional bracketed segments::

    "name"                  -> ("name",)
    "user[address][city]"   -> ("user", "address", "city")
    "tags[0]"               -> ("tags", "0")

Resolution never raises for a missing field: it returns ``NOT_FOUND``.
A field that is present with a ``None`` value resolves as found.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Tuple


@dataclass(frozen=True)
class Resolution:
    """Outcome of resolving a field path."""

    found: bool
    value: Any = None

    def __bool__(self) -> bool:
        return self.found


NOT_FOUND = Resolution(found=False)


def is_mapping(value: Any) -> bool:
    return isinstance(value, Mapping)


def is_sequence(value: Any) -> bool:
    """Sequence container; strings and bytes are scalars."""
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def parse_path(path: str) -> Tuple[str, ...]:
    """
    Split a field path into its segments.

    Each ``[`` starts a new segment and one trailing ``]`` is dropped
    from every segment.

    Example:
        >>> parse_path("user[address][city]")
        ('user', 'address', 'city')
    """
    return tuple(
        segment[:-1] if segment.endswith("]") else segment
        for segment in path.split("[")
    )


def resolve(path: str, root: Any) -> Resolution:
    """
    Resolve ``path`` against ``root``.

    Args:
        path: Field path
        root: Input data

    Returns:
        Resolution with the value, or NOT_FOUND
    """
    return _walk(parse_path(path), root)


def _is_index(segment: str) -> bool:
    return segment.isascii() and segment.isdigit()


def _walk(segments: Tuple[str, ...], node: Any) -> Resolution:
    if not segments:
        return Resolution(found=True, value=node)

    head, rest = segments[0], segments[1:]

    if is_mapping(node):
        if head in node:
            return _walk(rest, node[head])
        if _is_index(head) and int(head) in node:
            return _walk(rest, node[int(head)])
        return NOT_FOUND

    if is_sequence(node):
        if _is_index(head) and int(head) < len(node):
            return _walk(rest, node[int(head)])
        return NOT_FOUND

    # Scalars have no children
    return NOT_FOUND
