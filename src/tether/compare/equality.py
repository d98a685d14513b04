"""Deep structural equality over untyped nested data.

Values are sorted into four runtime categories at comparison time and
compared per category:

- ``absent``: ``None``
- ``mapping``: any ``collections.abc.Mapping``
- ``sequence``: any ``collections.abc.Sequence`` except text and bytes
- ``primitive``: everything else

Two values of different categories are never equal.  Mappings and
sequences recurse; primitives use strict equality (same primitive family
and ``==``).  No schema is assumed and nothing here raises on missing
keys or indices.

Cyclic structures are not supported and will recurse until Python's
recursion limit is hit.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from numbers import Number
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tether._types import Value, ValueKind

_TEXT_TYPES = (str, bytes, bytearray)


class _Missing:
    """Marker for a key absent from a mapping.  Equal to nothing."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "<missing>"


MISSING = _Missing()


def kind_of(value: Value) -> ValueKind:
    """Return the runtime category of *value*."""
    if value is None:
        return "absent"
    if isinstance(value, Mapping):
        return "mapping"
    if isinstance(value, Sequence) and not isinstance(value, _TEXT_TYPES):
        return "sequence"
    return "primitive"


def deep_equal(a: Value, b: Value) -> bool:
    """Structural equality of two arbitrary values.

    Pure and total for finite, acyclic input.  Symmetric: mappings are
    checked for equal key counts as well as per-key equality, so a key
    present on only one side is caught from either direction.

    Examples::

        >>> deep_equal({"x": 1, "y": [1, 2]}, {"y": [1, 2], "x": 1})
        True
        >>> deep_equal({"x": 1, "y": 2}, {"x": 1})
        False
        >>> deep_equal(None, {})
        False

    """
    if a is MISSING or b is MISSING:
        return False

    kind = kind_of(a)
    if kind != kind_of(b):
        return False

    if kind == "absent":
        return True
    if kind == "mapping":
        return _mappings_equal(a, b)
    if kind == "sequence":
        return _sequences_equal(a, b)
    return _primitives_equal(a, b)


def _mappings_equal(a: Mapping, b: Mapping) -> bool:
    if len(a) != len(b):
        return False
    return all(deep_equal(value, b.get(key, MISSING)) for key, value in a.items())


def _sequences_equal(a: Sequence, b: Sequence) -> bool:
    if len(a) != len(b):
        return False
    return all(deep_equal(x, y) for x, y in zip(a, b, strict=True))


def _primitive_family(value: object) -> object:
    # bool is a Number subclass; keep it apart so True != 1
    if isinstance(value, bool):
        return bool
    if isinstance(value, Number):
        return Number
    if isinstance(value, str):
        return str
    if isinstance(value, (bytes, bytearray)):
        return bytes
    return type(value)


def _primitives_equal(a: object, b: object) -> bool:
    if _primitive_family(a) is not _primitive_family(b):
        return False
    return bool(a == b)
