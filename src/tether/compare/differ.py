"""Value differ — structural diff between two snapshots.

Produces a changeset describing which parts of a Value were added,
removed, or modified.  Used to explain why a change gate fired; the gate
itself only needs the yes/no answer from ``deep_equal``.

Like the equality engine this is a known-shape diff, not a tree edit
distance: mappings are compared key by key and sequences position by
position.  Equal subtrees are skipped via ``deep_equal``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Literal

from tether.compare.equality import MISSING, deep_equal, kind_of

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from tether._types import Value, ValuePath


@dataclass(frozen=True, slots=True)
class ValueChange:
    """A single difference between two Values.

    Attributes:
        kind: Type of change — added, removed, or modified.
        path: Location from the root as a tuple of mapping keys and
            sequence indices.  Example: ``("user", "roles", 0)``.
        old: The value before the change (None for additions).
        new: The value after the change (None for removals).

    """

    kind: Literal["added", "removed", "modified"]
    path: ValuePath
    old: Value
    new: Value


def diff_values(old: Value, new: Value) -> tuple[ValueChange, ...]:
    """Structural diff of two Values.

    Returns an empty tuple when the values are deeply equal.

    Algorithm:
        1. If the values are deeply equal, stop.
        2. If both are mappings, walk the keys of ``old`` (removed or
           recursed), then the keys only present in ``new`` (added).
        3. If both are sequences, walk by index; trailing positions are
           added or removed.
        4. Anything else (kind mismatch, unequal primitives) is a single
           ``modified`` change at the current path.

    """
    changes: list[ValueChange] = []
    _diff(old, new, (), changes)
    return tuple(changes)


def summarize(changes: tuple[ValueChange, ...]) -> dict[str, int]:
    """Count changes by kind."""
    counts = {"added": 0, "removed": 0, "modified": 0}
    for change in changes:
        counts[change.kind] += 1
    return counts


def _diff(old: Value, new: Value, path: ValuePath, changes: list[ValueChange]) -> None:
    if deep_equal(old, new):
        return

    kind = kind_of(old)
    if kind == "mapping" and kind_of(new) == "mapping":
        _diff_mappings(old, new, path, changes)
    elif kind == "sequence" and kind_of(new) == "sequence":
        _diff_sequences(old, new, path, changes)
    else:
        changes.append(ValueChange(kind="modified", path=path, old=old, new=new))


def _diff_mappings(
    old: Mapping, new: Mapping, parent_path: ValuePath, changes: list[ValueChange]
) -> None:
    for key, old_value in old.items():
        path = (*parent_path, key)
        new_value = new.get(key, MISSING)
        if new_value is MISSING:
            changes.append(ValueChange(kind="removed", path=path, old=old_value, new=None))
        else:
            _diff(old_value, new_value, path, changes)

    for key, new_value in new.items():
        if key not in old:
            changes.append(
                ValueChange(kind="added", path=(*parent_path, key), old=None, new=new_value)
            )


def _diff_sequences(
    old: Sequence, new: Sequence, parent_path: ValuePath, changes: list[ValueChange]
) -> None:
    for i in range(max(len(old), len(new))):
        path = (*parent_path, i)
        if i >= len(old):
            changes.append(ValueChange(kind="added", path=path, old=None, new=new[i]))
        elif i >= len(new):
            changes.append(ValueChange(kind="removed", path=path, old=old[i], new=None))
        else:
            _diff(old[i], new[i], path, changes)
