"""Shared type definitions for tether."""

from collections.abc import Callable
from typing import Any, Literal, TypeAlias

# Arbitrary structurally-typed data: primitive, None, sequence or mapping
Value: TypeAlias = Any

# Opaque capability threaded through handlers (normally an httpx.Client)
Context: TypeAlias = Any

# Setup / cleanup callback: (context, value) -> None
Handler: TypeAlias = Callable[[Context, Value], None]

# Runtime category used by the equality engine
ValueKind: TypeAlias = Literal["absent", "mapping", "sequence", "primitive"]

# Lifecycle state of a change gate
GateState: TypeAlias = Literal["unset", "bound"]

# Location inside a Value: mapping keys and sequence indices from the root
ValuePath: TypeAlias = tuple[Any, ...]
