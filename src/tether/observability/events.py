"""Event model for change gate observability.

One event type per gate transition.  All events are frozen dataclasses
with:
- ``gate``: Name of the gate that produced the event (may be empty)
- ``timestamp_ns``: Monotonic nanosecond timestamp

Thread Safety:
    All events are frozen (immutable) and safe to share across threads.

"""

import time
from dataclasses import dataclass
from typing import Literal, TypeAlias


# ---------------------------------------------------------------------------
# Transition events
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class GateBound:
    """A gate ran setup for the first time (UNSET -> BOUND).

    Attributes:
        gate: Gate name.
        duration_ms: Time spent in the setup handler.
        timestamp_ns: Monotonic nanosecond timestamp.

    """

    gate: str
    duration_ms: float
    timestamp_ns: int


@dataclass(frozen=True, slots=True)
class GateChanged:
    """A gate saw different input and ran cleanup then setup.

    Attributes:
        gate: Gate name.
        added: Number of added entries between old and new input.
        removed: Number of removed entries.
        modified: Number of modified entries.
        duration_ms: Time spent in cleanup and setup combined.
        timestamp_ns: Monotonic nanosecond timestamp.

    """

    gate: str
    added: int
    removed: int
    modified: int
    duration_ms: float
    timestamp_ns: int


@dataclass(frozen=True, slots=True)
class GateSkipped:
    """A gate saw deeply-equal input and did nothing.

    Attributes:
        gate: Gate name.
        timestamp_ns: Monotonic nanosecond timestamp.

    """

    gate: str
    timestamp_ns: int


@dataclass(frozen=True, slots=True)
class GateDisposed:
    """A gate was disposed.

    Attributes:
        gate: Gate name.
        cleaned_up: True if a final cleanup ran (the gate was BOUND).
        timestamp_ns: Monotonic nanosecond timestamp.

    """

    gate: str
    cleaned_up: bool
    timestamp_ns: int


# ---------------------------------------------------------------------------
# Failure events
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class HandlerFailed:
    """A setup or cleanup handler raised.

    The exception itself still propagates to the caller; this only
    records that it happened.

    Attributes:
        gate: Gate name.
        phase: Which handler raised.
        error_type: Class name of the raised exception.
        message: ``str()`` of the raised exception.
        timestamp_ns: Monotonic nanosecond timestamp.

    """

    gate: str
    phase: Literal["setup", "cleanup"]
    error_type: str
    message: str
    timestamp_ns: int


# ---------------------------------------------------------------------------
# Union type
# ---------------------------------------------------------------------------

GateEvent: TypeAlias = GateBound | GateChanged | GateSkipped | GateDisposed | HandlerFailed


def now_ns() -> int:
    """Return the current monotonic clock value in nanoseconds."""
    return time.monotonic_ns()
