"""Gate observability — event model for change gate transitions.

Every gate evaluation can be recorded as a frozen event with a
nanosecond timestamp:
- **GateBound**: first setup
- **GateChanged**: cleanup + setup after input drift
- **GateSkipped**: unchanged input
- **GateDisposed**: final teardown
- **HandlerFailed**: a handler raised

Quick Start:
    >>> from tether.observability import EventLog, GateCollector
    >>> log = EventLog()
    >>> collector = GateCollector(log)
    >>> # Pass collector to ChangeGate(collector=...) or Binding(collector=...)

"""

from tether.observability.collector import GateCollector
from tether.observability.events import (
    GateBound,
    GateChanged,
    GateDisposed,
    GateEvent,
    GateSkipped,
    HandlerFailed,
    now_ns,
)
from tether.observability.log import EventLog

__all__ = [
    "EventLog",
    "GateBound",
    "GateChanged",
    "GateCollector",
    "GateDisposed",
    "GateEvent",
    "GateSkipped",
    "HandlerFailed",
    "now_ns",
]
