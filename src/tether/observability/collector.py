"""Gate collector — records change gate transitions into an event log.

Change gates call the ``record_*`` methods after each evaluation.  With
``verbose`` enabled, every transition is also summarized on one line on
stderr.

Thread Safety:
    The collector delegates to ``EventLog`` which is internally locked.
    One collector may be shared by many gates.

"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

from tether.observability.events import (
    GateBound,
    GateChanged,
    GateDisposed,
    GateSkipped,
    HandlerFailed,
    now_ns,
)
from tether.observability.log import EventLog

if TYPE_CHECKING:
    from tether.config import TetherConfig


class GateCollector:
    """Event collector for change gates.

    Args:
        log: The EventLog to store events in.  A fresh one is created if omitted.
        verbose: Print a one-line summary to stderr for each transition.

    """

    __slots__ = ("_log", "_verbose")

    def __init__(self, log: EventLog | None = None, *, verbose: bool = False) -> None:
        self._log = log if log is not None else EventLog()
        self._verbose = verbose

    @classmethod
    def from_config(cls, config: TetherConfig) -> GateCollector:
        """Build a collector sized and configured from a TetherConfig."""
        return cls(EventLog(max_events=config.max_events), verbose=config.verbose)

    @property
    def log(self) -> EventLog:
        """The underlying event log."""
        return self._log

    # ----- Transitions -----

    def record_bound(self, gate: str, *, duration_ms: float = 0.0) -> None:
        """Record a first setup (UNSET -> BOUND)."""
        self._log.append(GateBound(gate=gate, duration_ms=duration_ms, timestamp_ns=now_ns()))
        if self._verbose:
            self._print(f"  [{duration_ms:.1f}ms] {_label(gate)} bound")

    def record_changed(
        self,
        gate: str,
        *,
        added: int = 0,
        removed: int = 0,
        modified: int = 0,
        duration_ms: float = 0.0,
    ) -> None:
        """Record a cleanup + setup transition."""
        self._log.append(
            GateChanged(
                gate=gate,
                added=added,
                removed=removed,
                modified=modified,
                duration_ms=duration_ms,
                timestamp_ns=now_ns(),
            )
        )
        if self._verbose:
            self._print(
                f"  [{duration_ms:.1f}ms] {_label(gate)} rebound "
                f"(+{added} -{removed} ~{modified})"
            )

    def record_skipped(self, gate: str) -> None:
        """Record an evaluation with unchanged input."""
        self._log.append(GateSkipped(gate=gate, timestamp_ns=now_ns()))

    def record_disposed(self, gate: str, *, cleaned_up: bool) -> None:
        """Record a gate disposal."""
        self._log.append(GateDisposed(gate=gate, cleaned_up=cleaned_up, timestamp_ns=now_ns()))
        if self._verbose and cleaned_up:
            self._print(f"  {_label(gate)} disposed")

    # ----- Failures -----

    def record_failure(self, gate: str, phase: str, error: BaseException) -> None:
        """Record a handler exception (the exception is not consumed)."""
        self._log.append(
            HandlerFailed(
                gate=gate,
                phase=phase,  # type: ignore[arg-type]
                error_type=type(error).__name__,
                message=str(error),
                timestamp_ns=now_ns(),
            )
        )
        if self._verbose:
            self._print(f"  {_label(gate)} {phase} failed: {type(error).__name__}: {error}")

    def _print(self, line: str) -> None:
        print(line, file=sys.stderr)


def _label(gate: str) -> str:
    return gate or "<gate>"
