"""Change gate — runs cleanup/setup handlers when an input drifts.

A ``ChangeGate`` sits at one binding site and is evaluated once per host
cycle with the current input.  It keeps the last input it acted on (the
snapshot) and compares each new input against it with ``deep_equal``:

- first evaluation: ``setup(context, new)``
- deeply-equal input: nothing
- different input: ``cleanup(context, old)`` then ``setup(context, new)``

State machine::

    UNSET --evaluate(v)--> BOUND(v)             setup(v)
    BOUND(v) --evaluate(v'), v == v'--> BOUND(v)     (no-op)
    BOUND(v) --evaluate(v'), v != v'--> BOUND(v')    cleanup(v), setup(v')
    BOUND(v) --dispose()--> UNSET               cleanup(v)

Handler exceptions are never caught:

- a failing cleanup leaves the gate BOUND to the old value and setup is
  not run, so the next evaluation with the new input retries the whole
  transition;
- a failing setup leaves the snapshot at the new value (setup was invoked
  with it), so the same input is not retried and the next change cleans
  it up.

Thread Safety:
    Not thread-safe.  A gate must be evaluated from a single thread of
    control, and not from inside its own handlers (``ReentrancyError``).

"""

from __future__ import annotations

import time
from typing import TYPE_CHECKING

from tether._errors import GateError, ReentrancyError
from tether.compare.differ import diff_values, summarize
from tether.compare.equality import deep_equal

if TYPE_CHECKING:
    from tether._types import Context, GateState, Handler, Value
    from tether.observability.collector import GateCollector


class ChangeGate:
    """Deep-comparing change detector for one binding site.

    Args:
        collector: Optional collector that receives one event per evaluation.
        name: Label used in recorded events and verbose output.

    """

    __slots__ = (
        "_bound",
        "_busy",
        "_cleanup",
        "_collector",
        "_name",
        "_snapshot",
        "_transitions",
    )

    def __init__(self, *, collector: GateCollector | None = None, name: str = "") -> None:
        self._collector = collector
        self._name = name
        self._snapshot: Value = None
        self._bound = False
        self._cleanup: Handler | None = None
        self._busy = False
        self._transitions = 0

    @property
    def name(self) -> str:
        return self._name

    @property
    def state(self) -> GateState:
        return "bound" if self._bound else "unset"

    @property
    def bound(self) -> bool:
        """True once setup has been invoked and the gate was not disposed since."""
        return self._bound

    @property
    def snapshot(self) -> Value:
        """The input setup was most recently invoked with.

        Raises:
            GateError: If the gate has not been evaluated yet (or was disposed).

        """
        if not self._bound:
            msg = f"gate {self._name or '<gate>'} has no snapshot before its first evaluation"
            raise GateError(msg)
        return self._snapshot

    @property
    def transitions(self) -> int:
        """Number of times setup has been invoked on this gate."""
        return self._transitions

    def evaluate(
        self,
        new_input: Value,
        setup: Handler,
        cleanup: Handler | None,
        context: Context,
    ) -> bool:
        """Compare *new_input* to the snapshot and run handlers if it changed.

        Args:
            new_input: The current input for this cycle.
            setup: Called as ``setup(context, new_input)`` on a change.
            cleanup: Called as ``cleanup(context, old_input)`` before setup on
                a change (never on the first evaluation).  ``None`` skips it.
            context: Passed through to the handlers untouched.

        Returns:
            True if setup ran, False if the input was unchanged.

        Raises:
            ReentrancyError: If called from inside one of this gate's handlers.

        """
        self._enter("evaluate")
        try:
            if not self._bound:
                self._bind(new_input, setup, cleanup, context)
                return True

            self._cleanup = cleanup
            if deep_equal(self._snapshot, new_input):
                if self._collector is not None:
                    self._collector.record_skipped(self._name)
                return False

            self._rebind(new_input, setup, cleanup, context)
            return True
        finally:
            self._busy = False

    def dispose(self, context: Context = None) -> bool:
        """Run the final cleanup for the current snapshot and reset to UNSET.

        Uses the cleanup handler from the most recent ``evaluate`` call.
        The gate is reset even if that cleanup raises.  A disposed gate can
        be evaluated again and starts over from UNSET.

        Returns:
            True if the gate was bound (and its cleanup, if any, was invoked).

        """
        self._enter("dispose")
        try:
            if not self._bound:
                if self._collector is not None:
                    self._collector.record_disposed(self._name, cleaned_up=False)
                return False

            old, cleanup = self._snapshot, self._cleanup
            self._snapshot = None
            self._bound = False
            self._cleanup = None
            if cleanup is not None:
                self._run("cleanup", cleanup, context, old)
            if self._collector is not None:
                self._collector.record_disposed(self._name, cleaned_up=True)
            return True
        finally:
            self._busy = False

    # ----- Internals -----

    def _enter(self, operation: str) -> None:
        if self._busy:
            msg = f"{operation}() called on gate {self._name or '<gate>'} from inside its own handler"
            raise ReentrancyError(msg)
        self._busy = True

    def _bind(self, new_input: Value, setup: Handler, cleanup: Handler | None, context: Context) -> None:
        t0 = time.perf_counter()
        self._store(new_input, cleanup)
        self._run("setup", setup, context, new_input)
        if self._collector is not None:
            self._collector.record_bound(self._name, duration_ms=_elapsed_ms(t0))

    def _rebind(
        self, new_input: Value, setup: Handler, cleanup: Handler | None, context: Context
    ) -> None:
        t0 = time.perf_counter()
        old = self._snapshot
        if cleanup is not None:
            self._run("cleanup", cleanup, context, old)
        self._store(new_input, cleanup)
        self._run("setup", setup, context, new_input)
        if self._collector is not None:
            duration_ms = _elapsed_ms(t0)
            counts = summarize(diff_values(old, new_input))
            self._collector.record_changed(self._name, duration_ms=duration_ms, **counts)

    def _store(self, new_input: Value, cleanup: Handler | None) -> None:
        self._snapshot = new_input
        self._bound = True
        self._cleanup = cleanup
        self._transitions += 1

    def _run(self, phase: str, handler: Handler, context: Context, value: Value) -> None:
        try:
            handler(context, value)
        except Exception as exc:
            if self._collector is not None:
                self._collector.record_failure(self._name, phase, exc)
            raise

    def __repr__(self) -> str:
        label = self._name or hex(id(self))
        if self._bound:
            return f"<ChangeGate {label} bound={self._snapshot!r}>"
        return f"<ChangeGate {label} unset>"


def _elapsed_ms(t0: float) -> float:
    return (time.perf_counter() - t0) * 1000
