"""Reactive layer — change detection at binding sites.

A gate compares each cycle's input to the last one it acted on and runs
cleanup/setup handlers on drift; a binding wraps a gate with a fixed
handler pair and an HTTP client.
"""

from tether.reactive.binding import Binding
from tether.reactive.gate import ChangeGate

__all__ = ["Binding", "ChangeGate"]
