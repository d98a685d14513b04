"""Binding — attach HTTP client side effects to a component's props.

A ``Binding`` is the per-site object a host component keeps between
renders.  It owns one ``ChangeGate`` and a fixed setup/cleanup pair, and
on each ``render()`` hands the current props to the gate and returns its
children untouched.

Usage::

    def setup(client, props):
        client.headers["Authorization"] = f"Bearer {props['token']}"

    def cleanup(client, props):
        client.headers.pop("Authorization", None)

    auth = Binding(setup, cleanup, client=api_client)

    # each render
    return auth.render(children, token=session.token)

    # when the site is removed for good
    auth.close()

"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Self

from tether.http.client import default_client
from tether.reactive.gate import ChangeGate

if TYPE_CHECKING:
    import httpx

    from tether._types import Handler, Value
    from tether.observability.collector import GateCollector


class Binding:
    """One binding site: a handler pair, a client, and a change gate.

    Args:
        setup: Called as ``setup(client, props)`` when props change.
        cleanup: Called as ``cleanup(client, old_props)`` before setup on a
            change, and by ``close()``.  Optional.
        client: Context passed to the handlers.  Defaults to the shared
            ``default_client()``, resolved on first use.
        collector: Optional event collector for the underlying gate.
        name: Label for recorded events.

    """

    __slots__ = ("_cleanup", "_client", "_gate", "_setup")

    def __init__(
        self,
        setup: Handler,
        cleanup: Handler | None = None,
        *,
        client: httpx.Client | None = None,
        collector: GateCollector | None = None,
        name: str = "",
    ) -> None:
        self._setup = setup
        self._cleanup = cleanup
        self._client = client
        self._gate = ChangeGate(collector=collector, name=name)

    @property
    def client(self) -> httpx.Client:
        if self._client is None:
            self._client = default_client()
        return self._client

    @property
    def gate(self) -> ChangeGate:
        return self._gate

    def render(self, children: Value = None, /, **props: Any) -> Value:
        """Evaluate the gate with *props* and pass *children* through."""
        self._gate.evaluate(props, self._setup, self._cleanup, self.client)
        return children

    def close(self) -> bool:
        """Run the final cleanup, if bound.  Returns True if the gate was bound."""
        if not self._gate.bound:
            return self._gate.dispose()
        return self._gate.dispose(self.client)

    def __enter__(self) -> Self:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
