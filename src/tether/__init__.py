"""Tether — bind HTTP client side effects to changing inputs.

A host (a UI component, a render loop, a polling job) evaluates a binding
once per cycle with its current inputs.  Tether compares them structurally
with the inputs of the previous cycle and, when they differ, runs the
cleanup handler for the old inputs followed by the setup handler for the
new ones.

Quick start::

    import tether

    def setup(client, props):
        client.headers["X-Tenant"] = props["tenant"]

    def cleanup(client, props):
        client.headers.pop("X-Tenant", None)

    binding = tether.Binding(setup, cleanup)
    binding.render(view, tenant="acme")   # setup
    binding.render(view, tenant="acme")   # no-op
    binding.render(view, tenant="globex") # cleanup, then setup

The comparison primitive is usable on its own::

    tether.deep_equal({"a": [1, 2]}, {"a": [1, 2]})   # True

"""

# PEP 703: Declare this module as free-threading safe
_Py_mod_gil = 0

__version__ = "0.1.0-dev"
__all__ = [
    "Binding",
    "ChangeGate",
    "TetherConfig",
    "__version__",
    "create_client",
    "deep_equal",
    "default_client",
    "diff_values",
    "load_config",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import tether`` fast; httpx is only imported when a client
    or binding is requested.
    """
    if name in ("deep_equal", "diff_values"):
        from tether import compare

        return getattr(compare, name)

    if name in ("Binding", "ChangeGate"):
        from tether import reactive

        return getattr(reactive, name)

    if name in ("create_client", "default_client"):
        from tether import http

        return getattr(http, name)

    if name == "TetherConfig":
        from tether.config import TetherConfig

        return TetherConfig

    if name == "load_config":
        from tether.config_loader import load_config

        return load_config

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
