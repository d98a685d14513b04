"""HTTP client factory — the default context passed to binding handlers.

Handlers receive an ``httpx.Client`` as their context and configure it in
setup (headers, base URL, event hooks) and undo that in cleanup.  Tether
never sends requests itself and never closes a client it hands out.
"""

from __future__ import annotations

import threading
from typing import Any

import httpx

from tether.config import TetherConfig

_default: httpx.Client | None = None
_default_lock = threading.Lock()


def create_client(config: TetherConfig | None = None, **overrides: Any) -> httpx.Client:
    """Create a new ``httpx.Client`` from a TetherConfig.

    Args:
        config: Source of base URL, timeout, headers and redirect policy.
            Defaults to ``TetherConfig()``.
        **overrides: Extra ``httpx.Client`` keyword arguments.  These win
            over the values derived from *config*.

    """
    config = config if config is not None else TetherConfig()
    options: dict[str, Any] = {
        "base_url": config.base_url,
        "timeout": config.timeout,
        "headers": dict(config.headers),
        "follow_redirects": config.follow_redirects,
    }
    options.update(overrides)
    return httpx.Client(**options)


def default_client() -> httpx.Client:
    """Return the shared client used by bindings that were not given one.

    Created from ``TetherConfig()`` on first call and reused afterwards.
    """
    global _default  # noqa: PLW0603
    with _default_lock:
        if _default is None or _default.is_closed:
            _default = create_client()
        return _default


def _reset_default_client() -> None:
    """Close and forget the shared client.  Used by tests."""
    global _default  # noqa: PLW0603
    with _default_lock:
        if _default is not None:
            _default.close()
        _default = None
