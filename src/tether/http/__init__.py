"""HTTP layer — httpx clients used as binding context."""

from tether.http.client import create_client, default_client

__all__ = ["create_client", "default_client"]
