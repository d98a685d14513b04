"""Tether configuration.

TetherConfig is the central configuration object, frozen after creation.
"""

from dataclasses import dataclass, field

from tether._errors import ConfigError


@dataclass(frozen=True, slots=True)
class TetherConfig:
    """Configuration for tether bindings and the default HTTP client.

    Attributes:
        base_url: Base URL for requests made through the default client.
        timeout: Request timeout in seconds (must be positive).
        headers: Default headers sent with every request.
        follow_redirects: Whether the default client follows redirects.
        max_events: Capacity of the event log ring buffer (must be positive).
        verbose: Print a one-line summary to stderr for each gate transition.

    """

    base_url: str = ""
    timeout: float = 5.0
    headers: dict[str, str] = field(default_factory=dict)
    follow_redirects: bool = False
    max_events: int = 1_000
    verbose: bool = False

    def __post_init__(self) -> None:
        if isinstance(self.timeout, bool) or not isinstance(self.timeout, (int, float)):
            msg = f"timeout must be a number, got {type(self.timeout).__name__}"
            raise ConfigError(msg)
        if self.timeout <= 0:
            msg = f"timeout must be positive, got {self.timeout}"
            raise ConfigError(msg)
        if isinstance(self.max_events, bool) or not isinstance(self.max_events, int):
            msg = f"max_events must be an integer, got {type(self.max_events).__name__}"
            raise ConfigError(msg)
        if self.max_events <= 0:
            msg = f"max_events must be positive, got {self.max_events}"
            raise ConfigError(msg)
        if not isinstance(self.headers, dict):
            msg = f"headers must be a mapping, got {type(self.headers).__name__}"
            raise ConfigError(msg)
        # Normalize header values to strings so httpx accepts them
        object.__setattr__(
            self, "headers", {str(k): str(v) for k, v in self.headers.items()}
        )
