"""Tether error hierarchy.

All tether-specific errors inherit from TetherError for easy catching.
Exceptions raised by setup/cleanup handlers are never wrapped.
"""


class TetherError(Exception):
    """Base error for all tether operations."""


class ConfigError(TetherError):
    """Invalid or malformed configuration."""


class GateError(TetherError):
    """A change gate was used in a way its state does not allow."""


class ReentrancyError(GateError):
    """A gate was evaluated or disposed from inside one of its own handlers."""
