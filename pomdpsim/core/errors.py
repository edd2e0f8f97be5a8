"""Errors raised by the stepping core.

Both concrete errors signal misuse by the caller.  They are raised before
any environment state is touched and are never caught internally.
"""

from __future__ import annotations


class SimulationError(Exception):
    """Base class for errors raised by pomdpsim itself."""


class UnknownActionError(SimulationError, LookupError):
    """The action name is not registered in the environment's domain."""

    def __init__(self, action_name: str) -> None:
        self.action_name = action_name
        super().__init__(
            f"Cannot execute action {action_name!r}: it is not registered "
            "in this environment's domain."
        )

    def __str__(self) -> str:
        return self.args[0]


class ConfigurationError(SimulationError, ValueError):
    """Collaborators were wired together in an unusable way."""
