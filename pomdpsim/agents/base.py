"""Base agent interface for pluggable action policies."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from pomdpsim.core.types import GroundedAction


class BaseAgent(ABC):
    """Interface that all agent policies must implement.

    Agents only ever receive observations, never hidden states.
    """

    @abstractmethod
    def reset(self, agent_id: str, seed: int) -> None:
        """Initialise or re-initialise the agent for a new episode."""

    @abstractmethod
    def act(self, observation: Any) -> GroundedAction:
        """Choose an action given the current observation."""
