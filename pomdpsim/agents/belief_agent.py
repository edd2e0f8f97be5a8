"""Belief agent for the tiger domain.

Keeps a Bayesian belief b = P(tiger is left) and updates it from listen
observations:

  b' = P(o | left) b / (P(o | left) b + P(o | right) (1 - b))

Once b (or 1 - b) reaches ``threshold`` the agent opens the door on the
side it believes the tiger is on; otherwise it listens.
"""

from __future__ import annotations

from typing import Any

from pomdpsim.agents.base import BaseAgent
from pomdpsim.core.types import GroundedAction
from pomdpsim.envs.tiger.actions import LISTEN, OPEN_LEFT, OPEN_RIGHT
from pomdpsim.envs.tiger.state import TigerObservation


class TigerBeliefAgent(BaseAgent):
    """Threshold policy over a two-state belief."""

    def __init__(self, listen_accuracy: float = 0.85, threshold: float = 0.95) -> None:
        if not 0.5 < listen_accuracy <= 1.0:
            raise ValueError(f"listen_accuracy must be in (0.5, 1], got {listen_accuracy}")
        if not 0.5 < threshold <= 1.0:
            raise ValueError(f"threshold must be in (0.5, 1], got {threshold}")
        self._accuracy = listen_accuracy
        self._threshold = threshold
        self._belief_left = 0.5

    @property
    def belief_left(self) -> float:
        return self._belief_left

    def reset(self, agent_id: str, seed: int) -> None:
        self._belief_left = 0.5

    def act(self, observation: Any) -> GroundedAction:
        self._update(observation)
        if self._belief_left >= self._threshold:
            return GroundedAction(OPEN_LEFT)
        if 1.0 - self._belief_left >= self._threshold:
            return GroundedAction(OPEN_RIGHT)
        return GroundedAction(LISTEN)

    def _update(self, observation: Any) -> None:
        if observation is TigerObservation.OPENED_DOOR:
            # Only reachable when terminal actions are allowed; start over.
            self._belief_left = 0.5
            return
        if observation is TigerObservation.HEAR_LEFT:
            p_left, p_right = self._accuracy, 1.0 - self._accuracy
        elif observation is TigerObservation.HEAR_RIGHT:
            p_left, p_right = 1.0 - self._accuracy, self._accuracy
        else:
            return
        b = self._belief_left
        norm = p_left * b + p_right * (1.0 - b)
        if norm > 0:
            self._belief_left = p_left * b / norm
