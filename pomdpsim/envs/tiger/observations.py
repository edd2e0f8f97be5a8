"""Observation model for the tiger domain.

Listening reports the tiger's true side with probability
``listen_accuracy`` and the other side otherwise.  Opening a door always
yields OPENED_DOOR.  All randomness flows through the provided NumPy
Generator.
"""

from __future__ import annotations

import numpy as np

from pomdpsim.core.types import GroundedAction
from pomdpsim.envs.tiger.actions import opened_side
from pomdpsim.envs.tiger.state import TigerObservation, TigerState


class TigerObservationFunction:
    """Discrete, stochastic observation function."""

    def __init__(self, listen_accuracy: float, rng: np.random.Generator) -> None:
        if not 0.0 <= listen_accuracy <= 1.0:
            raise ValueError(f"listen_accuracy must be in [0, 1], got {listen_accuracy}")
        self._accuracy = listen_accuracy
        self._rng = rng

    def probabilities(
        self, state: TigerState, action: GroundedAction
    ) -> dict[TigerObservation, float]:
        """Full observation distribution for (next state, action)."""
        if opened_side(action) is not None:
            return {TigerObservation.OPENED_DOOR: 1.0}
        return {
            TigerObservation.hearing(state.tiger): self._accuracy,
            TigerObservation.hearing(state.tiger.other): 1.0 - self._accuracy,
        }

    def probability(
        self, observation: TigerObservation, state: TigerState, action: GroundedAction
    ) -> float:
        return self.probabilities(state, action).get(observation, 0.0)

    def sample(self, state: TigerState, action: GroundedAction) -> TigerObservation:
        dist = self.probabilities(state, action)
        outcomes = list(dist)
        idx = int(self._rng.choice(len(outcomes), p=list(dist.values())))
        return outcomes[idx]
