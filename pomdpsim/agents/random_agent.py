"""Random agent — picks action names uniformly at random (deterministic given seed)."""

from __future__ import annotations

from typing import Any, Sequence

import numpy as np

from pomdpsim.agents.base import BaseAgent
from pomdpsim.core.seeding import make_rng
from pomdpsim.core.types import GroundedAction
from pomdpsim.envs.tiger.actions import ACTION_NAMES


class RandomAgent(BaseAgent):
    """Uniformly random policy over a fixed set of action names."""

    def __init__(self, action_names: Sequence[str] = ACTION_NAMES) -> None:
        if not action_names:
            raise ValueError("RandomAgent needs at least one action name")
        self._action_names = tuple(action_names)
        self._rng: np.random.Generator | None = None

    def reset(self, agent_id: str, seed: int) -> None:
        self._rng = make_rng(seed)

    def act(self, observation: Any) -> GroundedAction:
        assert self._rng is not None, "Must call reset() before act()"
        idx = int(self._rng.integers(len(self._action_names)))
        return GroundedAction(self._action_names[idx])
