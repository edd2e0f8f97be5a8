"""Reward function for the tiger domain.

  listen                         -> listen_reward
  open the door on tiger's side  -> correct_reward
  open the other door            -> incorrect_reward
"""

from __future__ import annotations

from pomdpsim.config.schema import TigerConfig
from pomdpsim.core.types import GroundedAction
from pomdpsim.envs.tiger.actions import opened_side
from pomdpsim.envs.tiger.state import TigerState


class TigerRewardFunction:
    def __init__(self, config: TigerConfig) -> None:
        self._config = config

    def __call__(
        self, prior_state: TigerState, action: GroundedAction, next_state: TigerState
    ) -> float:
        side = opened_side(action)
        if side is None:
            return self._config.listen_reward
        if side is prior_state.tiger:
            return self._config.correct_reward
        return self._config.incorrect_reward
