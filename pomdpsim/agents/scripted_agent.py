"""Scripted agent — replays a fixed action sequence, cycling when exhausted."""

from __future__ import annotations

from typing import Any, Sequence

from pomdpsim.agents.base import BaseAgent
from pomdpsim.core.types import GroundedAction
from pomdpsim.envs.tiger.actions import LISTEN, OPEN_LEFT


class ScriptedAgent(BaseAgent):
    def __init__(self, script: Sequence[str] = (LISTEN, LISTEN, OPEN_LEFT)) -> None:
        if not script:
            raise ValueError("ScriptedAgent needs a non-empty script")
        self._script = tuple(script)
        self._cursor = 0

    def reset(self, agent_id: str, seed: int) -> None:
        self._cursor = 0

    def act(self, observation: Any) -> GroundedAction:
        name = self._script[self._cursor % len(self._script)]
        self._cursor += 1
        return GroundedAction(name)
