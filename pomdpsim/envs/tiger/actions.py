"""Action definitions for the tiger domain.

V1 action model (no parameters):
  listen      hidden state unchanged
  open_left   opens the left door
  open_right  opens the right door
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from pomdpsim.core.types import GroundedAction
from pomdpsim.envs.tiger.state import Side, TigerState

LISTEN = "listen"
OPEN_LEFT = "open_left"
OPEN_RIGHT = "open_right"

ACTION_NAMES: tuple[str, ...] = (LISTEN, OPEN_LEFT, OPEN_RIGHT)

_OPEN_SIDES = {OPEN_LEFT: Side.LEFT, OPEN_RIGHT: Side.RIGHT}


def opened_side(action: GroundedAction) -> Side | None:
    """Side opened by *action*, or None for listen."""
    return _OPEN_SIDES.get(action.name)


@dataclass(frozen=True)
class ListenAction:
    name: str = LISTEN

    def execute(self, state: TigerState, action: GroundedAction) -> TigerState:
        return state


@dataclass(frozen=True)
class OpenDoorAction:
    side: Side

    @property
    def name(self) -> str:
        return OPEN_LEFT if self.side is Side.LEFT else OPEN_RIGHT

    def execute(self, state: TigerState, action: GroundedAction) -> TigerState:
        return replace(state, opened=self.side)
