"""Tiger POMDP domain package."""

from pomdpsim.envs.tiger.actions import ACTION_NAMES, LISTEN, OPEN_LEFT, OPEN_RIGHT
from pomdpsim.envs.tiger.env import make_tiger_environment
from pomdpsim.envs.tiger.state import Side, TigerObservation, TigerState

__all__ = [
    "ACTION_NAMES",
    "LISTEN",
    "OPEN_LEFT",
    "OPEN_RIGHT",
    "Side",
    "TigerObservation",
    "TigerState",
    "make_tiger_environment",
]
