"""Termination check for the tiger domain: an episode ends once a door opens."""

from __future__ import annotations

from pomdpsim.envs.tiger.state import TigerState


def is_terminal(state: TigerState) -> bool:
    return state.opened is not None
