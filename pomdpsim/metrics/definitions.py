"""Metric names and minimal schemas for POMDP episodes.

Defines three categories:
  - Step metrics: one record per executed action
  - Episode metrics: summary of an entire episode
  - Event types: semantic events (reset, terminal reached, gated action)

All schemas are plain dicts describing expected keys and types,
used for documentation and optional runtime validation.
"""

from __future__ import annotations

from enum import Enum


# ---------------------------------------------------------------------------
# Step metric keys (one record per step)
# ---------------------------------------------------------------------------

STEP_METRIC_KEYS: list[str] = [
    "episode",
    "step",
    "action",
    "observation",
    "next_observation",
    "reward",
    "terminated",
    "episode_return",
]

STEP_METRIC_SCHEMA: dict[str, str] = {
    "episode": "int",
    "step": "int",
    "action": "str",
    "observation": "str | None",
    "next_observation": "str | None",
    "reward": "float",
    "terminated": "bool",
    "episode_return": "float",
}


# ---------------------------------------------------------------------------
# Episode metric keys (one record per episode)
# ---------------------------------------------------------------------------

EPISODE_METRIC_KEYS: list[str] = [
    "episode",
    "episode_length",
    "terminated",
    "total_reward",
]

EPISODE_METRIC_SCHEMA: dict[str, str] = {
    "episode": "int",
    "episode_length": "int",
    "terminated": "bool",
    "total_reward": "float",
}


# ---------------------------------------------------------------------------
# Semantic event types
# ---------------------------------------------------------------------------

class EventType(Enum):
    """Semantic events emitted during a simulation run."""

    RESET = "reset"
    TERMINAL_REACHED = "terminal_reached"
    GATED_ACTION = "gated_action"


EVENT_SCHEMAS: dict[str, dict[str, str]] = {
    EventType.RESET.value: {
        "event": "str",
        "episode": "int",
        "observation": "str | None",
    },
    EventType.TERMINAL_REACHED.value: {
        "event": "str",
        "episode": "int",
        "step": "int",
        "action": "str",
    },
    EventType.GATED_ACTION.value: {
        "event": "str",
        "episode": "int",
        "step": "int",
        "action": "str",
    },
}
