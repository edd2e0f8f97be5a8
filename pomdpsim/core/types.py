"""Framework-level types shared by every environment.

These are the shared vocabulary of the simulator.  Domain-specific types
(e.g., tiger states and observations) live in their respective env
packages, not here.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping


# ---------------------------------------------------------------------------
# Null observation sentinel
# ---------------------------------------------------------------------------

class NullObservation:
    """Placeholder observation used before any action since the last reset.

    There is exactly one instance, ``NULL_OBSERVATION``.  Copying it yields
    the same instance so it can always be compared by identity.
    """

    _instance: NullObservation | None = None

    def __new__(cls) -> NullObservation:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __copy__(self) -> NullObservation:
        return self

    def __deepcopy__(self, memo: dict) -> NullObservation:
        return self

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "NULL_OBSERVATION"

    def __reduce__(self) -> str:
        return "NULL_OBSERVATION"


NULL_OBSERVATION = NullObservation()


# ---------------------------------------------------------------------------
# Grounded action (what an agent submits)
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class GroundedAction:
    """A named, fully parameterised action instance.

    Parameters
    ----------
    name : str
        Must match an action registered in the environment's domain.
    params : Mapping[str, Any]
        Free-form parameters read by the action definition.  Stored as a
        read-only view.
    """

    name: str
    params: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("action name must be a non-empty string")
        object.__setattr__(self, "params", MappingProxyType(dict(self.params)))

    def copy(self) -> GroundedAction:
        """Independent copy; nested parameter values are deep-copied."""
        return GroundedAction(self.name, copy.deepcopy(dict(self.params)))

    def __deepcopy__(self, memo: dict) -> GroundedAction:
        return self.copy()

    def __str__(self) -> str:
        if not self.params:
            return self.name
        args = ", ".join(f"{k}={v!r}" for k, v in self.params.items())
        return f"{self.name}({args})"


# ---------------------------------------------------------------------------
# Step outcome
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class EnvironmentOutcome:
    """Immutable snapshot of one environment step.

    ``observation`` and ``next_observation`` are copies taken by the
    environment when the outcome is built; later steps never alias them.
    """

    observation: Any
    action: GroundedAction
    next_observation: Any
    reward: float
    terminated: bool

    @property
    def done(self) -> bool:
        return self.terminated

    def to_record(self) -> dict[str, Any]:
        """JSON-friendly view used by the run logger."""
        return {
            "observation": observation_label(self.observation),
            "action": self.action.name,
            "action_params": dict(self.action.params),
            "next_observation": observation_label(self.next_observation),
            "reward": self.reward,
            "terminated": self.terminated,
        }


def observation_label(value: Any) -> Any:
    """JSON-friendly label for an observation or state."""
    if value is NULL_OBSERVATION:
        return None
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (str, int, float, bool)) or value is None:
        return value
    return str(value)
