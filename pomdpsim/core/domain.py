"""Collaborator interfaces consumed by the stepping core, plus a plain
action registry that satisfies them.

The core never inspects states or observations; it only orchestrates
these collaborators:

  ActionDefinition    execute(state, action) -> next_state
  Domain              action_by_name(name) -> ActionDefinition | None
  PO domain           ... + observation_function() -> ObservationFunction
  RewardFunction      (prior_state, action, next_state) -> float
  TerminalFunction    (state) -> bool
  ObservationFunction sample(state, action) -> observation
  StateGenerator      generate() -> state
"""

from __future__ import annotations

import copy
from typing import Any, Iterable, Protocol, runtime_checkable

from pomdpsim.core.errors import ConfigurationError
from pomdpsim.core.types import GroundedAction


# ---------------------------------------------------------------------------
# Protocols
# ---------------------------------------------------------------------------

class ActionDefinition(Protocol):
    name: str

    def execute(self, state: Any, action: GroundedAction) -> Any:
        """Return the successor of *state*.  Must not mutate *state*."""
        ...


@runtime_checkable
class DomainProtocol(Protocol):
    def action_by_name(self, name: str) -> ActionDefinition | None: ...


@runtime_checkable
class PODomainProtocol(Protocol):
    def action_by_name(self, name: str) -> ActionDefinition | None: ...

    def observation_function(self) -> ObservationFunction: ...


class RewardFunction(Protocol):
    def __call__(self, prior_state: Any, action: GroundedAction, next_state: Any) -> float: ...


class TerminalFunction(Protocol):
    def __call__(self, state: Any) -> bool: ...


class ObservationFunction(Protocol):
    def sample(self, state: Any, action: GroundedAction) -> Any:
        """Draw an observation.  May differ between calls with equal inputs."""
        ...


class StateGenerator(Protocol):
    def generate(self) -> Any: ...


def supports_observations(domain: object) -> bool:
    """True if *domain* can supply an observation model."""
    return isinstance(domain, PODomainProtocol)


# ---------------------------------------------------------------------------
# Concrete registry
# ---------------------------------------------------------------------------

class Domain:
    """Action registry keyed by action name."""

    def __init__(self, actions: Iterable[ActionDefinition] = ()) -> None:
        self._actions: dict[str, ActionDefinition] = {}
        for definition in actions:
            self.add_action(definition)

    def add_action(self, definition: ActionDefinition) -> None:
        if definition.name in self._actions:
            raise ConfigurationError(
                f"Action {definition.name!r} is already registered in this domain."
            )
        self._actions[definition.name] = definition

    def action_by_name(self, name: str) -> ActionDefinition | None:
        return self._actions.get(name)

    def action_names(self) -> list[str]:
        return list(self._actions)


class PODomain(Domain):
    """Domain that also supplies an observation model."""

    def __init__(
        self,
        actions: Iterable[ActionDefinition] = (),
        observation_function: ObservationFunction | None = None,
    ) -> None:
        if observation_function is None:
            raise ConfigurationError("A PODomain requires an observation function.")
        super().__init__(actions)
        self._observation_function = observation_function

    def observation_function(self) -> ObservationFunction:
        return self._observation_function

    def set_observation_function(self, observation_function: ObservationFunction) -> None:
        self._observation_function = observation_function


# ---------------------------------------------------------------------------
# State generators
# ---------------------------------------------------------------------------

class ConstantStateGenerator:
    """Always generates (a copy of) the same state."""

    def __init__(self, state: Any) -> None:
        self._state = state

    def generate(self) -> Any:
        return copy.deepcopy(self._state)
