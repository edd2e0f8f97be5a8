"""Base environment contract and the fully observable stepping engine.

``Environment`` is the agent-facing contract every environment honours:
  execute_action(action) -> EnvironmentOutcome
  reset_environment()
  current_observation()
  last_reward() / is_in_terminal_state()

``SimulatedEnvironment`` owns the hidden state and runs one step:
  resolve -> (gate | transition + reward) -> terminal check -> commit
The step is split into ``resolve_action``, ``action_is_gated``,
``simulate`` and ``commit`` so an overlay can reuse the exact same
transition/reward/terminal logic while packaging outcomes differently.
"""

from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from typing import Any

from pomdpsim.core.domain import (
    ActionDefinition,
    ConstantStateGenerator,
    DomainProtocol,
    RewardFunction,
    StateGenerator,
    TerminalFunction,
)
from pomdpsim.core.errors import ConfigurationError, UnknownActionError
from pomdpsim.core.types import EnvironmentOutcome, GroundedAction


class Environment(ABC):
    """Abstract agent-facing environment contract.  Domain-agnostic."""

    # ------------------------------------------------------------------
    # Step / lifecycle
    # ------------------------------------------------------------------

    @abstractmethod
    def execute_action(self, action: GroundedAction) -> EnvironmentOutcome:
        """Advance one step and return what the agent is allowed to see."""
        ...

    @abstractmethod
    def reset_environment(self) -> None:
        """Return to an initial (fixed or freshly generated) state."""
        ...

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @abstractmethod
    def current_observation(self) -> Any:
        """What the agent currently perceives."""
        ...

    @abstractmethod
    def last_reward(self) -> float:
        ...

    @abstractmethod
    def is_in_terminal_state(self) -> bool:
        ...


class SimulatedEnvironment(Environment):
    """Fully observable stepping engine over pluggable collaborators.

    Exactly one of *initial_state* or *state_generator* must be given.
    With *allow_action_from_terminal_states* False (the default), acting
    from a terminal state is a no-op with zero reward.
    """

    def __init__(
        self,
        domain: DomainProtocol,
        reward_fn: RewardFunction,
        terminal_fn: TerminalFunction,
        *,
        initial_state: Any = None,
        state_generator: StateGenerator | None = None,
        allow_action_from_terminal_states: bool = False,
    ) -> None:
        if initial_state is None and state_generator is None:
            raise ConfigurationError(
                "SimulatedEnvironment needs an initial_state or a state_generator."
            )
        if initial_state is not None and state_generator is not None:
            raise ConfigurationError(
                "Pass either initial_state or state_generator, not both."
            )
        self._domain = domain
        self._reward_fn = reward_fn
        self._terminal_fn = terminal_fn
        self._allow_action_from_terminal = allow_action_from_terminal_states
        if state_generator is None:
            state_generator = ConstantStateGenerator(initial_state)
        self._state_generator: StateGenerator = state_generator
        self._state: Any = self._state_generator.generate()
        self._last_reward = 0.0

    # ------------------------------------------------------------------
    # Step
    # ------------------------------------------------------------------

    def execute_action(self, action: GroundedAction) -> EnvironmentOutcome:
        definition, executable = self.resolve_action(action)
        prior = self._state

        if self.action_is_gated():
            next_state, reward = prior, 0.0
        else:
            next_state, reward = self.simulate(definition, executable)

        outcome = EnvironmentOutcome(
            observation=copy.deepcopy(prior),
            action=executable,
            next_observation=copy.deepcopy(next_state),
            reward=reward,
            terminated=self.is_terminal(next_state),
        )
        self.commit(next_state, reward)
        return outcome

    def resolve_action(
        self, action: GroundedAction
    ) -> tuple[ActionDefinition, GroundedAction]:
        """Look up *action* in the domain and return it with a private copy.

        Raises UnknownActionError without touching any state.
        """
        definition = self._domain.action_by_name(action.name)
        if definition is None:
            raise UnknownActionError(action.name)
        return definition, action.copy()

    def action_is_gated(self) -> bool:
        """True if the next step must leave the hidden state untouched."""
        return not self._allow_action_from_terminal and self.is_in_terminal_state()

    def simulate(
        self, definition: ActionDefinition, action: GroundedAction
    ) -> tuple[Any, float]:
        """Run transition and reward from the current state.  Commits nothing."""
        prior = self._state
        next_state = definition.execute(prior, action)
        reward = float(self._reward_fn(prior, action, next_state))
        return next_state, reward

    def commit(self, next_state: Any, reward: float) -> None:
        self._state = next_state
        self._last_reward = reward

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def reset_environment(self) -> None:
        self._state = self._state_generator.generate()
        self._last_reward = 0.0

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def current_hidden_state(self) -> Any:
        """The live hidden state.  Callers must not mutate it."""
        return self._state

    def current_observation(self) -> Any:
        # Fully observable: the agent sees (a copy of) the hidden state.
        return copy.deepcopy(self._state)

    def last_reward(self) -> float:
        return self._last_reward

    def is_in_terminal_state(self) -> bool:
        return self.is_terminal(self._state)

    def is_terminal(self, state: Any) -> bool:
        return bool(self._terminal_fn(state))

    @property
    def domain(self) -> DomainProtocol:
        return self._domain

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    @property
    def allow_action_from_terminal_states(self) -> bool:
        return self._allow_action_from_terminal

    @allow_action_from_terminal_states.setter
    def allow_action_from_terminal_states(self, allow: bool) -> None:
        self._allow_action_from_terminal = bool(allow)

    def set_domain(self, domain: DomainProtocol) -> None:
        self._domain = domain

    def set_reward_function(self, reward_fn: RewardFunction) -> None:
        self._reward_fn = reward_fn

    def set_terminal_function(self, terminal_fn: TerminalFunction) -> None:
        self._terminal_fn = terminal_fn

    def set_state_generator(self, state_generator: StateGenerator) -> None:
        """Replace the reset distribution.  Takes effect on the next reset."""
        self._state_generator = state_generator

    def set_current_state(self, state: Any) -> None:
        """Overwrite the hidden state directly (fixtures, evaluation tools)."""
        self._state = state
