"""Partially observable environment: an observation layer over the
stepping engine.

The overlay owns a ``SimulatedEnvironment`` and reuses its step pieces
(resolve, gate, simulate, commit).  What changes is what the agent sees:
outcomes and ``current_observation()`` carry observations sampled from the
domain's observation function, never the hidden state.  The hidden state
is still available through ``current_hidden_state()`` for evaluation
tooling.
"""

from __future__ import annotations

import copy
from typing import Any

from pomdpsim.core.base_env import Environment, SimulatedEnvironment
from pomdpsim.core.domain import (
    ObservationFunction,
    PODomainProtocol,
    RewardFunction,
    StateGenerator,
    TerminalFunction,
    supports_observations,
)
from pomdpsim.core.errors import ConfigurationError
from pomdpsim.core.types import NULL_OBSERVATION, EnvironmentOutcome, GroundedAction


def _require_po_domain(domain: object) -> None:
    if not supports_observations(domain):
        raise ConfigurationError(
            f"{type(domain).__name__} does not supply an observation function; "
            "a partially observable environment needs a PO domain."
        )


class SimulatedPOEnvironment(Environment):
    """Simulates interaction with a POMDP.

    ``current_observation()`` is the last observation drawn after an
    action, or ``NULL_OBSERVATION`` if no action ran since the last reset.
    """

    def __init__(
        self,
        domain: PODomainProtocol,
        reward_fn: RewardFunction,
        terminal_fn: TerminalFunction,
        *,
        initial_state: Any = None,
        state_generator: StateGenerator | None = None,
        allow_action_from_terminal_states: bool = False,
    ) -> None:
        _require_po_domain(domain)
        self._domain = domain
        self._engine = SimulatedEnvironment(
            domain,
            reward_fn,
            terminal_fn,
            initial_state=initial_state,
            state_generator=state_generator,
            allow_action_from_terminal_states=allow_action_from_terminal_states,
        )
        self._observation: Any = NULL_OBSERVATION

    # ------------------------------------------------------------------
    # Step
    # ------------------------------------------------------------------

    def execute_action(self, action: GroundedAction) -> EnvironmentOutcome:
        engine = self._engine
        definition, executable = engine.resolve_action(action)
        observation_before = self._observation

        if engine.action_is_gated():
            next_state = engine.current_hidden_state()
            reward = 0.0
            next_observation = self._observation
        else:
            next_state, reward = engine.simulate(definition, executable)
            next_observation = self.observation_function().sample(next_state, executable)

        terminated = engine.is_terminal(next_state)
        outcome = EnvironmentOutcome(
            observation=copy.deepcopy(observation_before),
            action=executable,
            next_observation=copy.deepcopy(next_observation),
            reward=reward,
            terminated=terminated,
        )

        engine.commit(next_state, reward)
        self._observation = next_observation
        return outcome

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def reset_environment(self) -> None:
        self._engine.reset_environment()
        self._observation = NULL_OBSERVATION

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def current_observation(self) -> Any:
        return self._observation

    def current_hidden_state(self) -> Any:
        """The true hidden state.  For evaluation harnesses and oracles only."""
        return self._engine.current_hidden_state()

    def last_reward(self) -> float:
        return self._engine.last_reward()

    def is_in_terminal_state(self) -> bool:
        return self._engine.is_in_terminal_state()

    def observation_function(self) -> ObservationFunction:
        return self._domain.observation_function()

    @property
    def domain(self) -> PODomainProtocol:
        return self._domain

    @property
    def engine(self) -> SimulatedEnvironment:
        """The underlying fully observable engine (privileged access)."""
        return self._engine

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    def set_current_observation(self, observation: Any) -> None:
        """Inject an observation without sampling.

        Escape hatch for belief initialisation and test fixtures; normal
        stepping never calls it.
        """
        self._observation = observation

    def set_domain(self, domain: PODomainProtocol) -> None:
        _require_po_domain(domain)
        self._engine.set_domain(domain)
        self._domain = domain

    @property
    def allow_action_from_terminal_states(self) -> bool:
        return self._engine.allow_action_from_terminal_states

    @allow_action_from_terminal_states.setter
    def allow_action_from_terminal_states(self, allow: bool) -> None:
        self._engine.allow_action_from_terminal_states = allow

    def set_reward_function(self, reward_fn: RewardFunction) -> None:
        self._engine.set_reward_function(reward_fn)

    def set_terminal_function(self, terminal_fn: TerminalFunction) -> None:
        self._engine.set_terminal_function(terminal_fn)

    def set_state_generator(self, state_generator: StateGenerator) -> None:
        self._engine.set_state_generator(state_generator)
