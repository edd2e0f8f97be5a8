"""Unit tests for the fully observable stepping engine."""

import pytest

from pomdpsim.core.base_env import SimulatedEnvironment
from pomdpsim.core.domain import Domain
from pomdpsim.core.errors import ConfigurationError, UnknownActionError
from pomdpsim.core.types import GroundedAction


# ---------------------------------------------------------------------------
# Helpers: a counter domain.  State is {"count": int}; terminal at >= limit.
# ---------------------------------------------------------------------------

class AddAction:
    name = "add"

    def execute(self, state, action):
        return {"count": state["count"] + action.params.get("amount", 1)}


class StayAction:
    name = "stay"

    def execute(self, state, action):
        return state


def _reward(prior, action, nxt):
    return float(nxt["count"] - prior["count"])


def _terminal_at(limit):
    return lambda state: state["count"] >= limit


def _env(limit=3, **kwargs) -> SimulatedEnvironment:
    kwargs.setdefault("initial_state", {"count": 0})
    return SimulatedEnvironment(
        Domain([AddAction(), StayAction()]), _reward, _terminal_at(limit), **kwargs
    )


class _CountingGenerator:
    def __init__(self):
        self.calls = 0

    def generate(self):
        self.calls += 1
        return {"count": 0}


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------

class TestConstruction:
    def test_requires_initial_state_or_generator(self):
        with pytest.raises(ConfigurationError):
            SimulatedEnvironment(Domain([AddAction()]), _reward, _terminal_at(3))

    def test_rejects_both_initial_state_and_generator(self):
        with pytest.raises(ConfigurationError):
            _env(state_generator=_CountingGenerator())

    def test_generator_drawn_once_at_construction(self):
        gen = _CountingGenerator()
        env = SimulatedEnvironment(
            Domain([AddAction()]), _reward, _terminal_at(3), state_generator=gen
        )
        assert gen.calls == 1
        assert env.current_hidden_state() == {"count": 0}
        assert env.last_reward() == 0.0


# ---------------------------------------------------------------------------
# Stepping
# ---------------------------------------------------------------------------

class TestExecuteAction:
    def test_commits_transition_output(self):
        env = _env()
        outcome = env.execute_action(GroundedAction("add", {"amount": 2}))
        assert env.current_hidden_state() == {"count": 2}
        assert outcome.observation == {"count": 0}
        assert outcome.next_observation == {"count": 2}

    def test_reward_matches_reward_function(self):
        env = _env(limit=100)
        prior = dict(env.current_hidden_state())
        action = GroundedAction("add", {"amount": 5})
        outcome = env.execute_action(action)
        assert outcome.reward == _reward(prior, action, env.current_hidden_state())
        assert env.last_reward() == 5.0

    def test_terminal_flag_matches_terminal_function(self):
        env = _env(limit=2)
        first = env.execute_action(GroundedAction("add"))
        assert first.terminated is False
        second = env.execute_action(GroundedAction("add"))
        assert second.terminated is True
        assert env.is_in_terminal_state()

    def test_unknown_action_raises_without_mutation(self):
        env = _env()
        env.execute_action(GroundedAction("add"))
        with pytest.raises(UnknownActionError) as excinfo:
            env.execute_action(GroundedAction("jump"))
        assert excinfo.value.action_name == "jump"
        assert env.current_hidden_state() == {"count": 1}
        assert env.last_reward() == 1.0

    def test_unknown_action_is_a_lookup_error(self):
        with pytest.raises(LookupError):
            _env().execute_action(GroundedAction("jump"))

    def test_caller_action_not_mutated_and_outcome_holds_copy(self):
        action = GroundedAction("add", {"amount": 1, "tags": ["a"]})
        outcome = _env().execute_action(action)
        assert outcome.action == action
        assert outcome.action is not action
        assert outcome.action.params["tags"] is not action.params["tags"]

    def test_outcome_states_are_copies(self):
        env = _env(limit=100)
        outcome = env.execute_action(GroundedAction("add"))
        outcome.next_observation["count"] = 999
        assert env.current_hidden_state() == {"count": 1}

    def test_collaborator_errors_propagate(self):
        def broken_reward(prior, action, nxt):
            raise ZeroDivisionError("bad model")

        env = _env()
        env.set_reward_function(broken_reward)
        with pytest.raises(ZeroDivisionError, match="bad model"):
            env.execute_action(GroundedAction("add"))
        assert env.current_hidden_state() == {"count": 0}


# ---------------------------------------------------------------------------
# Terminal gating
# ---------------------------------------------------------------------------

class TestTerminalGating:
    def test_gated_step_is_noop_with_zero_reward(self):
        env = _env(limit=1)
        env.execute_action(GroundedAction("add"))
        assert env.is_in_terminal_state()

        for _ in range(3):
            outcome = env.execute_action(GroundedAction("add", {"amount": 10}))
            assert outcome.reward == 0.0
            assert outcome.terminated is True
            assert env.current_hidden_state() == {"count": 1}
            assert env.last_reward() == 0.0

    def test_gated_step_still_validates_action(self):
        env = _env(limit=1)
        env.execute_action(GroundedAction("add"))
        with pytest.raises(UnknownActionError):
            env.execute_action(GroundedAction("jump"))

    def test_allowing_terminal_actions_keeps_stepping(self):
        env = _env(limit=1, allow_action_from_terminal_states=True)
        env.execute_action(GroundedAction("add"))
        outcome = env.execute_action(GroundedAction("add"))
        assert env.current_hidden_state() == {"count": 2}
        assert outcome.reward == 1.0
        assert outcome.terminated is True

    def test_gating_toggle_takes_effect_immediately(self):
        env = _env(limit=1)
        env.execute_action(GroundedAction("add"))
        env.allow_action_from_terminal_states = True
        env.execute_action(GroundedAction("add"))
        assert env.current_hidden_state() == {"count": 2}


# ---------------------------------------------------------------------------
# Reset
# ---------------------------------------------------------------------------

class TestReset:
    def test_reset_restores_fixed_initial_state(self):
        env = _env(limit=100)
        for _ in range(4):
            env.execute_action(GroundedAction("add"))
        env.reset_environment()
        assert env.current_hidden_state() == {"count": 0}
        assert env.last_reward() == 0.0

    def test_reset_does_not_alias_initial_state(self):
        initial = {"count": 0}
        env = _env(initial_state=initial)
        env.current_hidden_state()["count"] = 42
        env.reset_environment()
        assert env.current_hidden_state() == {"count": 0}
        assert initial == {"count": 0}

    def test_reset_draws_from_generator_each_time(self):
        gen = _CountingGenerator()
        env = SimulatedEnvironment(
            Domain([AddAction()]), _reward, _terminal_at(3), state_generator=gen
        )
        env.reset_environment()
        env.reset_environment()
        assert gen.calls == 3

    def test_set_state_generator_replaces_reset_distribution(self):
        env = _env()
        gen = _CountingGenerator()
        env.set_state_generator(gen)
        env.reset_environment()
        assert gen.calls == 1

    def test_reset_leaves_terminal_state(self):
        env = _env(limit=1)
        env.execute_action(GroundedAction("add"))
        env.reset_environment()
        assert not env.is_in_terminal_state()


# ---------------------------------------------------------------------------
# Queries
# ---------------------------------------------------------------------------

class TestQueries:
    def test_current_observation_is_copy_of_hidden_state(self):
        env = _env()
        obs = env.current_observation()
        assert obs == env.current_hidden_state()
        obs["count"] = 7
        assert env.current_hidden_state() == {"count": 0}

    def test_set_current_state(self):
        env = _env(limit=3)
        env.set_current_state({"count": 3})
        assert env.is_in_terminal_state()

    def test_instances_do_not_share_state(self):
        a, b = _env(limit=100), _env(limit=100)
        a.execute_action(GroundedAction("add"))
        assert b.current_hidden_state() == {"count": 0}
