"""End-to-end tests: agents driving tiger environments through the runner."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from pomdpsim.agents import ScriptedAgent
from pomdpsim.config.defaults import default_config
from pomdpsim.config.schema import (
    EnvironmentSettings,
    EpisodeConfig,
    ExperimentConfig,
    InstrumentationConfig,
    TigerConfig,
)
from pomdpsim.core.types import NULL_OBSERVATION, GroundedAction
from pomdpsim.envs.tiger import LISTEN, OPEN_LEFT, OPEN_RIGHT, make_tiger_environment
from pomdpsim.metrics.collector import MetricsCollector
from pomdpsim.metrics.definitions import EventType
from pomdpsim.runner.episode_runner import run_episode, run_experiment
from pomdpsim.runner.run_logger import RunLogger


def _read_jsonl(path: Path) -> list[dict]:
    return [json.loads(line) for line in path.read_text(encoding="utf-8").splitlines()]


class _SpyAgent(ScriptedAgent):
    """Scripted agent that records every observation it receives."""

    def __init__(self, script):
        super().__init__(script)
        self.seen = []

    def act(self, observation):
        self.seen.append(observation)
        return super().act(observation)


class TestRunEpisode:
    def test_stops_on_terminal(self):
        env = make_tiger_environment(TigerConfig(seed=1, initial_tiger_side="left"))
        collector = MetricsCollector(InstrumentationConfig())
        summary = run_episode(
            env, ScriptedAgent([LISTEN, LISTEN, OPEN_LEFT]), 10, collector
        )
        assert summary["episode_length"] == 3
        assert summary["terminated"] is True
        assert summary["total_reward"] == 8.0

    def test_agent_sees_observations_only(self):
        env = make_tiger_environment(TigerConfig(seed=1, initial_tiger_side="left"))
        agent = _SpyAgent([LISTEN, LISTEN, OPEN_RIGHT])
        run_episode(env, agent, 10, MetricsCollector(InstrumentationConfig()))
        assert agent.seen[0] is NULL_OBSERVATION
        assert all(o is NULL_OBSERVATION or o.value.startswith("hear") for o in agent.seen)

    def test_budget_exhaustion(self):
        env = make_tiger_environment(TigerConfig(seed=1, initial_tiger_side="right"))
        summary = run_episode(
            env, ScriptedAgent([LISTEN]), 4, MetricsCollector(InstrumentationConfig())
        )
        assert summary == {
            "episode": 0,
            "episode_length": 4,
            "terminated": False,
            "total_reward": -4.0,
        }

    def test_continue_after_terminal_is_gated(self, tmp_path: Path):
        env = make_tiger_environment(TigerConfig(seed=1, initial_tiger_side="left"))
        collector = MetricsCollector(InstrumentationConfig())
        logger = RunLogger(tmp_path, "gated")
        summary = run_episode(
            env,
            ScriptedAgent([OPEN_RIGHT, LISTEN]),
            5,
            collector,
            logger=logger,
            stop_on_terminal=False,
        )
        assert summary["episode_length"] == 5
        assert summary["total_reward"] == -100.0

        events = _read_jsonl(logger.run_dir / "events.jsonl")
        kinds = [e["event"] for e in events]
        assert kinds.count(EventType.GATED_ACTION.value) == 4
        assert kinds.count(EventType.TERMINAL_REACHED.value) == 1

    def test_invalid_budget(self):
        env = make_tiger_environment(TigerConfig(seed=1))
        with pytest.raises(ValueError):
            run_episode(env, ScriptedAgent(), 0, MetricsCollector(InstrumentationConfig()))

    def test_unknown_action_from_agent_propagates(self):
        env = make_tiger_environment(TigerConfig(seed=1))
        with pytest.raises(LookupError):
            run_episode(env, ScriptedAgent(["dance"]), 3, MetricsCollector(InstrumentationConfig()))


class TestRunExperiment:
    def test_writes_all_artifacts(self, tmp_path: Path):
        config = ExperimentConfig(
            tiger=TigerConfig(seed=7),
            episodes=EpisodeConfig(max_steps=30, num_episodes=5),
        )
        summary = run_experiment(config, "exp", tmp_path, agent_policy="belief")

        run_dir = tmp_path / "exp"
        for name in ("config.json", "metrics.jsonl", "events.jsonl", "run_summary.json"):
            assert (run_dir / name).exists()

        assert summary["num_episodes"] == 5
        written = json.loads((run_dir / "run_summary.json").read_text(encoding="utf-8"))
        assert written["mean_return"] == summary["mean_return"]

        cfg = json.loads((run_dir / "config.json").read_text(encoding="utf-8"))
        assert cfg["_agent_policy"] == "belief"

        records = _read_jsonl(run_dir / "metrics.jsonl")
        assert {r["episode"] for r in records} == set(range(5))
        assert all(r["observation"] is None for r in records if r["step"] == 0)

    def test_reproducible_given_seed(self, tmp_path: Path):
        config = default_config(seed=11)
        a = run_experiment(config, "a", tmp_path, agent_policy="random")
        b = run_experiment(config, "b", tmp_path, agent_policy="random")
        assert a["episodes"] == b["episodes"]

    def test_belief_agent_beats_random(self, tmp_path: Path):
        config = ExperimentConfig(
            tiger=TigerConfig(seed=3),
            episodes=EpisodeConfig(max_steps=50, num_episodes=200),
            instrumentation=InstrumentationConfig(enable_step_metrics=False),
        )
        belief = run_experiment(config, "belief", tmp_path, agent_policy="belief")
        rand = run_experiment(config, "random", tmp_path, agent_policy="random")
        assert belief["mean_return"] > rand["mean_return"]

    def test_terminal_actions_allowed(self, tmp_path: Path):
        config = ExperimentConfig(
            environment=EnvironmentSettings(allow_action_from_terminal_states=True),
            tiger=TigerConfig(seed=2, initial_tiger_side="left"),
            episodes=EpisodeConfig(max_steps=3, num_episodes=1),
        )
        summary = run_experiment(
            config,
            "open",
            tmp_path,
            agent_policy="scripted",
            agent_kwargs={"script": [OPEN_LEFT]},
            stop_on_terminal=False,
        )
        assert summary["episodes"][0]["total_reward"] == 30.0


def test_outcomes_reference_copied_actions():
    env = make_tiger_environment(TigerConfig(seed=0, initial_tiger_side="left"))
    action = GroundedAction(LISTEN)
    assert env.execute_action(action).action is not action
