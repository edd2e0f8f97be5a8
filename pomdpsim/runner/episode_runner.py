"""Episode runner — drives the agent/environment loop.

Uses MetricsCollector for structured metrics and RunLogger for
persistence.  The agent only ever sees observations; the hidden state
stays inside the environment.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pomdpsim.agents import create_agent
from pomdpsim.agents.base import BaseAgent
from pomdpsim.config.schema import ExperimentConfig
from pomdpsim.core.base_env import SimulatedEnvironment
from pomdpsim.core.po_env import SimulatedPOEnvironment
from pomdpsim.core.seeding import derive_seed
from pomdpsim.envs.tiger import make_tiger_environment
from pomdpsim.metrics.collector import MetricsCollector
from pomdpsim.runner.run_logger import RunLogger


def run_episode(
    env: SimulatedEnvironment | SimulatedPOEnvironment,
    agent: BaseAgent,
    max_steps: int,
    collector: MetricsCollector,
    *,
    episode: int = 0,
    logger: RunLogger | None = None,
    stop_on_terminal: bool = True,
) -> dict[str, Any]:
    """Reset *env* and run one episode of at most *max_steps* actions.

    With *stop_on_terminal* False the loop keeps acting after a terminal
    outcome, which exercises terminal gating.  Returns the episode summary.
    """
    if max_steps < 1:
        raise ValueError(f"max_steps must be >= 1, got {max_steps}")

    env.reset_environment()
    collector.record_reset(episode, env.current_observation())
    events_logged = len(collector.events)

    observation = env.current_observation()
    terminated = False
    steps = 0
    for step in range(max_steps):
        gated = (
            not env.allow_action_from_terminal_states and env.is_in_terminal_state()
        )
        outcome = env.execute_action(agent.act(observation))
        observation = outcome.next_observation
        terminated = outcome.terminated
        steps = step + 1

        records = collector.collect_step(episode, step, outcome, gated=gated)
        if logger is not None:
            all_events = collector.events
            logger.log_step_metrics(records)
            logger.log_events(all_events[events_logged:])
            events_logged = len(all_events)

        if terminated and stop_on_terminal:
            break

    if logger is not None:
        logger.log_events(collector.events[events_logged:])
    return collector.episode_summary(episode, steps, terminated)


def run_experiment(
    config: ExperimentConfig,
    run_id: str,
    storage_base: str | Path,
    *,
    agent_policy: str = "belief",
    agent_kwargs: dict[str, Any] | None = None,
    stop_on_terminal: bool = True,
) -> dict[str, Any]:
    """Run ``config.episodes.num_episodes`` tiger episodes and persist artifacts.

    Returns the run summary (also written to run_summary.json).
    """
    env = make_tiger_environment(config.tiger, config.environment)
    collector = MetricsCollector(config.instrumentation)
    logger = RunLogger(storage_base, run_id)

    config_dump = config.model_dump()
    config_dump["_agent_policy"] = agent_policy
    logger.write_config(config_dump)

    kwargs = dict(agent_kwargs or {})
    if agent_policy == "belief":
        kwargs.setdefault("listen_accuracy", config.tiger.listen_accuracy)
    agent = create_agent(agent_policy, **kwargs)
    for episode in range(config.episodes.num_episodes):
        agent.reset("agent_0", derive_seed(config.tiger.seed, episode + 2))
        run_episode(
            env,
            agent,
            config.episodes.max_steps,
            collector,
            episode=episode,
            logger=logger,
            stop_on_terminal=stop_on_terminal,
        )

    summary = collector.run_summary()
    logger.write_run_summary(summary)
    return summary
