"""Metrics collector for POMDP episodes.

Ingests EnvironmentOutcomes each step to produce:
  - structured step metric dicts
  - per-episode summaries
  - semantic event records

Respects InstrumentationConfig flags and step_log_frequency.
"""

from __future__ import annotations

from typing import Any

from pomdpsim.config.schema import InstrumentationConfig
from pomdpsim.core.types import EnvironmentOutcome, observation_label
from pomdpsim.metrics.definitions import EventType


class MetricsCollector:
    """Collects and structures metrics for the episodes of one run."""

    def __init__(self, config: InstrumentationConfig) -> None:
        self._config = config
        self._episode_return = 0.0
        self._events: list[dict[str, Any]] = []
        self._summaries: list[dict[str, Any]] = []

    # ------------------------------------------------------------------
    # Episode boundaries
    # ------------------------------------------------------------------

    def record_reset(self, episode: int, observation: Any) -> None:
        """Start a new episode."""
        self._episode_return = 0.0
        if self._config.enable_event_log:
            self._events.append({
                "event": EventType.RESET.value,
                "episode": episode,
                "observation": observation_label(observation),
            })

    # ------------------------------------------------------------------
    # Step metrics
    # ------------------------------------------------------------------

    def collect_step(
        self,
        episode: int,
        step: int,
        outcome: EnvironmentOutcome,
        gated: bool = False,
    ) -> list[dict[str, Any]]:
        """Build the step metric record for one outcome.

        *gated* marks a step that was a no-op because the environment was
        already terminal.  Returns a one-element list, or an empty list if
        step metrics are disabled or this step is skipped by
        step_log_frequency.
        """
        # Accumulate return regardless of logging flags
        self._episode_return += outcome.reward

        if self._config.enable_event_log:
            if gated:
                self._events.append({
                    "event": EventType.GATED_ACTION.value,
                    "episode": episode,
                    "step": step,
                    "action": outcome.action.name,
                })
            elif outcome.terminated:
                self._events.append({
                    "event": EventType.TERMINAL_REACHED.value,
                    "episode": episode,
                    "step": step,
                    "action": outcome.action.name,
                })

        if not self._config.enable_step_metrics:
            return []
        if step % self._config.step_log_frequency != 0:
            return []

        return [{
            "episode": episode,
            "step": step,
            "action": str(outcome.action),
            "observation": observation_label(outcome.observation),
            "next_observation": observation_label(outcome.next_observation),
            "reward": outcome.reward,
            "terminated": outcome.terminated,
            "episode_return": self._episode_return,
        }]

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------

    @property
    def events(self) -> list[dict[str, Any]]:
        """All semantic events collected so far."""
        return list(self._events)

    # ------------------------------------------------------------------
    # Episode summary
    # ------------------------------------------------------------------

    def episode_summary(
        self,
        episode: int,
        episode_length: int,
        terminated: bool,
    ) -> dict[str, Any]:
        """Build (and remember) the summary of the episode just finished.

        Returns an empty dict if episode metrics are disabled.
        """
        if not self._config.enable_episode_metrics:
            return {}
        summary = {
            "episode": episode,
            "episode_length": episode_length,
            "terminated": terminated,
            "total_reward": self._episode_return,
        }
        self._summaries.append(summary)
        return summary

    def run_summary(self) -> dict[str, Any]:
        """Aggregate over every summarised episode."""
        if not self._summaries:
            return {}
        n = len(self._summaries)
        returns = [s["total_reward"] for s in self._summaries]
        return {
            "num_episodes": n,
            "mean_return": sum(returns) / n,
            "terminal_rate": sum(1 for s in self._summaries if s["terminated"]) / n,
            "mean_episode_length": sum(s["episode_length"] for s in self._summaries) / n,
            "episodes": list(self._summaries),
        }

