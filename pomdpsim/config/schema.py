"""Configuration schema for tiger experiments — single source of truth.

These Pydantic models fully describe one reproducible experiment: how
the stepping core gates terminal states, how the tiger domain scores and
observes, how long episodes run and what gets instrumented.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, model_validator


# ---------------------------------------------------------------------------
# Section 1: Stepping core
# ---------------------------------------------------------------------------

class EnvironmentSettings(BaseModel):
    """Knobs of the stepping core itself."""

    allow_action_from_terminal_states: bool = Field(
        default=False,
        description=(
            "If False, acting from a terminal hidden state leaves it unchanged "
            "and yields zero reward."
        ),
    )


# ---------------------------------------------------------------------------
# Section 2: Tiger domain
# ---------------------------------------------------------------------------

class TigerConfig(BaseModel):
    """Dynamics, rewards and observation noise of the tiger domain."""

    seed: int = Field(
        ge=0,
        description="Root seed for observation sampling and initial states.",
    )
    listen_accuracy: float = Field(
        default=0.85,
        gt=0.5, le=1.0,
        description="Probability that listening reports the tiger's true side.",
    )
    listen_reward: float = Field(
        default=-1.0,
        description="Reward for a listen action.",
    )
    correct_reward: float = Field(
        default=10.0,
        description="Reward for opening the door on the tiger's side.",
    )
    incorrect_reward: float = Field(
        default=-100.0,
        description="Reward for opening the other door.",
    )
    initial_tiger_side: Literal["left", "right"] | None = Field(
        default=None,
        description="Fixed initial side. None draws a uniformly random side on every reset.",
    )

    @model_validator(mode="after")
    def correct_beats_incorrect(self) -> TigerConfig:
        if self.correct_reward <= self.incorrect_reward:
            raise ValueError(
                "correct_reward must be greater than incorrect_reward "
                f"(got {self.correct_reward} <= {self.incorrect_reward})."
            )
        return self


# ---------------------------------------------------------------------------
# Section 3: Episodes
# ---------------------------------------------------------------------------

class EpisodeConfig(BaseModel):
    """How many episodes to run and how long each may last."""

    max_steps: int = Field(
        default=100,
        ge=1, le=10_000,
        description="Step budget per episode (episodes also end on terminal states).",
    )
    num_episodes: int = Field(
        default=1,
        ge=1, le=10_000,
        description="Episodes per run.",
    )


# ---------------------------------------------------------------------------
# Section 4: Instrumentation
# ---------------------------------------------------------------------------

class InstrumentationConfig(BaseModel):
    """What metrics to collect and how often."""

    enable_step_metrics: bool = Field(
        default=True,
        description="Collect per-step metrics (observation, action, reward).",
    )
    enable_episode_metrics: bool = Field(
        default=True,
        description="Collect episode-level summary metrics.",
    )
    enable_event_log: bool = Field(
        default=True,
        description="Log semantic events (reset, terminal reached, gated action).",
    )
    step_log_frequency: int = Field(
        default=1, ge=1,
        description="Log step metrics every N steps. 1 = every step.",
    )


# ---------------------------------------------------------------------------
# Top-level config
# ---------------------------------------------------------------------------

class ExperimentConfig(BaseModel):
    """Complete configuration for one tiger experiment."""

    environment: EnvironmentSettings = EnvironmentSettings()
    tiger: TigerConfig
    episodes: EpisodeConfig = EpisodeConfig()
    instrumentation: InstrumentationConfig = InstrumentationConfig()
