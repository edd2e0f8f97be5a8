"""Default tiger experiment configuration.

Provides the classic tiger problem parameters for quick experiments.
All values are explicit — no hidden magic.
"""

from pomdpsim.config.schema import (
    EnvironmentSettings,
    EpisodeConfig,
    ExperimentConfig,
    InstrumentationConfig,
    TigerConfig,
)


def default_config(seed: int = 42) -> ExperimentConfig:
    """Return a complete, valid default config for the tiger domain."""
    return ExperimentConfig(
        environment=EnvironmentSettings(
            allow_action_from_terminal_states=False,
        ),
        tiger=TigerConfig(
            seed=seed,
            listen_accuracy=0.85,
            listen_reward=-1.0,
            correct_reward=10.0,
            incorrect_reward=-100.0,
            initial_tiger_side=None,
        ),
        episodes=EpisodeConfig(
            max_steps=50,
            num_episodes=10,
        ),
        instrumentation=InstrumentationConfig(),
    )
