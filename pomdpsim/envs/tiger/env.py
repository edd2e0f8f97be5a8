"""Factory for a ready-to-run tiger POMDP environment."""

from __future__ import annotations

from pomdpsim.config.schema import EnvironmentSettings, TigerConfig
from pomdpsim.core.po_env import SimulatedPOEnvironment
from pomdpsim.core.seeding import derive_seed, make_rng
from pomdpsim.envs.tiger.domain import TigerStateGenerator, build_tiger_domain
from pomdpsim.envs.tiger.rewards import TigerRewardFunction
from pomdpsim.envs.tiger.state import Side, TigerState
from pomdpsim.envs.tiger.termination import is_terminal


def make_tiger_environment(
    config: TigerConfig,
    settings: EnvironmentSettings | None = None,
) -> SimulatedPOEnvironment:
    """Build a tiger environment from config.

    Observation sampling and initial-state draws use independent
    generators derived from ``config.seed``.
    """
    settings = settings or EnvironmentSettings()
    domain = build_tiger_domain(config, make_rng(derive_seed(config.seed, 0)))

    if config.initial_tiger_side is not None:
        source = {"initial_state": TigerState(tiger=Side(config.initial_tiger_side))}
    else:
        source = {
            "state_generator": TigerStateGenerator(make_rng(derive_seed(config.seed, 1)))
        }

    return SimulatedPOEnvironment(
        domain,
        TigerRewardFunction(config),
        is_terminal,
        allow_action_from_terminal_states=settings.allow_action_from_terminal_states,
        **source,
    )
