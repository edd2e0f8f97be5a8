"""Assembly of the tiger PO domain and its initial-state distribution."""

from __future__ import annotations

import numpy as np

from pomdpsim.config.schema import TigerConfig
from pomdpsim.core.domain import PODomain
from pomdpsim.envs.tiger.actions import ListenAction, OpenDoorAction
from pomdpsim.envs.tiger.observations import TigerObservationFunction
from pomdpsim.envs.tiger.state import Side, TigerState


class TigerStateGenerator:
    """Uniformly random tiger side, both doors closed."""

    def __init__(self, rng: np.random.Generator) -> None:
        self._rng = rng

    def generate(self) -> TigerState:
        side = Side.LEFT if self._rng.random() < 0.5 else Side.RIGHT
        return TigerState(tiger=side)


def build_tiger_domain(config: TigerConfig, rng: np.random.Generator) -> PODomain:
    return PODomain(
        actions=[ListenAction(), OpenDoorAction(Side.LEFT), OpenDoorAction(Side.RIGHT)],
        observation_function=TigerObservationFunction(config.listen_accuracy, rng),
    )
