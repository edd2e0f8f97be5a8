"""Deterministic seeding utilities.

Stochastic collaborators (observation functions, state generators,
random agents) receive their own seeded generators so that a run is
reproducible from a single root seed.
"""

from __future__ import annotations

import numpy as np


def make_rng(seed: int | None = None) -> np.random.Generator:
    """Create a NumPy Generator from an explicit seed.

    If seed is None a fresh (non-reproducible) generator is returned.
    """
    return np.random.default_rng(seed)


def derive_seed(parent_seed: int, index: int) -> int:
    """Derive a child seed deterministically from a parent seed + index."""
    ss = np.random.SeedSequence(parent_seed).spawn(index + 1)
    return int(ss[-1].generate_state(1)[0])
