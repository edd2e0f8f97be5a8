"""Agent policies package — registry and factory for pluggable policies."""

from __future__ import annotations

from pomdpsim.agents.base import BaseAgent
from pomdpsim.agents.belief_agent import TigerBeliefAgent
from pomdpsim.agents.random_agent import RandomAgent
from pomdpsim.agents.scripted_agent import ScriptedAgent

POLICY_REGISTRY: dict[str, type[BaseAgent]] = {
    "random": RandomAgent,
    "scripted": ScriptedAgent,
    "belief": TigerBeliefAgent,
}

ALLOWED_POLICIES = frozenset(POLICY_REGISTRY)


def create_agent(policy: str, **kwargs) -> BaseAgent:
    """Instantiate an agent by policy name.

    Raises KeyError if the policy name is not registered.
    """
    cls = POLICY_REGISTRY[policy]
    return cls(**kwargs)


__all__ = [
    "BaseAgent",
    "ALLOWED_POLICIES",
    "POLICY_REGISTRY",
    "create_agent",
    "RandomAgent",
    "ScriptedAgent",
    "TigerBeliefAgent",
]
