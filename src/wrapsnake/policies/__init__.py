# src/wrapsnake/policies/__init__.py
"""Autopilot policies: pick the next Intent from a GameState."""

from wrapsnake.policies.random import policy_random
from wrapsnake.policies.greedy import policy_greedy

POLICIES = {
    "random": policy_random,
    "greedy": policy_greedy,
}

__all__ = ["policy_random", "policy_greedy", "POLICIES"]
