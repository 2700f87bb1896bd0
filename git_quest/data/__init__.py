"""Shipped game content for git-quest."""

from .scenarios import SCENARIOS, SCENARIO_ORDER
from .achievements import ACHIEVEMENTS

__all__ = ["SCENARIOS", "SCENARIO_ORDER", "ACHIEVEMENTS"]
