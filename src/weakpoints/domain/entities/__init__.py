"""Runtime entity exports."""

from .creature import SKILL_PER_LEVEL, Creature
from .stats import Stats

__all__ = [
    "Creature",
    "SKILL_PER_LEVEL",
    "Stats",
]
