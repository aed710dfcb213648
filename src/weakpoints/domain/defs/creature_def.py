"""Creature definition structures."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CreatureDef:
    """A creature type: health, aiming skill and the weakpoints it exposes."""

    id: str
    name: str
    hp: int
    skills: tuple[tuple[str, float], ...] = ()
    weakpoint_bonus: float = 0.0
    weakpoint_set_id: str | None = None
    families_id: str | None = None
    proficiencies: tuple[str, ...] = ()
