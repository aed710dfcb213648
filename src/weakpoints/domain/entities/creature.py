"""Creature model that can both attack weakpoints and be struck on them."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List

from weakpoints.core.types import MELEE_CATEGORIES, AttackCategory
from weakpoints.domain.proficiency import ProficiencyTracker
from weakpoints.domain.status_effects import ActiveEffect, apply_effect_keep_strongest, has_effect

from .stats import Stats

SKILL_PER_LEVEL = 1.0


@dataclass(slots=True)
class Creature:
    """Represents an attacker or target in a single weakpoint resolution."""

    id: str
    name: str
    stats: Stats
    proficiencies: ProficiencyTracker
    skills: Dict[str, float] = field(default_factory=dict)
    weakpoint_bonus: float = 0.0  # flat bonus from traits and gear
    effects: List[ActiveEffect] = field(default_factory=list)
    is_player: bool = False
    weakpoint_set_id: str | None = None
    families_id: str | None = None

    @property
    def max_hp(self) -> int:
        return self.stats.max_hp

    @property
    def is_alive(self) -> bool:
        return self.stats.hp > 0

    def has_effect(self, effect_id: str) -> bool:
        return has_effect(self.effects, effect_id)

    def add_effect(self, effect_id: str, *, duration: int | None, intensity: int) -> bool:
        return apply_effect_keep_strongest(
            self.effects, effect_id=effect_id, intensity=intensity, duration=duration
        )

    def get_weakpoint_skill(self, category: AttackCategory, *, is_thrown: bool = False) -> float:
        if category in MELEE_CATEGORIES:
            level = self.skills.get("melee", 0.0)
        elif category == AttackCategory.PROJECTILE:
            level = self.skills.get("throw" if is_thrown else "ranged", 0.0)
        else:
            return 0.0
        return (level + self.weakpoint_bonus) * SKILL_PER_LEVEL

    def has_proficiency(self, proficiency_id: str) -> bool:
        return self.proficiencies.has(proficiency_id)

    def practice_proficiency(self, proficiency_id: str, seconds: int) -> bool:
        return self.proficiencies.practice(proficiency_id, seconds)
