"""Weakpoint definition structures and their per-attack transforms."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List, Mapping, Tuple

from weakpoints.core.types import AttackCategory, DamageType, FloatRange, Range

if TYPE_CHECKING:
    from weakpoints.core.rng import RNG
    from weakpoints.domain.attack import WeakpointAttack
    from weakpoints.domain.damage import DamageInstance, Resistances
    from weakpoints.domain.protocols import WeakpointTarget

logger = logging.getLogger(__name__)

NUM_DAMAGE_TYPES = len(DamageType)
NUM_ATTACK_CATEGORIES = len(AttackCategory)

DEFAULT_COVERAGE = 100.0
DEFAULT_COVERAGE_MULT = 1.0
# A difficulty at or below this value means the category has no gate.
DEFAULT_DIFFICULTY = -100.0


def per_type(value: float) -> Tuple[float, ...]:
    return (value,) * NUM_DAMAGE_TYPES


@dataclass(frozen=True, slots=True)
class WeakpointDifficulty:
    """One float per attack category."""

    values: Tuple[float, ...]

    @classmethod
    def filled(cls, default_value: float) -> "WeakpointDifficulty":
        return cls(values=(default_value,) * NUM_ATTACK_CATEGORIES)

    def of(self, attack: "WeakpointAttack") -> float:
        return self.values[attack.category]

    def with_overrides(self, overrides: Mapping[AttackCategory, float]) -> "WeakpointDifficulty":
        values = list(self.values)
        for category, value in overrides.items():
            values[category] = value
        return WeakpointDifficulty(values=tuple(values))


@dataclass(frozen=True, slots=True)
class EffectAppliedEvent:
    """Reports a weakpoint effect that took hold on the target."""

    effect_id: str
    weakpoint_id: str
    duration: int | None
    intensity: int
    message: str | None = None


@dataclass(frozen=True, slots=True)
class WeakpointEffect:
    """An effect that hitting a weakpoint can cause."""

    effect: str
    chance: float = 1.0
    permanent: bool = False
    duration: Range = (1, 1)
    intensity: Range = (1, 1)
    damage_required: FloatRange = (0.0, 1.0)
    message: str | None = None

    def apply_to(
        self,
        target: "WeakpointTarget",
        total_damage: int,
        attack: "WeakpointAttack",
        rng: "RNG",
        *,
        weakpoint_id: str = "",
    ) -> EffectAppliedEvent | None:
        """Maybe apply the effect. Returns an event when it takes hold."""

        max_hp = target.max_hp
        if max_hp <= 0:
            return None
        fraction = total_damage / max_hp
        low, high = self.damage_required
        if fraction < low or fraction > high:
            return None
        if rng.random() >= self.chance:
            logger.debug("Effect %s failed its %.2f chance roll", self.effect, self.chance)
            return None

        duration: int | None = rng.randint(*self.duration)
        intensity = rng.randint(*self.intensity)
        if self.permanent:
            duration = None
        if not target.add_effect(self.effect, duration=duration, intensity=intensity):
            return None

        logger.debug(
            "Applied %s (intensity %d, duration %s) via weakpoint '%s'",
            self.effect,
            intensity,
            "permanent" if duration is None else duration,
            weakpoint_id,
        )
        message = self.message if self.message and target.is_player else None
        return EffectAppliedEvent(
            effect_id=self.effect,
            weakpoint_id=weakpoint_id,
            duration=duration,
            intensity=intensity,
            message=message,
        )


@dataclass(frozen=True, slots=True)
class Weakpoint:
    """A struck location with its own armor, damage and effect modifiers."""

    id: str
    name: str = ""
    coverage: float = DEFAULT_COVERAGE
    armor_mult: Tuple[float, ...] = field(default_factory=lambda: per_type(1.0))
    armor_penalty: Tuple[float, ...] = field(default_factory=lambda: per_type(0.0))
    damage_mult: Tuple[float, ...] = field(default_factory=lambda: per_type(1.0))
    crit_mult: Tuple[float, ...] = field(default_factory=lambda: per_type(1.0))
    required_effects: Tuple[str, ...] = ()
    effects: Tuple[WeakpointEffect, ...] = ()
    coverage_mult: WeakpointDifficulty = field(
        default_factory=lambda: WeakpointDifficulty.filled(DEFAULT_COVERAGE_MULT)
    )
    difficulty: WeakpointDifficulty = field(
        default_factory=lambda: WeakpointDifficulty.filled(DEFAULT_DIFFICULTY)
    )

    def apply_to(self, resistances: "Resistances") -> None:
        """Scale then reduce armor in place. Armor never drops below zero."""
        for damage_type in DamageType:
            current = resistances.get(damage_type)
            adjusted = current * self.armor_mult[damage_type] - self.armor_penalty[damage_type]
            resistances.set(damage_type, max(0.0, adjusted))

    def apply_to_damage(self, damage: "DamageInstance", is_crit: bool) -> None:
        """Scale each damage unit by the crit or normal multiplier, never both."""
        multipliers = self.crit_mult if is_crit else self.damage_mult
        for unit in damage.units:
            unit.damage_multiplier *= multipliers[unit.type]

    def apply_effects(
        self,
        target: "WeakpointTarget",
        total_damage: int,
        attack: "WeakpointAttack",
        rng: "RNG",
    ) -> List[EffectAppliedEvent]:
        events: List[EffectAppliedEvent] = []
        for effect in self.effects:
            event = effect.apply_to(target, total_damage, attack, rng, weakpoint_id=self.id)
            if event is not None:
                events.append(event)
        return events

    def hit_chance(self, attack: "WeakpointAttack") -> float:
        """Probability of striking this weakpoint before gating and normalization."""
        return self.coverage * self.coverage_mult.of(attack) / 100.0

    def meets_requirements(self, target: "WeakpointTarget | None") -> bool:
        if not self.required_effects:
            return True
        if target is None:
            return False
        return all(target.has_effect(effect_id) for effect_id in self.required_effects)

    def passes_difficulty(self, attack: "WeakpointAttack", family_modifier: float = 0.0) -> bool:
        difficulty = self.difficulty.of(attack)
        if difficulty <= DEFAULT_DIFFICULTY:
            return True
        return attack.skill + family_modifier >= difficulty

    def is_eligible(
        self,
        attack: "WeakpointAttack",
        target: "WeakpointTarget | None",
        family_modifier: float = 0.0,
    ) -> bool:
        return self.meets_requirements(target) and self.passes_difficulty(attack, family_modifier)
