"""Weakpoint service resolving a single landed hit."""
from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import List

from weakpoints.core.rng import RNG
from weakpoints.data.repositories import WeakpointFamiliesRepository, WeakpointSetsRepository
from weakpoints.domain.attack import WeakpointAttack
from weakpoints.domain.damage import DamageInstance, Resistances
from weakpoints.domain.defs import EffectAppliedEvent, WeaponDef
from weakpoints.domain.entities import Creature
from weakpoints.domain.families import WeakpointFamilies
from weakpoints.domain.weakpoints import WeakpointSet

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class WeakpointEvent:
    """Base weakpoint event."""


@dataclass(slots=True)
class WeakpointHitEvent(WeakpointEvent):
    attacker_id: str
    target_id: str
    target_name: str
    weakpoint_id: str
    weakpoint_name: str
    is_crit: bool
    damage: int
    target_hp: int


@dataclass(slots=True)
class EffectInflictedEvent(WeakpointEvent):
    target_id: str
    target_name: str
    applied: EffectAppliedEvent


@dataclass(slots=True)
class ProficiencyPracticedEvent(WeakpointEvent):
    learner_id: str
    reason: str
    learned: bool


@dataclass(slots=True)
class CreatureKilledEvent(WeakpointEvent):
    creature_id: str
    creature_name: str


class WeakpointService:
    """Runs a landed hit through selection, armor, damage and effects."""

    def __init__(
        self,
        weakpoint_sets_repo: WeakpointSetsRepository,
        families_repo: WeakpointFamiliesRepository,
    ) -> None:
        self._weakpoint_sets_repo = weakpoint_sets_repo
        self._families_repo = families_repo

    def weakpoints_for(self, creature: Creature) -> WeakpointSet:
        if creature.weakpoint_set_id is None:
            return WeakpointSet()
        return self._weakpoint_sets_repo.get(creature.weakpoint_set_id)

    def families_for(self, creature: Creature) -> WeakpointFamilies:
        if creature.families_id is None:
            return WeakpointFamilies()
        return self._families_repo.get(creature.families_id)

    def resolve_hit(
        self,
        attacker: Creature | None,
        target: Creature,
        rng: RNG,
        *,
        weapon: WeaponDef | None = None,
        damage: DamageInstance | None = None,
        resistances: Resistances | None = None,
        is_crit: bool = False,
        is_projectile: bool = False,
    ) -> List[WeakpointEvent]:
        """
        Resolve a hit that already landed.

        Order: build the attack and its skill, select a weakpoint, transform
        armor, apply damage multipliers, deal the damage, roll effects and
        finally practice the target's weakpoint families.
        """

        if damage is None:
            damage = weapon.damage_instance() if weapon is not None else DamageInstance()
        else:
            damage = DamageInstance(units=[replace(unit) for unit in damage.units])
        if is_projectile:
            attack = WeakpointAttack.from_projectile(attacker, target, weapon, is_crit=is_crit)
        else:
            attack = WeakpointAttack.from_melee(attacker, target, weapon, damage, is_crit=is_crit)
        attack.compute_skill()

        families = self.families_for(target)
        weakpoint = self.weakpoints_for(target).select_weakpoint(attack, rng, families)

        armor = Resistances(values=dict(resistances.values)) if resistances is not None else Resistances()
        weakpoint.apply_to(armor)
        weakpoint.apply_to_damage(damage, is_crit)
        total_damage = damage.total_damage(armor)
        dealt = target.stats.take_damage(total_damage)

        events: List[WeakpointEvent] = [
            WeakpointHitEvent(
                attacker_id=attacker.id if attacker is not None else "",
                target_id=target.id,
                target_name=target.name,
                weakpoint_id=weakpoint.id,
                weakpoint_name=weakpoint.name,
                is_crit=is_crit,
                damage=dealt,
                target_hp=target.stats.hp,
            )
        ]
        for applied in weakpoint.apply_effects(target, total_damage, attack, rng):
            events.append(EffectInflictedEvent(target_id=target.id, target_name=target.name, applied=applied))

        if attacker is not None:
            events.append(
                ProficiencyPracticedEvent(
                    learner_id=attacker.id, reason="hit", learned=families.practice_hit(attacker)
                )
            )
        if not target.is_alive:
            events.append(CreatureKilledEvent(creature_id=target.id, creature_name=target.name))
            if attacker is not None:
                events.append(
                    ProficiencyPracticedEvent(
                        learner_id=attacker.id, reason="kill", learned=families.practice_kill(attacker)
                    )
                )
        logger.debug("Hit on '%s' struck weakpoint '%s' for %d", target.name, weakpoint.id, dealt)
        return events

    def dissect(self, learner: Creature, corpse: Creature) -> ProficiencyPracticedEvent:
        """Practice the corpse's weakpoint families through dissection."""
        learned = self.families_for(corpse).practice_dissect(learner)
        return ProficiencyPracticedEvent(learner_id=learner.id, reason="dissect", learned=learned)
