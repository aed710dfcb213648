"""Attack descriptor consumed by weakpoint selection."""
from __future__ import annotations

from dataclasses import dataclass

from weakpoints.core.types import AttackCategory, DamageType
from weakpoints.domain.damage import DamageInstance
from weakpoints.domain.defs import WeaponDef
from weakpoints.domain.protocols import WeakpointAttacker, WeakpointTarget

# Earlier entries win ties.
_MELEE_PRIORITY = (
    (DamageType.BASH, AttackCategory.MELEE_BASH),
    (DamageType.CUT, AttackCategory.MELEE_CUT),
    (DamageType.STAB, AttackCategory.MELEE_STAB),
)


def type_of_melee_attack(damage: DamageInstance) -> AttackCategory:
    """
    Return the category of the dominant bash/cut/stab component.

    Ties go to bash, then cut, then stab. Damage with no bash, cut or stab
    component maps to NONE.
    """

    best = AttackCategory.NONE
    best_amount = 0.0
    for damage_type, category in _MELEE_PRIORITY:
        amount = damage.amount_of(damage_type)
        if amount > best_amount:
            best = category
            best_amount = amount
    return best


@dataclass(slots=True)
class WeakpointAttack:
    """Snapshot of one attack. Lives only for the resolution that built it."""

    source: WeakpointAttacker | None = None
    target: WeakpointTarget | None = None
    weapon: WeaponDef | None = None
    category: AttackCategory = AttackCategory.NONE
    is_thrown: bool = False
    is_crit: bool = False
    skill: float = 0.0

    @classmethod
    def from_melee(
        cls,
        source: WeakpointAttacker | None,
        target: WeakpointTarget | None,
        weapon: WeaponDef | None,
        damage: DamageInstance,
        *,
        is_crit: bool = False,
    ) -> "WeakpointAttack":
        return cls(
            source=source,
            target=target,
            weapon=weapon,
            category=type_of_melee_attack(damage),
            is_crit=is_crit,
        )

    @classmethod
    def from_projectile(
        cls,
        source: WeakpointAttacker | None,
        target: WeakpointTarget | None,
        weapon: WeaponDef | None,
        *,
        is_crit: bool = False,
    ) -> "WeakpointAttack":
        return cls(
            source=source,
            target=target,
            weapon=weapon,
            category=AttackCategory.PROJECTILE,
            is_thrown=weapon.thrown if weapon is not None else False,
            is_crit=is_crit,
        )

    def compute_skill(self) -> float:
        """Compute, cache and return the attacker's weakpoint skill."""
        if self.source is None:
            self.skill = 0.0
            return self.skill
        skill = self.source.get_weakpoint_skill(self.category, is_thrown=self.is_thrown)
        if self.weapon is not None:
            skill += self.weapon.weakpoint_bonus
        self.skill = skill
        return skill
