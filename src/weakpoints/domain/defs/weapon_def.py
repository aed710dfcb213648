"""Weapon definition structures."""
from __future__ import annotations

from dataclasses import dataclass

from weakpoints.core.types import DamageType
from weakpoints.domain.damage import DamageInstance, DamageUnit


@dataclass(frozen=True, slots=True)
class WeaponDef:
    """Weapon definition exposing only what weakpoint targeting needs."""

    id: str
    name: str
    damage: tuple[tuple[DamageType, float], ...] = ()
    thrown: bool = False
    weakpoint_bonus: float = 0.0

    def damage_instance(self) -> DamageInstance:
        """Return a fresh, mutable damage instance for one attack."""
        return DamageInstance(units=[DamageUnit(type=damage_type, amount=amount) for damage_type, amount in self.damage])
