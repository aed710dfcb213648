"""Damage and resistance containers used by weakpoint transforms."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List

from weakpoints.core.types import DamageType


@dataclass(slots=True)
class DamageUnit:
    """A single typed chunk of damage within an attack."""

    type: DamageType
    amount: float
    res_pen: float = 0.0
    damage_multiplier: float = 1.0


@dataclass(slots=True)
class DamageInstance:
    """Composite damage dealt by one attack."""

    units: List[DamageUnit] = field(default_factory=list)

    @classmethod
    def of(cls, amounts: Dict[DamageType, float]) -> "DamageInstance":
        return cls(units=[DamageUnit(type=damage_type, amount=amount) for damage_type, amount in amounts.items()])

    def amount_of(self, damage_type: DamageType) -> float:
        return sum(unit.amount for unit in self.units if unit.type == damage_type)

    def total_damage(self, resistances: "Resistances") -> int:
        """
        Sum the damage that gets through armor.

        Armor is subtracted from each unit first; the unit's multiplier
        scales whatever is left.
        """

        total = 0.0
        for unit in self.units:
            resist = max(0.0, resistances.get(unit.type) - unit.res_pen)
            total += max(0.0, unit.amount - resist) * unit.damage_multiplier
        return int(total)


@dataclass(slots=True)
class Resistances:
    """Armor values per damage type. Missing types resist nothing."""

    values: Dict[DamageType, float] = field(default_factory=dict)

    def get(self, damage_type: DamageType) -> float:
        return self.values.get(damage_type, 0.0)

    def set(self, damage_type: DamageType, value: float) -> None:
        self.values[damage_type] = value

    @classmethod
    def uniform(cls, value: float, types: Iterable[DamageType] = tuple(DamageType)) -> "Resistances":
        return cls(values={damage_type: value for damage_type in types})
