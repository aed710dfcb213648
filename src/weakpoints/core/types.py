"""Shared enums and type aliases for the core and domain layers."""
from __future__ import annotations

from enum import IntEnum
from typing import Tuple


class AttackCategory(IntEnum):
    """Closed set of attack categories used to index difficulty tables."""

    NONE = 0  # falls, spells, effects and other non-combat sources
    MELEE_BASH = 1
    MELEE_CUT = 2
    MELEE_STAB = 3
    PROJECTILE = 4  # thrown weapons and guns


class DamageType(IntEnum):
    """Damage types; values index the per-type weakpoint arrays."""

    PURE = 0
    BIOLOGICAL = 1
    BASH = 2
    CUT = 3
    ACID = 4
    STAB = 5
    HEAT = 6
    COLD = 7
    ELECTRIC = 8
    BULLET = 9


MELEE_CATEGORIES = (
    AttackCategory.MELEE_BASH,
    AttackCategory.MELEE_CUT,
    AttackCategory.MELEE_STAB,
)

PHYSICAL_DAMAGE_TYPES = (DamageType.BASH, DamageType.CUT, DamageType.STAB, DamageType.BULLET)

Range = Tuple[int, int]
FloatRange = Tuple[float, float]

__all__ = [
    "AttackCategory",
    "DamageType",
    "FloatRange",
    "MELEE_CATEGORIES",
    "PHYSICAL_DAMAGE_TYPES",
    "Range",
]
