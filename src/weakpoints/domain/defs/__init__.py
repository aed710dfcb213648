"""Domain definition exports."""

from .creature_def import CreatureDef
from .effect_def import EffectTypeDef
from .proficiency_def import ProficiencyDef
from .weakpoint_def import (
    EffectAppliedEvent,
    Weakpoint,
    WeakpointDifficulty,
    WeakpointEffect,
)
from .weapon_def import WeaponDef

__all__ = [
    "CreatureDef",
    "EffectAppliedEvent",
    "EffectTypeDef",
    "ProficiencyDef",
    "Weakpoint",
    "WeakpointDifficulty",
    "WeakpointEffect",
    "WeaponDef",
]
