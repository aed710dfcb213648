"""Repository exports."""

from .creatures_repo import CreaturesRepository
from .effects_repo import EffectTypesRepository
from .proficiencies_repo import ProficienciesRepository
from .weakpoint_families_repo import WeakpointFamiliesRepository
from .weakpoint_sets_repo import WeakpointSetsRepository
from .weapons_repo import WeaponsRepository

__all__ = [
    "CreaturesRepository",
    "EffectTypesRepository",
    "ProficienciesRepository",
    "WeakpointFamiliesRepository",
    "WeakpointSetsRepository",
    "WeaponsRepository",
]
