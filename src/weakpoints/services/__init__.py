"""Service layer exports."""

from .errors import FactoryError
from .weakpoint_service import (
    CreatureKilledEvent,
    EffectInflictedEvent,
    ProficiencyPracticedEvent,
    WeakpointEvent,
    WeakpointHitEvent,
    WeakpointService,
)

__all__ = [
    "CreatureKilledEvent",
    "EffectInflictedEvent",
    "FactoryError",
    "ProficiencyPracticedEvent",
    "WeakpointEvent",
    "WeakpointHitEvent",
    "WeakpointService",
]
