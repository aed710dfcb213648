"""Status effect bookkeeping for creatures struck on a weakpoint."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence


@dataclass(slots=True)
class ActiveEffect:
    """Tracks an effect currently on a creature."""

    effect_id: str
    intensity: int
    duration: int | None  # None is permanent

    @property
    def is_permanent(self) -> bool:
        return self.duration is None


def apply_effect_keep_strongest(
    effects: List[ActiveEffect],
    *,
    effect_id: str,
    intensity: int,
    duration: int | None,
) -> bool:
    """
    Apply an effect without stacking.

    An existing effect of the same id is only replaced when the new one
    is more intense; its duration is extended to the longer of the two.
    Returns True if the effect was added or intensified.
    """

    for existing in effects:
        if existing.effect_id != effect_id:
            continue
        if intensity <= existing.intensity:
            return False
        existing.intensity = intensity
        if existing.duration is not None:
            existing.duration = None if duration is None else max(existing.duration, duration)
        return True
    effects.append(ActiveEffect(effect_id=effect_id, intensity=intensity, duration=duration))
    return True


def has_effect(effects: Sequence[ActiveEffect], effect_id: str) -> bool:
    return any(effect.effect_id == effect_id for effect in effects)
