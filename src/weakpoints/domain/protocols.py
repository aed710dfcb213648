"""Narrow interfaces the weakpoint core needs from attackers and targets."""
from __future__ import annotations

from typing import Protocol, runtime_checkable

from weakpoints.core.types import AttackCategory


@runtime_checkable
class WeakpointTarget(Protocol):
    """Something that can be struck and carry status effects."""

    @property
    def max_hp(self) -> int: ...

    @property
    def is_player(self) -> bool: ...

    def has_effect(self, effect_id: str) -> bool: ...

    def add_effect(self, effect_id: str, *, duration: int | None, intensity: int) -> bool:
        """Add an effect; ``duration=None`` is permanent. Returns True if it took hold."""
        ...


@runtime_checkable
class WeakpointAttacker(Protocol):
    """Something that aims for weakpoints and learns proficiencies."""

    def get_weakpoint_skill(self, category: AttackCategory, *, is_thrown: bool = False) -> float: ...

    def has_proficiency(self, proficiency_id: str) -> bool: ...

    def practice_proficiency(self, proficiency_id: str, seconds: int) -> bool:
        """Return True only when the proficiency went from unlearned to learned."""
        ...
