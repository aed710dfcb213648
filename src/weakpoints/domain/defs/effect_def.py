"""Effect type definition primitives."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class EffectTypeDef:
    """A status effect that weakpoints may inflict or require (e.g., bleed)."""

    id: str
    name: str
