"""Proficiency definition structures."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ProficiencyDef:
    """A learnable proficiency and its weakpoint skill defaults."""

    id: str
    name: str
    time_to_learn: int  # seconds of practice
    default_weakpoint_bonus: float | None = None
    default_weakpoint_penalty: float | None = None
