"""Learner-side proficiency progress."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Mapping, Set

from weakpoints.domain.defs import ProficiencyDef

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ProficiencyTracker:
    """Tracks practice time and learned proficiencies for one character."""

    catalog: Mapping[str, ProficiencyDef]
    learned: Set[str] = field(default_factory=set)
    progress: Dict[str, int] = field(default_factory=dict)

    def has(self, proficiency_id: str) -> bool:
        return proficiency_id in self.learned

    def learn(self, proficiency_id: str) -> bool:
        if proficiency_id in self.learned:
            return False
        self.learned.add(proficiency_id)
        self.progress.pop(proficiency_id, None)
        logger.info("Learned proficiency %s", proficiency_id)
        return True

    def practice(self, proficiency_id: str, seconds: int) -> bool:
        """Add practice time. Returns True only on the learn transition."""
        if proficiency_id in self.learned or seconds <= 0:
            return False
        definition = self.catalog[proficiency_id]
        spent = self.progress.get(proficiency_id, 0) + seconds
        if spent >= definition.time_to_learn:
            return self.learn(proficiency_id)
        self.progress[proficiency_id] = spent
        return False

    def time_to_learn(self, proficiency_id: str) -> int:
        return self.catalog[proficiency_id].time_to_learn
