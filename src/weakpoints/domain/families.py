"""Weakpoint families: proficiency-driven skill bonuses and penalties."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, List

from weakpoints.domain.protocols import WeakpointAttacker

logger = logging.getLogger(__name__)

# Practice amounts, in seconds of proficiency training.
PRACTICE_HIT_SECONDS = 60
PRACTICE_KILL_SECONDS = 900
PRACTICE_DISSECT_CAP_SECONDS = 1000
PRACTICE_DISSECT_FRACTION = 0.1


@dataclass(frozen=True, slots=True)
class WeakpointFamily:
    """Ties an optional bonus/penalty pair to a proficiency."""

    proficiency: str
    id: str = ""
    bonus: float | None = None
    penalty: float | None = None
    # Filled in from the proficiency definition at load time.
    default_bonus: float | None = None
    default_penalty: float | None = None
    time_to_learn: int = 0

    def __post_init__(self) -> None:
        if not self.id:
            object.__setattr__(self, "id", self.proficiency)

    @property
    def effective_bonus(self) -> float:
        if self.bonus is not None:
            return self.bonus
        return self.default_bonus if self.default_bonus is not None else 0.0

    @property
    def effective_penalty(self) -> float:
        if self.penalty is not None:
            return self.penalty
        return self.default_penalty if self.default_penalty is not None else 0.0

    def modifier(self, attacker: WeakpointAttacker) -> float:
        if attacker.has_proficiency(self.proficiency):
            return self.effective_bonus
        return -self.effective_penalty


@dataclass(slots=True)
class WeakpointFamilies:
    """Ordered collection of families belonging to one creature type."""

    families: List[WeakpointFamily] = field(default_factory=list)

    def modifier(self, attacker: WeakpointAttacker) -> float:
        return sum(family.modifier(attacker) for family in self.families)

    def practice(self, learner: WeakpointAttacker, seconds: int) -> bool:
        """Practice every family. Returns True if any proficiency was learned."""
        learned = False
        for family in self.families:
            learned |= learner.practice_proficiency(family.proficiency, seconds)
        if learned:
            logger.info("Practice for %ds completed a weakpoint proficiency", seconds)
        return learned

    def practice_hit(self, learner: WeakpointAttacker) -> bool:
        return self.practice(learner, PRACTICE_HIT_SECONDS)

    def practice_kill(self, learner: WeakpointAttacker) -> bool:
        return self.practice(learner, PRACTICE_KILL_SECONDS)

    def practice_dissect(self, learner: WeakpointAttacker) -> bool:
        # Dissection teaches a fraction of each proficiency, capped per corpse.
        learned = False
        for family in self.families:
            seconds = min(PRACTICE_DISSECT_CAP_SECONDS, int(family.time_to_learn * PRACTICE_DISSECT_FRACTION))
            learned |= learner.practice_proficiency(family.proficiency, seconds)
        logger.debug("Dissection practiced %d families (learned=%s)", len(self.families), learned)
        return learned

    def ids(self) -> List[str]:
        return [family.id for family in self.families]

    def clear(self) -> None:
        self.families.clear()

    def load(self, families: Iterable[WeakpointFamily]) -> None:
        """Merge families by id: replace in place or append."""
        for family in families:
            for index, existing in enumerate(self.families):
                if existing.id == family.id:
                    self.families[index] = family
                    break
            else:
                self.families.append(family)

    def remove(self, family_ids: Iterable[str]) -> List[str]:
        """Remove families by id. Returns the ids that were not present."""
        wanted = set(family_ids)
        present = {family.id for family in self.families}
        self.families = [family for family in self.families if family.id not in wanted]
        return sorted(wanted - present)
