"""Weakpoint sets and weighted weakpoint selection."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, List

from weakpoints.core.rng import RNG
from weakpoints.domain.attack import WeakpointAttack
from weakpoints.domain.defs import Weakpoint
from weakpoints.domain.families import WeakpointFamilies

logger = logging.getLogger(__name__)

# Hit chances are probabilities; whatever the list leaves of this space
# belongs to the default weakpoint.
SELECTION_SPACE = 1.0


@dataclass(slots=True)
class WeakpointSet:
    """All weakpoints of one attackable creature type, plus a default."""

    weakpoint_list: List[Weakpoint] = field(default_factory=list)
    default_weakpoint: Weakpoint = field(default_factory=lambda: Weakpoint(id=""))

    def select_weakpoint(
        self,
        attack: WeakpointAttack,
        rng: RNG,
        families: WeakpointFamilies | None = None,
    ) -> Weakpoint:
        """
        Pick the weakpoint an attack strikes.

        Weakpoints whose required effects are missing from the target, or
        whose difficulty exceeds the attacker's effective skill, sit out the
        draw entirely. The rest are drawn by hit chance out of a space of
        1.0; the unclaimed remainder selects the default weakpoint. When the
        eligible chances add up past 1.0 they are normalized instead.
        """

        family_modifier = 0.0
        if families is not None and attack.source is not None:
            family_modifier = families.modifier(attack.source)

        candidates: List[Weakpoint] = []
        weights: List[float] = []
        for weakpoint in self.weakpoint_list:
            if not weakpoint.is_eligible(attack, attack.target, family_modifier):
                continue
            weight = weakpoint.hit_chance(attack)
            if weight <= 0:
                continue
            candidates.append(weakpoint)
            weights.append(weight)

        total = sum(weights)
        if total <= 0:
            logger.debug("No eligible weakpoints; using default")
            return self.default_weakpoint

        index = rng.weighted_index(weights, remainder=max(0.0, SELECTION_SPACE - total))
        if index is None:
            return self.default_weakpoint
        weakpoint = candidates[index]
        logger.debug("Selected weakpoint '%s' (skill %.2f)", weakpoint.id, attack.skill)
        return weakpoint

    def ids(self) -> List[str]:
        return [weakpoint.id for weakpoint in self.weakpoint_list]

    def get(self, weakpoint_id: str) -> Weakpoint:
        for weakpoint in self.weakpoint_list:
            if weakpoint.id == weakpoint_id:
                return weakpoint
        raise KeyError(weakpoint_id)

    def clear(self) -> None:
        self.weakpoint_list.clear()

    def load(self, weakpoints: Iterable[Weakpoint]) -> None:
        """Merge weakpoints by id: replace in place or append."""
        for weakpoint in weakpoints:
            for index, existing in enumerate(self.weakpoint_list):
                if existing.id == weakpoint.id:
                    self.weakpoint_list[index] = weakpoint
                    break
            else:
                self.weakpoint_list.append(weakpoint)

    def remove(self, weakpoint_ids: Iterable[str]) -> List[str]:
        """Remove weakpoints by id. Returns the ids that were not present."""
        wanted = set(weakpoint_ids)
        present = set(self.ids())
        self.weakpoint_list = [weakpoint for weakpoint in self.weakpoint_list if weakpoint.id not in wanted]
        return sorted(wanted - present)
