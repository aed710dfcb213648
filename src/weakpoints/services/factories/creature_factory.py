"""Factory for creating creatures from definitions."""
from __future__ import annotations

from weakpoints.core.rng import RNG
from weakpoints.data.repositories import CreaturesRepository, ProficienciesRepository
from weakpoints.domain.entities import Creature, Stats
from weakpoints.domain.proficiency import ProficiencyTracker
from weakpoints.services.errors import FactoryError

from .id_factory import make_instance_id


def create_creature(
    creature_id: str,
    creatures_repo: CreaturesRepository,
    proficiencies_repo: ProficienciesRepository,
    rng: RNG,
    *,
    is_player: bool = False,
) -> Creature:
    """Instantiate a creature using the provided repositories."""
    try:
        creature_def = creatures_repo.get(creature_id)
    except KeyError as exc:
        raise FactoryError(f"Creature '{creature_id}' not found.") from exc

    tracker = ProficiencyTracker(catalog=proficiencies_repo.catalog())
    for proficiency_id in creature_def.proficiencies:
        tracker.learn(proficiency_id)

    return Creature(
        id=make_instance_id("creature", rng),
        name=creature_def.name,
        stats=Stats(max_hp=creature_def.hp, hp=creature_def.hp),
        proficiencies=tracker,
        skills=dict(creature_def.skills),
        weakpoint_bonus=creature_def.weakpoint_bonus,
        is_player=is_player,
        weakpoint_set_id=creature_def.weakpoint_set_id,
        families_id=creature_def.families_id,
    )
