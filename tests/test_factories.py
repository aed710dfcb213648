from __future__ import annotations

import pytest

from weakpoints.core.rng import RNG
from weakpoints.data.repositories import (
    CreaturesRepository,
    EffectTypesRepository,
    ProficienciesRepository,
    WeakpointFamiliesRepository,
    WeakpointSetsRepository,
)
from weakpoints.services.errors import FactoryError
from weakpoints.services.factories import create_creature, make_instance_id


def _repos() -> tuple[CreaturesRepository, ProficienciesRepository]:
    proficiencies = ProficienciesRepository()
    creatures = CreaturesRepository(
        WeakpointSetsRepository(EffectTypesRepository()),
        WeakpointFamiliesRepository(proficiencies),
        proficiencies,
    )
    return creatures, proficiencies


def test_make_instance_id_is_deterministic() -> None:
    assert make_instance_id("creature", RNG(4)) == make_instance_id("creature", RNG(4))


def test_create_creature_copies_definition() -> None:
    creatures, proficiencies = _repos()

    veteran = create_creature("veteran", creatures, proficiencies, RNG(1), is_player=True)

    assert veteran.name == "Veteran"
    assert veteran.stats.hp == veteran.stats.max_hp == 100
    assert veteran.is_player is True
    assert veteran.has_proficiency("prof_wp_zombie")
    assert veteran.skills["melee"] == 7


def test_create_creature_unknown_id_raises() -> None:
    creatures, proficiencies = _repos()

    with pytest.raises(FactoryError):
        create_creature("dragon", creatures, proficiencies, RNG(1))
