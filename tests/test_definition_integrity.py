from __future__ import annotations

from pathlib import Path

import pytest

from weakpoints.data import paths
from weakpoints.data.json_loader import load_json
from weakpoints.data.repositories import (
    CreaturesRepository,
    EffectTypesRepository,
    ProficienciesRepository,
    WeakpointFamiliesRepository,
    WeakpointSetsRepository,
    WeaponsRepository,
)


@pytest.fixture(scope="module")
def definitions_dir() -> Path:
    """Return the canonical definitions directory."""
    return paths.get_definitions_path()


@pytest.mark.parametrize(
    "filename",
    [
        "effects.json",
        "proficiencies.json",
        "weakpoint_sets.json",
        "weakpoint_families.json",
        "weapons.json",
        "creatures.json",
    ],
)
def test_definition_files_are_valid_json(definitions_dir: Path, filename: str) -> None:
    """Every definition file should be parsable JSON objects."""
    assert isinstance(load_json(definitions_dir / filename), dict)


def test_shipped_definitions_load_and_cross_reference() -> None:
    effects = EffectTypesRepository()
    proficiencies = ProficienciesRepository()
    sets_repo = WeakpointSetsRepository(effects)
    families_repo = WeakpointFamiliesRepository(proficiencies)
    creatures = CreaturesRepository(sets_repo, families_repo, proficiencies)

    assert {creature.id for creature in creatures.all()} >= {"zombie", "survivor"}
    assert WeaponsRepository().get("crowbar").damage
    humanoid = sets_repo.get("humanoid")
    assert "head" in humanoid.ids()
    assert sum(weakpoint.coverage for weakpoint in humanoid.weakpoint_list) <= 100


def test_shipped_weakpoint_ids_are_unique() -> None:
    sets_repo = WeakpointSetsRepository(EffectTypesRepository())

    for weakpoint_set in sets_repo.all():
        ids = weakpoint_set.ids()
        assert len(ids) == len(set(ids))
