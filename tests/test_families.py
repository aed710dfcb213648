from __future__ import annotations

import logging

import pytest

from weakpoints.domain.defs import ProficiencyDef
from weakpoints.domain.families import (
    PRACTICE_DISSECT_CAP_SECONDS,
    PRACTICE_HIT_SECONDS,
    PRACTICE_KILL_SECONDS,
    WeakpointFamilies,
    WeakpointFamily,
)
from weakpoints.domain.proficiency import ProficiencyTracker

from tests.helpers.fakes import FakeAttacker


def test_family_bonus_when_proficient_penalty_otherwise() -> None:
    family = WeakpointFamily(proficiency="prof_wp_zombie", bonus=2.0, penalty=1.5)

    assert family.id == "prof_wp_zombie"
    assert family.modifier(FakeAttacker(known={"prof_wp_zombie"})) == 2.0
    assert family.modifier(FakeAttacker()) == -1.5


def test_missing_bonus_and_penalty_contribute_nothing() -> None:
    family = WeakpointFamily(proficiency="prof_wp_bird")

    assert family.modifier(FakeAttacker(known={"prof_wp_bird"})) == 0.0
    assert family.modifier(FakeAttacker()) == 0.0


def test_explicit_zero_overrides_proficiency_default() -> None:
    family = WeakpointFamily(proficiency="prof", bonus=0.0, default_bonus=3.0, default_penalty=2.0)

    assert family.modifier(FakeAttacker(known={"prof"})) == 0.0
    assert family.modifier(FakeAttacker()) == -2.0


def test_family_set_sums_modifiers() -> None:
    families = WeakpointFamilies(
        families=[
            WeakpointFamily(proficiency="a", bonus=2.0, penalty=1.0),
            WeakpointFamily(proficiency="b", bonus=3.0, penalty=4.0),
        ]
    )

    assert families.modifier(FakeAttacker(known={"a"})) == -2.0
    assert families.modifier(FakeAttacker(known={"a", "b"})) == 5.0


def test_practice_amounts_per_trigger() -> None:
    families = WeakpointFamilies(families=[WeakpointFamily(proficiency="a", time_to_learn=50000)])
    learner = FakeAttacker()

    families.practice_hit(learner)
    families.practice_kill(learner)
    families.practice_dissect(learner)

    assert learner.practiced == [
        ("a", PRACTICE_HIT_SECONDS),
        ("a", PRACTICE_KILL_SECONDS),
        ("a", PRACTICE_DISSECT_CAP_SECONDS),
    ]


def test_practice_reports_new_learns() -> None:
    families = WeakpointFamilies(families=[WeakpointFamily(proficiency="a"), WeakpointFamily(proficiency="b")])
    learner = FakeAttacker(known={"a"}, learn_on_practice=True)

    assert families.practice_hit(learner) is True
    assert learner.known == {"a", "b"}


def test_practice_logs_completed_proficiency(caplog: pytest.LogCaptureFixture) -> None:
    families = WeakpointFamilies(families=[WeakpointFamily(proficiency="a")])
    learner = FakeAttacker(learn_on_practice=True)

    with caplog.at_level(logging.INFO, logger="weakpoints.domain.families"):
        families.practice_kill(learner)

    assert any("completed a weakpoint proficiency" in record.getMessage() for record in caplog.records)


def test_practice_is_idempotent_for_known_proficiencies() -> None:
    catalog = {
        "a": ProficiencyDef(id="a", name="A", time_to_learn=60),
        "b": ProficiencyDef(id="b", name="B", time_to_learn=60),
    }
    tracker = ProficiencyTracker(catalog=catalog, learned={"a", "b"})
    families = WeakpointFamilies(families=[WeakpointFamily(proficiency="a"), WeakpointFamily(proficiency="b")])

    class Learner:
        def has_proficiency(self, proficiency_id: str) -> bool:
            return tracker.has(proficiency_id)

        def practice_proficiency(self, proficiency_id: str, seconds: int) -> bool:
            return tracker.practice(proficiency_id, seconds)

    learner = Learner()
    for _ in range(10):
        assert families.practice_hit(learner) is False
    assert tracker.learned == {"a", "b"}
    assert tracker.progress == {}


def test_tracker_learns_after_enough_practice() -> None:
    tracker = ProficiencyTracker(catalog={"a": ProficiencyDef(id="a", name="A", time_to_learn=120)})

    assert tracker.practice("a", 60) is False
    assert tracker.progress == {"a": 60}
    assert tracker.practice("a", 60) is True
    assert tracker.has("a")
    assert tracker.practice("a", 60) is False


def test_family_set_load_remove_clear() -> None:
    families = WeakpointFamilies(families=[WeakpointFamily(proficiency="a", bonus=1.0)])

    families.load([WeakpointFamily(proficiency="a", bonus=5.0), WeakpointFamily(proficiency="b")])
    assert families.ids() == ["a", "b"]
    assert families.families[0].bonus == 5.0

    assert families.remove(["b", "zzz"]) == ["zzz"]
    assert families.ids() == ["a"]

    families.clear()
    assert families.ids() == []
