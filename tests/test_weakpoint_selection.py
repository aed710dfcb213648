from __future__ import annotations

from weakpoints.core.rng import RNG
from weakpoints.core.types import AttackCategory
from weakpoints.domain.attack import WeakpointAttack
from weakpoints.domain.defs import Weakpoint, WeakpointDifficulty
from weakpoints.domain.families import WeakpointFamilies, WeakpointFamily
from weakpoints.domain.weakpoints import WeakpointSet

from tests.helpers.fakes import FakeAttacker, FakeTarget, ScriptedRNG


def _eye() -> Weakpoint:
    return Weakpoint(id="eye", name="the eye", coverage=10.0, difficulty=WeakpointDifficulty.filled(3.0))


def _stab_attack(skill: float = 5.0, target: FakeTarget | None = None) -> WeakpointAttack:
    return WeakpointAttack(target=target or FakeTarget(), category=AttackCategory.MELEE_STAB, skill=skill)


def test_empty_set_always_returns_default() -> None:
    weakpoints = WeakpointSet()
    rng = RNG(5)

    for category in AttackCategory:
        attack = WeakpointAttack(category=category, skill=50.0)
        assert weakpoints.select_weakpoint(attack, rng) is weakpoints.default_weakpoint


def test_eye_selected_about_ten_percent_of_the_time() -> None:
    weakpoints = WeakpointSet(weakpoint_list=[_eye()])
    rng = RNG(2024)
    trials = 10000

    hits = sum(1 for _ in range(trials) if weakpoints.select_weakpoint(_stab_attack(), rng).id == "eye")

    assert 0.085 <= hits / trials <= 0.115


def test_eye_selection_boundary_with_scripted_rolls() -> None:
    weakpoints = WeakpointSet(weakpoint_list=[_eye()])

    assert weakpoints.select_weakpoint(_stab_attack(), ScriptedRNG(randoms=[0.0999])).id == "eye"
    assert weakpoints.select_weakpoint(_stab_attack(), ScriptedRNG(randoms=[0.5])).id == ""


def test_failed_difficulty_gate_excludes_weakpoint() -> None:
    weakpoints = WeakpointSet(weakpoint_list=[_eye()])
    rng = ScriptedRNG()

    assert weakpoints.select_weakpoint(_stab_attack(skill=2.0), rng) is weakpoints.default_weakpoint
    assert rng.random_calls == 0


def test_missing_required_effect_excludes_weakpoint() -> None:
    wound = Weakpoint(id="wound", coverage=100.0, required_effects=("bleeding",))
    weakpoints = WeakpointSet(weakpoint_list=[wound])
    rng = RNG(8)

    for _ in range(200):
        assert weakpoints.select_weakpoint(_stab_attack(), rng).id == ""

    bleeding = FakeTarget(effects={"bleeding": 1})
    assert weakpoints.select_weakpoint(_stab_attack(target=bleeding), rng).id == "wound"


def test_zero_coverage_is_never_selected() -> None:
    weakpoints = WeakpointSet(
        weakpoint_list=[
            Weakpoint(id="never", coverage=0.0),
            Weakpoint(id="arm", coverage=40.0),
        ]
    )
    rng = RNG(77)

    picks = {weakpoints.select_weakpoint(_stab_attack(), rng).id for _ in range(500)}

    assert "never" not in picks
    assert picks == {"arm", ""}


def test_all_zero_coverage_routes_to_default_without_rolling() -> None:
    weakpoints = WeakpointSet(weakpoint_list=[Weakpoint(id="a", coverage=0.0)])
    rng = ScriptedRNG()

    assert weakpoints.select_weakpoint(_stab_attack(), rng).id == ""
    assert rng.random_calls == 0


def test_overfull_coverage_is_normalized() -> None:
    weakpoints = WeakpointSet(
        weakpoint_list=[Weakpoint(id="left", coverage=80.0), Weakpoint(id="right", coverage=80.0)]
    )

    assert weakpoints.select_weakpoint(_stab_attack(), ScriptedRNG(randoms=[0.25])).id == "left"
    assert weakpoints.select_weakpoint(_stab_attack(), ScriptedRNG(randoms=[0.99])).id == "right"


def test_gated_weakpoints_do_not_shift_later_weights() -> None:
    weakpoints = WeakpointSet(
        weakpoint_list=[
            Weakpoint(id="hard", coverage=50.0, difficulty=WeakpointDifficulty.filled(10.0)),
            Weakpoint(id="easy", coverage=20.0),
        ]
    )

    assert weakpoints.select_weakpoint(_stab_attack(), ScriptedRNG(randoms=[0.1])).id == "easy"
    assert weakpoints.select_weakpoint(_stab_attack(), ScriptedRNG(randoms=[0.3])).id == ""


def test_family_modifier_shifts_difficulty_gate() -> None:
    weakpoints = WeakpointSet(weakpoint_list=[_eye()])
    families = WeakpointFamilies(families=[WeakpointFamily(proficiency="prof_eyes", bonus=2.0, penalty=1.0)])

    skilled = WeakpointAttack(
        source=FakeAttacker(known={"prof_eyes"}), target=FakeTarget(), category=AttackCategory.MELEE_STAB, skill=1.0
    )
    unskilled = WeakpointAttack(
        source=FakeAttacker(), target=FakeTarget(), category=AttackCategory.MELEE_STAB, skill=3.5
    )

    assert weakpoints.select_weakpoint(skilled, ScriptedRNG(randoms=[0.0]), families).id == "eye"
    assert weakpoints.select_weakpoint(unskilled, ScriptedRNG(randoms=[0.0]), families).id == ""


def test_ungated_weakpoint_ignores_heavy_penalties() -> None:
    weakpoints = WeakpointSet(weakpoint_list=[Weakpoint(id="torso", coverage=100.0)])
    families = WeakpointFamilies(families=[WeakpointFamily(proficiency="prof_torso", penalty=150.0)])
    attack = WeakpointAttack(
        source=FakeAttacker(), target=FakeTarget(), category=AttackCategory.MELEE_BASH, skill=0.0
    )

    assert weakpoints.select_weakpoint(attack, ScriptedRNG(randoms=[0.0]), families).id == "torso"
    assert weakpoints.select_weakpoint(_stab_attack(skill=-500.0), ScriptedRNG(randoms=[0.0])).id == "torso"


def test_leftover_chance_selects_default_through_rng_remainder() -> None:
    weakpoints = WeakpointSet(weakpoint_list=[Weakpoint(id="arm", coverage=25.0)])
    rng = ScriptedRNG(randoms=[0.3])

    assert weakpoints.select_weakpoint(_stab_attack(), rng).id == ""
    assert rng.random_calls == 1


def test_selection_is_reproducible_for_a_seed() -> None:
    weakpoints = WeakpointSet(
        weakpoint_list=[_eye(), Weakpoint(id="arm", coverage=30.0), Weakpoint(id="leg", coverage=30.0)]
    )
    rng_a = RNG(31337)
    rng_b = RNG(31337)

    picks_a = [weakpoints.select_weakpoint(_stab_attack(), rng_a).id for _ in range(100)]
    picks_b = [weakpoints.select_weakpoint(_stab_attack(), rng_b).id for _ in range(100)]

    assert picks_a == picks_b


def test_load_then_remove_restores_ids() -> None:
    weakpoints = WeakpointSet(weakpoint_list=[Weakpoint(id="head"), Weakpoint(id="torso")])
    before = set(weakpoints.ids())

    weakpoints.load([Weakpoint(id="tail"), Weakpoint(id="horn")])
    missing = weakpoints.remove(["horn", "tail"])

    assert missing == []
    assert set(weakpoints.ids()) == before


def test_load_replaces_existing_id_in_place() -> None:
    weakpoints = WeakpointSet(weakpoint_list=[Weakpoint(id="head", coverage=5.0), Weakpoint(id="torso")])

    weakpoints.load([Weakpoint(id="head", coverage=25.0)])

    assert weakpoints.ids() == ["head", "torso"]
    assert weakpoints.get("head").coverage == 25.0


def test_remove_reports_unknown_and_clear_empties() -> None:
    weakpoints = WeakpointSet(weakpoint_list=[Weakpoint(id="head")])

    assert weakpoints.remove(["tail"]) == ["tail"]
    weakpoints.clear()
    assert weakpoints.ids() == []
    assert weakpoints.default_weakpoint.id == ""
