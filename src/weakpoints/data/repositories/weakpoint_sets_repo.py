"""Weakpoint sets repository."""
from __future__ import annotations

import logging
from typing import Dict, List, Tuple

from weakpoints.core.types import PHYSICAL_DAMAGE_TYPES, AttackCategory, DamageType
from weakpoints.data.errors import DataReferenceError, DataValidationError
from weakpoints.data.repositories.base import RepositoryBase
from weakpoints.data.repositories.effects_repo import EffectTypesRepository
from weakpoints.domain.defs import Weakpoint, WeakpointDifficulty, WeakpointEffect
from weakpoints.domain.defs.weakpoint_def import (
    DEFAULT_COVERAGE,
    DEFAULT_COVERAGE_MULT,
    DEFAULT_DIFFICULTY,
    NUM_DAMAGE_TYPES,
)
from weakpoints.domain.weakpoints import WeakpointSet

logger = logging.getLogger(__name__)

WEAKPOINT_FIELDS = {
    "id",
    "name",
    "coverage",
    "armor_mult",
    "armor_penalty",
    "damage_mult",
    "crit_mult",
    "required_effects",
    "effects",
    "coverage_mult",
    "difficulty",
}
EFFECT_FIELDS = {"chance", "permanent", "duration", "intensity", "damage_required", "message"}
MOD_FIELDS = {"clear", "remove", "load"}

DAMAGE_TYPE_KEYS = {damage_type.name.lower(): damage_type for damage_type in DamageType}

# Keys later in this order override earlier ones.
CATEGORY_KEY_ORDER: Tuple[Tuple[str, Tuple[AttackCategory, ...]], ...] = (
    ("all", tuple(AttackCategory)),
    ("melee", (AttackCategory.MELEE_BASH, AttackCategory.MELEE_CUT, AttackCategory.MELEE_STAB)),
    ("none", (AttackCategory.NONE,)),
    ("bash", (AttackCategory.MELEE_BASH,)),
    ("cut", (AttackCategory.MELEE_CUT,)),
    ("stab", (AttackCategory.MELEE_STAB,)),
    ("ranged", (AttackCategory.PROJECTILE,)),
)


class WeakpointSetsRepository(RepositoryBase[WeakpointSet]):
    """Loads weakpoint sets keyed by creature type."""

    def __init__(self, effects_repo: EffectTypesRepository, base_path=None, mod_paths=()) -> None:
        super().__init__("weakpoint_sets.json", base_path, mod_paths)
        self._effects_repo = effects_repo

    def _build(self, raw: dict[str, object]) -> Dict[str, WeakpointSet]:
        sets: Dict[str, WeakpointSet] = {}
        for raw_id, payload in raw.items():
            if not isinstance(raw_id, str):
                raise DataValidationError("Weakpoint set IDs must be strings.")
            weakpoint_set = WeakpointSet()
            weakpoint_set.load(self.parse_weakpoint_list(payload, f"weakpoint set '{raw_id}'"))
            sets[raw_id] = weakpoint_set
        return sets

    def _apply_mod(self, definitions: Dict[str, WeakpointSet], raw: dict[str, object]) -> None:
        for raw_id, payload in raw.items():
            context = f"weakpoint set '{raw_id}' mod"
            weakpoint_set = definitions.setdefault(raw_id, WeakpointSet())
            if isinstance(payload, list):
                weakpoint_set.load(self.parse_weakpoint_list(payload, context))
                continue

            mod_data = self._require_mapping(payload, context)
            self._assert_exact_fields(mod_data, set(), context, optional_fields=MOD_FIELDS)
            if self._require_bool(mod_data.get("clear", False), f"{context} clear"):
                weakpoint_set.clear()
            if "remove" in mod_data:
                missing = weakpoint_set.remove(self._require_str_list(mod_data["remove"], f"{context} remove"))
                if missing:
                    logger.warning("%s removes unknown weakpoints: %s", context, missing)
            if "load" in mod_data:
                weakpoint_set.load(self.parse_weakpoint_list(mod_data["load"], context))

    def parse_weakpoint_list(self, value: object, context: str) -> List[Weakpoint]:
        """Parse an ordered list of weakpoint records, rejecting duplicate ids."""
        entries = self._require_list(value, context)
        weakpoints: List[Weakpoint] = []
        seen: set[str] = set()
        for index, entry in enumerate(entries):
            weakpoint = self.parse_weakpoint(entry, f"{context} entry {index}")
            if weakpoint.id in seen:
                raise DataValidationError(f"{context} has duplicate weakpoint id '{weakpoint.id}'.")
            seen.add(weakpoint.id)
            weakpoints.append(weakpoint)
        return weakpoints

    def parse_weakpoint(self, value: object, context: str) -> Weakpoint:
        data = self._require_mapping(value, context)
        self._assert_exact_fields(data, set(), context, optional_fields=WEAKPOINT_FIELDS)
        if "id" not in data and "name" not in data:
            raise DataValidationError(f"{context} needs an id or a name.")

        name = self._require_str(data.get("name", ""), f"{context} name")
        weakpoint_id = self._require_str(data.get("id", name), f"{context} id")
        context = f"weakpoint '{weakpoint_id}'"

        coverage = self._require_number(data.get("coverage", DEFAULT_COVERAGE), f"{context} coverage")
        if coverage < 0:
            raise DataValidationError(f"{context} coverage must not be negative.")

        damage_mult = self._parse_per_type(data.get("damage_mult"), 1.0, f"{context} damage_mult")
        if "crit_mult" in data:
            crit_mult = self._parse_per_type(data["crit_mult"], 1.0, f"{context} crit_mult")
        else:
            crit_mult = damage_mult

        required_effects = tuple(
            self._require_str_list(data.get("required_effects", []), f"{context} required_effects")
        )
        for effect_id in required_effects:
            self._require_known_effect(effect_id, f"{context} required_effects")

        effects = tuple(
            self._parse_effect(entry, f"{context} effect {index}")
            for index, entry in enumerate(self._require_list(data.get("effects", []), f"{context} effects"))
        )

        return Weakpoint(
            id=weakpoint_id,
            name=name,
            coverage=coverage,
            armor_mult=self._parse_per_type(data.get("armor_mult"), 1.0, f"{context} armor_mult"),
            armor_penalty=self._parse_per_type(data.get("armor_penalty"), 0.0, f"{context} armor_penalty"),
            damage_mult=damage_mult,
            crit_mult=crit_mult,
            required_effects=required_effects,
            effects=effects,
            coverage_mult=self.parse_difficulty(
                data.get("coverage_mult"), DEFAULT_COVERAGE_MULT, f"{context} coverage_mult"
            ),
            difficulty=self.parse_difficulty(data.get("difficulty"), DEFAULT_DIFFICULTY, f"{context} difficulty"),
        )

    def parse_difficulty(self, value: object, default_value: float, context: str) -> WeakpointDifficulty:
        """Build a table from the default, overriding only the keys present."""
        table = WeakpointDifficulty.filled(default_value)
        if value is None:
            return table
        data = self._require_mapping(value, context)
        known = {key for key, _ in CATEGORY_KEY_ORDER}
        unknown = set(data.keys()) - known
        if unknown:
            raise DataValidationError(f"{context} has unknown keys: {sorted(unknown)}")
        overrides: Dict[AttackCategory, float] = {}
        for key, categories in CATEGORY_KEY_ORDER:
            if key not in data:
                continue
            amount = self._require_number(data[key], f"{context} {key}")
            for category in categories:
                overrides[category] = amount
        return table.with_overrides(overrides)

    def _parse_per_type(self, value: object, default_value: float, context: str) -> Tuple[float, ...]:
        values = [default_value] * NUM_DAMAGE_TYPES
        if value is None:
            return tuple(values)
        data = self._require_mapping(value, context)
        unknown = set(data.keys()) - set(DAMAGE_TYPE_KEYS) - {"all", "physical"}
        if unknown:
            raise DataValidationError(f"{context} has unknown damage types: {sorted(unknown)}")
        if "all" in data:
            amount = self._require_number(data["all"], f"{context} all")
            values = [amount] * NUM_DAMAGE_TYPES
        if "physical" in data:
            amount = self._require_number(data["physical"], f"{context} physical")
            for damage_type in PHYSICAL_DAMAGE_TYPES:
                values[damage_type] = amount
        for key, damage_type in DAMAGE_TYPE_KEYS.items():
            if key in data:
                values[damage_type] = self._require_number(data[key], f"{context} {key}")
        return tuple(values)

    def _parse_effect(self, value: object, context: str) -> WeakpointEffect:
        data = self._require_mapping(value, context)
        self._assert_exact_fields(data, {"effect"}, context, optional_fields=EFFECT_FIELDS)
        effect_id = self._require_str(data["effect"], f"{context} effect")
        self._require_known_effect(effect_id, context)

        chance = self._require_number(data.get("chance", 1.0), f"{context} chance")
        if not 0.0 <= chance <= 1.0:
            raise DataValidationError(f"{context} chance must be between 0 and 1.")
        duration = self._parse_int_range(data.get("duration", 1), f"{context} duration")
        intensity = self._parse_int_range(data.get("intensity", 1), f"{context} intensity")
        damage_required = self._parse_float_range(
            data.get("damage_required", [0.0, 1.0]), f"{context} damage_required"
        )
        message = data.get("message")
        if message is not None:
            message = self._require_str(message, f"{context} message")

        return WeakpointEffect(
            effect=effect_id,
            chance=chance,
            permanent=self._require_bool(data.get("permanent", False), f"{context} permanent"),
            duration=duration,
            intensity=intensity,
            damage_required=damage_required,
            message=message or None,
        )

    def _parse_int_range(self, value: object, context: str) -> Tuple[int, int]:
        if isinstance(value, list):
            if len(value) != 2:
                raise DataValidationError(f"{context} must be [min, max].")
            low = self._require_int(value[0], f"{context} min")
            high = self._require_int(value[1], f"{context} max")
        else:
            low = high = self._require_int(value, context)
        if low > high:
            raise DataValidationError(f"{context} min must not exceed max.")
        if low < 0:
            raise DataValidationError(f"{context} must not be negative.")
        return (low, high)

    def _parse_float_range(self, value: object, context: str) -> Tuple[float, float]:
        if isinstance(value, list):
            if len(value) != 2:
                raise DataValidationError(f"{context} must be [min, max].")
            low = self._require_number(value[0], f"{context} min")
            high = self._require_number(value[1], f"{context} max")
        else:
            low = high = self._require_number(value, context)
        if low > high:
            raise DataValidationError(f"{context} min must not exceed max.")
        if low < 0:
            raise DataValidationError(f"{context} must not be negative.")
        return (low, high)

    def _require_known_effect(self, effect_id: str, context: str) -> None:
        if not self._effects_repo.has(effect_id):
            raise DataReferenceError(f"{context} references unknown effect '{effect_id}'.")
