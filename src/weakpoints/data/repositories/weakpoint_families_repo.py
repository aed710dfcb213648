"""Weakpoint families repository."""
from __future__ import annotations

import logging
from typing import Dict, List

from weakpoints.data.errors import DataReferenceError, DataValidationError
from weakpoints.data.repositories.base import RepositoryBase
from weakpoints.data.repositories.proficiencies_repo import ProficienciesRepository
from weakpoints.domain.families import WeakpointFamilies, WeakpointFamily

logger = logging.getLogger(__name__)

FAMILY_FIELDS = {"id", "bonus", "penalty"}
MOD_FIELDS = {"clear", "remove", "load"}


class WeakpointFamiliesRepository(RepositoryBase[WeakpointFamilies]):
    """Loads weakpoint family lists keyed by creature type."""

    def __init__(self, proficiencies_repo: ProficienciesRepository, base_path=None, mod_paths=()) -> None:
        super().__init__("weakpoint_families.json", base_path, mod_paths)
        self._proficiencies_repo = proficiencies_repo

    def _build(self, raw: dict[str, object]) -> Dict[str, WeakpointFamilies]:
        result: Dict[str, WeakpointFamilies] = {}
        for raw_id, payload in raw.items():
            if not isinstance(raw_id, str):
                raise DataValidationError("Weakpoint family set IDs must be strings.")
            families = WeakpointFamilies()
            families.load(self.parse_family_list(payload, f"weakpoint families '{raw_id}'"))
            result[raw_id] = families
        return result

    def _apply_mod(self, definitions: Dict[str, WeakpointFamilies], raw: dict[str, object]) -> None:
        for raw_id, payload in raw.items():
            context = f"weakpoint families '{raw_id}' mod"
            families = definitions.setdefault(raw_id, WeakpointFamilies())
            if isinstance(payload, list):
                families.load(self.parse_family_list(payload, context))
                continue

            mod_data = self._require_mapping(payload, context)
            self._assert_exact_fields(mod_data, set(), context, optional_fields=MOD_FIELDS)
            if self._require_bool(mod_data.get("clear", False), f"{context} clear"):
                families.clear()
            if "remove" in mod_data:
                missing = families.remove(self._require_str_list(mod_data["remove"], f"{context} remove"))
                if missing:
                    logger.warning("%s removes unknown families: %s", context, missing)
            if "load" in mod_data:
                families.load(self.parse_family_list(mod_data["load"], context))

    def parse_family_list(self, value: object, context: str) -> List[WeakpointFamily]:
        entries = self._require_list(value, context)
        families: List[WeakpointFamily] = []
        seen: set[str] = set()
        for index, entry in enumerate(entries):
            family = self.parse_family(entry, f"{context} entry {index}")
            if family.id in seen:
                raise DataValidationError(f"{context} has duplicate family id '{family.id}'.")
            seen.add(family.id)
            families.append(family)
        return families

    def parse_family(self, value: object, context: str) -> WeakpointFamily:
        """Parse a bare proficiency id or a ``{"proficiency": ...}`` object."""
        if isinstance(value, str):
            proficiency_id = value
            data: dict[str, object] = {}
        else:
            data = self._require_mapping(value, context)
            self._assert_exact_fields(data, {"proficiency"}, context, optional_fields=FAMILY_FIELDS)
            proficiency_id = self._require_str(data["proficiency"], f"{context} proficiency")

        if not self._proficiencies_repo.has(proficiency_id):
            raise DataReferenceError(f"{context} references unknown proficiency '{proficiency_id}'.")
        proficiency = self._proficiencies_repo.get(proficiency_id)

        bonus = self._require_number(data["bonus"], f"{context} bonus") if "bonus" in data else None
        penalty = self._require_number(data["penalty"], f"{context} penalty") if "penalty" in data else None
        return WeakpointFamily(
            proficiency=proficiency_id,
            id=self._require_str(data.get("id", proficiency_id), f"{context} id"),
            bonus=bonus,
            penalty=penalty,
            default_bonus=proficiency.default_weakpoint_bonus,
            default_penalty=proficiency.default_weakpoint_penalty,
            time_to_learn=proficiency.time_to_learn,
        )
