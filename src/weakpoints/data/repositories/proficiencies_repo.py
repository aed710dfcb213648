"""Proficiencies repository."""
from __future__ import annotations

from typing import Dict

from weakpoints.data.errors import DataValidationError
from weakpoints.data.repositories.base import RepositoryBase
from weakpoints.domain.defs import ProficiencyDef


class ProficienciesRepository(RepositoryBase[ProficiencyDef]):
    """Loads proficiency definitions and their weakpoint skill defaults."""

    def __init__(self, base_path=None, mod_paths=()) -> None:
        super().__init__("proficiencies.json", base_path, mod_paths)

    def _build(self, raw: dict[str, object]) -> Dict[str, ProficiencyDef]:
        proficiencies: Dict[str, ProficiencyDef] = {}
        for raw_id, payload in raw.items():
            if not isinstance(raw_id, str) or not raw_id.strip():
                raise DataValidationError("Proficiency IDs must be non-empty strings.")
            context = f"proficiency '{raw_id}'"
            data = self._require_mapping(payload, context)
            self._assert_exact_fields(
                data,
                {"name", "time_to_learn"},
                context,
                optional_fields={"default_weakpoint_bonus", "default_weakpoint_penalty"},
            )
            time_to_learn = self._require_int(data["time_to_learn"], f"{context} time_to_learn")
            if time_to_learn <= 0:
                raise DataValidationError(f"{context} time_to_learn must be positive.")

            proficiencies[raw_id] = ProficiencyDef(
                id=raw_id,
                name=self._require_str(data["name"], f"{context} name"),
                time_to_learn=time_to_learn,
                default_weakpoint_bonus=self._optional_number(data, "default_weakpoint_bonus", context),
                default_weakpoint_penalty=self._optional_number(data, "default_weakpoint_penalty", context),
            )
        return proficiencies

    def catalog(self) -> Dict[str, ProficiencyDef]:
        """Return every proficiency keyed by id, for learner trackers."""
        return {definition.id: definition for definition in self.all()}

    @classmethod
    def _optional_number(cls, data: dict[str, object], key: str, context: str) -> float | None:
        if key not in data:
            return None
        return cls._require_number(data[key], f"{context} {key}")
