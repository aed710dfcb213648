"""Creatures repository."""
from __future__ import annotations

from typing import Dict

from weakpoints.data.errors import DataReferenceError, DataValidationError
from weakpoints.data.repositories.base import RepositoryBase
from weakpoints.data.repositories.proficiencies_repo import ProficienciesRepository
from weakpoints.data.repositories.weakpoint_families_repo import WeakpointFamiliesRepository
from weakpoints.data.repositories.weakpoint_sets_repo import WeakpointSetsRepository
from weakpoints.domain.defs import CreatureDef

VALID_SKILLS = {"melee", "ranged", "throw"}


class CreaturesRepository(RepositoryBase[CreatureDef]):
    """Loads creature types and checks their weakpoint references."""

    def __init__(
        self,
        weakpoint_sets_repo: WeakpointSetsRepository,
        families_repo: WeakpointFamiliesRepository,
        proficiencies_repo: ProficienciesRepository,
        base_path=None,
        mod_paths=(),
    ) -> None:
        super().__init__("creatures.json", base_path, mod_paths)
        self._weakpoint_sets_repo = weakpoint_sets_repo
        self._families_repo = families_repo
        self._proficiencies_repo = proficiencies_repo

    def _build(self, raw: dict[str, object]) -> Dict[str, CreatureDef]:
        creatures: Dict[str, CreatureDef] = {}
        for raw_id, payload in raw.items():
            if not isinstance(raw_id, str):
                raise DataValidationError("Creature IDs must be strings.")
            context = f"creature '{raw_id}'"
            data = self._require_mapping(payload, context)
            self._assert_exact_fields(
                data,
                {"name", "hp"},
                context,
                optional_fields={"skills", "weakpoint_bonus", "weakpoints", "families", "proficiencies"},
            )

            hp = self._require_int(data["hp"], f"{context} hp")
            if hp <= 0:
                raise DataValidationError(f"{context} hp must be positive.")

            skills_data = self._require_mapping(data.get("skills", {}), f"{context} skills")
            skills: list[tuple[str, float]] = []
            for skill, level in skills_data.items():
                if skill not in VALID_SKILLS:
                    raise DataValidationError(f"{context} skills must be one of {sorted(VALID_SKILLS)}.")
                skills.append((skill, self._require_number(level, f"{context} skills {skill}")))

            weakpoint_set_id = data.get("weakpoints")
            if weakpoint_set_id is not None:
                weakpoint_set_id = self._require_str(weakpoint_set_id, f"{context} weakpoints")
                if not self._weakpoint_sets_repo.has(weakpoint_set_id):
                    raise DataReferenceError(f"{context} references unknown weakpoint set '{weakpoint_set_id}'.")

            families_id = data.get("families")
            if families_id is not None:
                families_id = self._require_str(families_id, f"{context} families")
                if not self._families_repo.has(families_id):
                    raise DataReferenceError(f"{context} references unknown weakpoint families '{families_id}'.")

            proficiencies = self._require_str_list(data.get("proficiencies", []), f"{context} proficiencies")
            for proficiency_id in proficiencies:
                if not self._proficiencies_repo.has(proficiency_id):
                    raise DataReferenceError(f"{context} references unknown proficiency '{proficiency_id}'.")

            creatures[raw_id] = CreatureDef(
                id=raw_id,
                name=self._require_str(data["name"], f"{context} name"),
                hp=hp,
                skills=tuple(skills),
                weakpoint_bonus=self._require_number(data.get("weakpoint_bonus", 0), f"{context} weakpoint_bonus"),
                weakpoint_set_id=weakpoint_set_id,
                families_id=families_id,
                proficiencies=tuple(proficiencies),
            )
        return creatures
