"""Effect types repository."""
from __future__ import annotations

from typing import Dict

from weakpoints.data.errors import DataValidationError
from weakpoints.data.repositories.base import RepositoryBase
from weakpoints.domain.defs import EffectTypeDef


class EffectTypesRepository(RepositoryBase[EffectTypeDef]):
    """Loads the status effects weakpoints may inflict or require."""

    def __init__(self, base_path=None, mod_paths=()) -> None:
        super().__init__("effects.json", base_path, mod_paths)

    def _build(self, raw: dict[str, object]) -> Dict[str, EffectTypeDef]:
        effects: Dict[str, EffectTypeDef] = {}
        for raw_id, payload in raw.items():
            if not isinstance(raw_id, str) or not raw_id.strip():
                raise DataValidationError("Effect IDs must be non-empty strings.")
            effect_data = self._require_mapping(payload, f"effect '{raw_id}'")
            self._assert_exact_fields(effect_data, {"name"}, f"effect '{raw_id}'")
            effects[raw_id] = EffectTypeDef(
                id=raw_id,
                name=self._require_str(effect_data["name"], f"effect '{raw_id}' name"),
            )
        return effects
