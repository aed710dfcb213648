"""Weapons repository."""
from __future__ import annotations

from typing import Dict

from weakpoints.core.types import DamageType
from weakpoints.data.errors import DataValidationError
from weakpoints.data.repositories.base import RepositoryBase
from weakpoints.domain.defs import WeaponDef

DAMAGE_TYPE_KEYS = {damage_type.name.lower(): damage_type for damage_type in DamageType}


class WeaponsRepository(RepositoryBase[WeaponDef]):
    """Loads and validates weapon damage profiles."""

    def __init__(self, base_path=None, mod_paths=()) -> None:
        super().__init__("weapons.json", base_path, mod_paths)

    def _build(self, raw: dict[str, object]) -> Dict[str, WeaponDef]:
        weapons: Dict[str, WeaponDef] = {}
        for raw_id, payload in raw.items():
            if not isinstance(raw_id, str):
                raise DataValidationError("Weapon IDs must be strings.")
            context = f"weapon '{raw_id}'"
            weapon_data = self._require_mapping(payload, context)
            self._assert_exact_fields(
                weapon_data,
                {"name", "damage"},
                context,
                optional_fields={"thrown", "weakpoint_bonus"},
            )

            damage_data = self._require_mapping(weapon_data["damage"], f"{context} damage")
            damage: list[tuple[DamageType, float]] = []
            for key, amount in damage_data.items():
                if key not in DAMAGE_TYPE_KEYS:
                    raise DataValidationError(f"{context} damage has unknown type '{key}'.")
                value = self._require_number(amount, f"{context} damage {key}")
                if value < 0:
                    raise DataValidationError(f"{context} damage {key} must not be negative.")
                damage.append((DAMAGE_TYPE_KEYS[key], value))

            weapons[raw_id] = WeaponDef(
                id=raw_id,
                name=self._require_str(weapon_data["name"], f"{context} name"),
                damage=tuple(damage),
                thrown=self._require_bool(weapon_data.get("thrown", False), f"{context} thrown"),
                weakpoint_bonus=self._require_number(
                    weapon_data.get("weakpoint_bonus", 0), f"{context} weakpoint_bonus"
                ),
            )
        return weapons
