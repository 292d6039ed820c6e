"""Abilities repository."""
from __future__ import annotations

from typing import Dict

from skirmish.data.errors import DataValidationError
from skirmish.data.repositories.base import RepositoryBase
from skirmish.domain.abilities import VALID_EFFECTS, VALID_KINDS
from skirmish.domain.defs import AbilityDef


class AbilitiesRepository(RepositoryBase[AbilityDef]):
    """Loads the ability catalog."""

    def __init__(self, base_path=None) -> None:
        super().__init__("abilities.json", base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, AbilityDef]:
        abilities: Dict[str, AbilityDef] = {}
        for raw_id, payload in raw.items():
            context = f"ability '{raw_id}'"
            data = self._require_mapping(payload, context)
            self._assert_required(data, {"name", "power", "effect", "kind"}, context)

            power = self._require_int(data["power"], f"{context} power")
            effect = self._require_literal(data["effect"], VALID_EFFECTS, f"{context} effect")
            if effect == "heal" and power > 0:
                raise DataValidationError(f"{context} heal power must be zero or negative.")
            if effect == "damage" and power < 0:
                raise DataValidationError(f"{context} damage power cannot be negative.")

            abilities[raw_id] = AbilityDef(
                id=raw_id,
                name=self._require_str(data["name"], f"{context} name"),
                power=power,
                effect=effect,  # type: ignore[arg-type]
                kind=self._require_literal(data["kind"], VALID_KINDS, f"{context} kind"),  # type: ignore[arg-type]
            )
        return abilities
