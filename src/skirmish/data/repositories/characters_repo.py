"""Character templates repository with ability reference validation."""
from __future__ import annotations

from typing import Dict, Tuple

from skirmish.data.errors import DataReferenceError, DataValidationError
from skirmish.data.repositories.abilities_repo import AbilitiesRepository
from skirmish.data.repositories.base import RepositoryBase
from skirmish.domain.defs import CharacterDef, LoadoutEntryDef

VALID_ROLES = {"player", "monster"}


class CharactersRepository(RepositoryBase[CharacterDef]):
    """Loads combatant templates and ensures referenced abilities exist."""

    def __init__(self, abilities_repo: AbilitiesRepository | None = None, base_path=None) -> None:
        super().__init__("characters.json", base_path)
        self._abilities_repo = abilities_repo or AbilitiesRepository(base_path=base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, CharacterDef]:
        ability_ids = set(self._abilities_repo.ids())

        characters: Dict[str, CharacterDef] = {}
        for raw_id, payload in raw.items():
            context = f"character '{raw_id}'"
            data = self._require_mapping(payload, context)
            self._assert_required(data, {"role", "default_name", "hp", "attack", "defense"}, context)

            characters[raw_id] = CharacterDef(
                id=raw_id,
                role=self._require_literal(data["role"], VALID_ROLES, f"{context} role"),  # type: ignore[arg-type]
                default_name=self._require_str(data["default_name"], f"{context} default_name"),
                hp=self._require_int(data["hp"], f"{context} hp"),
                attack=self._require_int(data["attack"], f"{context} attack"),
                defense=self._require_int(data["defense"], f"{context} defense"),
                loadout=self._parse_loadout(data.get("loadout", []), ability_ids, f"{context} loadout"),
                tactics=self._parse_loadout(data.get("tactics", []), ability_ids, f"{context} tactics"),
            )
        return characters

    def _parse_loadout(
        self, value: object, ability_ids: set[str], context: str
    ) -> Tuple[LoadoutEntryDef, ...]:
        entries = []
        for idx, raw_entry in enumerate(self._require_list(value, context)):
            entry_context = f"{context}[{idx}]"
            entry = self._require_mapping(raw_entry, entry_context)
            self._assert_required(entry, {"ability", "cooldown"}, entry_context)
            ability_id = self._require_str(entry["ability"], f"{entry_context} ability")
            if ability_id not in ability_ids:
                raise DataReferenceError(f"{entry_context} references missing ability '{ability_id}'.")
            cooldown = self._require_number(entry["cooldown"], f"{entry_context} cooldown")
            if cooldown < 0:
                raise DataValidationError(f"{entry_context} cooldown cannot be negative.")
            entries.append(LoadoutEntryDef(ability_id=ability_id, cooldown=cooldown))
        return tuple(entries)
