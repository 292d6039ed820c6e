"""Factory for building ability sets from template loadouts."""
from __future__ import annotations

from typing import Iterable

from skirmish.data.repositories import AbilitiesRepository
from skirmish.domain.cooldowns import AbilitySet, AbilitySlot
from skirmish.domain.defs import LoadoutEntryDef
from skirmish.services.errors import FactoryError


def build_ability_set(entries: Iterable[LoadoutEntryDef], abilities_repo: AbilitiesRepository) -> AbilitySet:
    """Create ready-to-use slots, in loadout order, for the given entries."""
    slots = []
    for entry in entries:
        try:
            ability_def = abilities_repo.get(entry.ability_id)
        except KeyError as exc:
            raise FactoryError(f"Ability '{entry.ability_id}' not found.") from exc
        try:
            slots.append(AbilitySlot(ability_def.to_ability(), entry.cooldown, kind=ability_def.kind))
        except ValueError as exc:
            raise FactoryError(str(exc)) from exc
    return AbilitySet(slots=slots)
