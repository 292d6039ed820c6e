"""UI-agnostic encounter controller that separates state progression from rendering."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Literal

from skirmish.domain.encounter_models import AbilitySlotView, Encounter, EncounterView
from skirmish.services.encounter_service import EncounterEvent, EncounterService, PlayerAction

EncounterActionType = Literal["attack", "ability"]


@dataclass(slots=True)
class EncounterAction:
    """Represents a structured action decision from the player."""

    action_type: EncounterActionType
    ability_index: int | None = None


class EncounterController:
    """
    UI-agnostic controller for encounter progression.

    Wraps EncounterService and exposes only structured state and actions.
    Rendering, prompting and pacing belong to the presentation layer.
    """

    def __init__(self, encounter_service: EncounterService) -> None:
        self._service = encounter_service

    def get_view(self, encounter: Encounter) -> EncounterView:
        return self._service.get_view(encounter)

    def is_player_turn(self, encounter: Encounter) -> bool:
        return encounter.is_player_turn

    def is_monster_turn(self, encounter: Encounter) -> bool:
        return encounter.is_monster_turn

    def is_over(self, encounter: Encounter) -> bool:
        return encounter.is_over

    def get_available_actions(self, encounter: Encounter) -> List[AbilitySlotView]:
        """Return the player's ready abilities, or nothing outside the player's turn."""
        if not encounter.is_player_turn:
            return []
        return [slot for slot in self._service.get_view(encounter).player_abilities if slot.is_ready]

    def apply_player_action(
        self, encounter: Encounter, action: EncounterAction, *, elapsed: float = 0.0
    ) -> List[EncounterEvent]:
        """Apply a player action and return the resulting events."""
        if action.action_type == "attack":
            if action.ability_index is not None:
                raise ValueError("Attack action does not take an ability_index.")
            return self._service.advance(encounter, PlayerAction(), elapsed=elapsed)

        if action.action_type == "ability":
            if action.ability_index is None:
                raise ValueError("Ability action requires ability_index.")
            return self._service.advance(encounter, PlayerAction(action.ability_index), elapsed=elapsed)

        raise ValueError(f"Unknown action type: {action.action_type}")

    def run_monster_turn(self, encounter: Encounter, elapsed: float) -> List[EncounterEvent]:
        """Feed elapsed time to the monster; it acts once its delay has passed."""
        if not encounter.is_monster_turn:
            return []
        return self._service.advance(encounter, elapsed=elapsed)
