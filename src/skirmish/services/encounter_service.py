"""Encounter service driving the player/monster turn state machine."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List

from skirmish.data.repositories import AbilitiesRepository, CharactersRepository, RulesRepository
from skirmish.domain.abilities import BASIC_ATTACK, Ability
from skirmish.domain.ai import choose_monster_slot
from skirmish.domain.combat import CombatEvent, compute_attack
from skirmish.domain.combat_log import CombatLog
from skirmish.domain.combat_state import CombatState, GameOver, MonsterTurn, PlayerTurn, describe_state
from skirmish.domain.cooldowns import AbilitySlot
from skirmish.domain.encounter_models import AbilitySlotView, CombatantView, Encounter, EncounterView
from skirmish.domain.defs import CharacterDef
from skirmish.domain.entities import Character
from skirmish.services.errors import EncounterError, FactoryError
from skirmish.services.factories import build_ability_set, create_character

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class PlayerAction:
    """The player's trigger for one turn.

    ``ability_index`` selects a slot in the player's ability set; None uses
    the stock Basic Attack without cooldown gating.
    """

    ability_index: int | None = None


@dataclass(slots=True)
class EncounterEvent:
    """Base encounter event."""


@dataclass(slots=True)
class EncounterStartedEvent(EncounterEvent):
    player_name: str
    monster_name: str


@dataclass(slots=True)
class AbilityResolvedEvent(EncounterEvent):
    combat_event: CombatEvent
    target_hp: int


@dataclass(slots=True)
class HealResolvedEvent(EncounterEvent):
    combat_event: CombatEvent
    combatant_name: str
    amount: int
    hp: int


@dataclass(slots=True)
class ActionRejectedEvent(EncounterEvent):
    combatant_name: str
    ability_index: int
    reason: str


@dataclass(slots=True)
class CombatantDefeatedEvent(EncounterEvent):
    combatant_name: str


@dataclass(slots=True)
class TurnChangedEvent(EncounterEvent):
    state: CombatState
    turn: int


@dataclass(slots=True)
class EncounterResolvedEvent(EncounterEvent):
    winner: str


class EncounterService:
    """Runs duels one atomic step at a time."""

    def __init__(
        self,
        characters_repo: CharactersRepository | None = None,
        abilities_repo: AbilitiesRepository | None = None,
        rules_repo: RulesRepository | None = None,
    ) -> None:
        self._abilities_repo = abilities_repo or AbilitiesRepository()
        self._characters_repo = characters_repo or CharactersRepository(abilities_repo=self._abilities_repo)
        self._rules_repo = rules_repo or RulesRepository()

    # -----------------------
    # Encounter Lifecycle
    # -----------------------
    def start_encounter(
        self,
        player_name: str | None = None,
        monster_name: str | None = None,
        *,
        player_template: str = "hero",
        monster_template: str = "slime",
        rules_id: str = "standard",
    ) -> tuple[Encounter, List[EncounterEvent]]:
        """Build both combatants from templates and open the combat log."""
        player_def = self._get_template(player_template)
        monster_def = self._get_template(monster_template)
        try:
            rules = self._rules_repo.get(rules_id)
        except KeyError as exc:
            raise FactoryError(f"Rules profile '{rules_id}' not found.") from exc

        encounter = Encounter(
            player=create_character(player_template, self._characters_repo, player_name),
            monster=create_character(monster_template, self._characters_repo, monster_name),
            player_abilities=build_ability_set(player_def.loadout, self._abilities_repo),
            monster_abilities=build_ability_set(monster_def.tactics, self._abilities_repo),
            log=CombatLog(rules.log_capacity),
            ai_config=rules.ai,
            monster_think_delay=rules.monster_think_delay,
            monster_turn_tick=rules.monster_turn_tick,
        )
        encounter.log.add("=== Combat Start ===")
        encounter.log.add(f"{encounter.player.name} faces {encounter.monster.name}!")
        logger.info("Encounter started: %s vs %s", encounter.player.name, encounter.monster.name)
        return encounter, [
            EncounterStartedEvent(player_name=encounter.player.name, monster_name=encounter.monster.name)
        ]

    def get_view(self, encounter: Encounter) -> EncounterView:
        """Return a read-only snapshot for rendering."""
        return EncounterView(
            state=encounter.state,
            turn=encounter.turn,
            player=self._to_view(encounter.player),
            monster=self._to_view(encounter.monster),
            player_abilities=[
                self._slot_view(idx, slot) for idx, slot in enumerate(encounter.player_abilities)
            ],
            last_event=encounter.last_event,
            log_lines=list(encounter.log.entries),
        )

    # -----------------------
    # State Machine
    # -----------------------
    def advance(
        self,
        encounter: Encounter,
        action: PlayerAction | None = None,
        *,
        elapsed: float = 0.0,
    ) -> List[EncounterEvent]:
        """Run one step of the encounter and return what happened.

        ``elapsed`` is the time since the previous call. It ticks the player's
        cooldowns and feeds the monster's thinking delay. A player turn without
        an action, a monster still thinking, and any call after game over all
        return an empty list.
        """
        if encounter.is_over:
            return []
        if elapsed < 0:
            raise ValueError("Elapsed time cannot be negative.")
        self._require_actors(encounter)

        encounter.player_abilities.tick_all(elapsed)
        if encounter.is_player_turn:
            if action is None:
                return []
            return self._run_player_turn(encounter, action)
        return self._run_monster_turn(encounter, elapsed)

    def _run_player_turn(self, encounter: Encounter, action: PlayerAction) -> List[EncounterEvent]:
        player = encounter.player
        slot: AbilitySlot | None = None
        if action.ability_index is None:
            ability = BASIC_ATTACK
        else:
            slot = encounter.player_abilities.get_ready_ability(action.ability_index)
            if slot is None:
                in_range = 0 <= action.ability_index < len(encounter.player_abilities)
                reason = "on_cooldown" if in_range else "unknown_ability"
                logger.debug("Rejected player ability %s (%s)", action.ability_index, reason)
                return [
                    ActionRejectedEvent(
                        combatant_name=player.name, ability_index=action.ability_index, reason=reason
                    )
                ]
            ability = slot.ability

        events = self._resolve(encounter, player, encounter.monster, ability)
        if slot is not None:
            slot.activate()
        events.extend(self._finish_turn(encounter, player, encounter.monster, MonsterTurn()))
        return events

    def _run_monster_turn(self, encounter: Encounter, elapsed: float) -> List[EncounterEvent]:
        encounter.think_elapsed += elapsed
        if encounter.think_elapsed < encounter.monster_think_delay:
            return []
        encounter.think_elapsed = 0.0

        monster = encounter.monster
        encounter.monster_abilities.tick_all(encounter.monster_turn_tick)
        slot = choose_monster_slot(
            monster, encounter.player, encounter.monster_abilities.slots, encounter.ai_config
        )
        ability = slot.ability if slot is not None else BASIC_ATTACK
        events = self._resolve(encounter, monster, encounter.player, ability)
        if slot is not None:
            slot.activate()
        events.extend(self._finish_turn(encounter, monster, encounter.player, PlayerTurn()))
        return events

    # -----------------------
    # Helpers
    # -----------------------
    def _resolve(
        self, encounter: Encounter, actor: Character, opponent: Character, ability: Ability
    ) -> List[EncounterEvent]:
        log = encounter.log
        if ability.is_heal:
            event = compute_attack(actor, actor, ability)
            before = actor.hp
            actor.hp = min(event.defender_hp_after, actor.stats.hp)
            restored = actor.hp - before
            log.add(f"{actor.name} uses {ability.name} and heals {restored} HP!")
            log.add(f"{actor.name} HP: {actor.hp} / {actor.stats.hp}")
            encounter.last_event = event
            return [HealResolvedEvent(combat_event=event, combatant_name=actor.name, amount=restored, hp=actor.hp)]

        event = compute_attack(actor, opponent, ability)
        opponent.hp = event.defender_hp_after
        log.add(f"{actor.name} uses {ability.name} on {opponent.name} for {event.damage} damage!")
        log.add(f"{opponent.name} HP: {opponent.hp} / {opponent.stats.hp}")
        encounter.last_event = event
        return [AbilityResolvedEvent(combat_event=event, target_hp=opponent.hp)]

    def _finish_turn(
        self, encounter: Encounter, actor: Character, opponent: Character, next_state: CombatState
    ) -> List[EncounterEvent]:
        if opponent.is_defeated:
            encounter.log.add(f"{opponent.name} has been defeated!")
            encounter.state = GameOver(winner=actor.name)
            encounter.log.add("=== GAME OVER ===")
            encounter.log.add(f"{actor.name} wins!")
            logger.info("Encounter resolved on turn %d: %s wins", encounter.turn, actor.name)
            return [
                CombatantDefeatedEvent(combatant_name=opponent.name),
                EncounterResolvedEvent(winner=actor.name),
            ]

        if isinstance(next_state, PlayerTurn):
            encounter.turn += 1
            encounter.log.add("--- Player's Turn ---")
        else:
            encounter.log.add("--- Monster's Turn ---")
        encounter.state = next_state
        logger.debug("Turn %d: %s", encounter.turn, describe_state(next_state))
        return [TurnChangedEvent(state=next_state, turn=encounter.turn)]

    def _get_template(self, template_id: str) -> CharacterDef:
        try:
            return self._characters_repo.get(template_id)
        except KeyError as exc:
            raise FactoryError(f"Character template '{template_id}' not found.") from exc

    @staticmethod
    def _require_actors(encounter: Encounter) -> None:
        if encounter.player is None or encounter.monster is None:
            raise EncounterError("Encounter requires both a player and a monster.")

    @staticmethod
    def _to_view(character: Character) -> CombatantView:
        return CombatantView(
            name=character.name,
            hp_display=f"{max(character.hp, 0)}/{character.stats.hp}",
            current_hp=character.hp,
            max_hp=character.stats.hp,
            is_defeated=character.is_defeated,
        )

    @staticmethod
    def _slot_view(index: int, slot: AbilitySlot) -> AbilitySlotView:
        return AbilitySlotView(
            index=index,
            name=slot.ability.name,
            power=slot.ability.power,
            is_ready=slot.is_ready(),
            cooldown_remaining=slot.cooldown_current,
            cooldown_progress=slot.cooldown_progress(),
        )
