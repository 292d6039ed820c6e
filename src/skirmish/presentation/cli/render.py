"""Shared CLI rendering helpers."""
from __future__ import annotations

import os
from typing import Iterable, Sequence

from skirmish.domain.combat_state import GameOver, MonsterTurn
from skirmish.domain.encounter_models import AbilitySlotView, EncounterView
from skirmish.services.encounter_service import (
    AbilityResolvedEvent,
    ActionRejectedEvent,
    CombatantDefeatedEvent,
    EncounterEvent,
    EncounterResolvedEvent,
    EncounterStartedEvent,
    HealResolvedEvent,
    TurnChangedEvent,
)
from skirmish.services.simulation_service import SimulationReport
from skirmish.services.strategies import TournamentStanding

DEBUG_ENV_VAR = "SKIRMISH_DEBUG"
_RECENT_LOG_LINES = 5
_REJECTION_TEXT = {
    "on_cooldown": "that ability is still cooling down",
    "unknown_ability": "there is no such ability",
}


def debug_enabled() -> bool:
    """Return True only when SKIRMISH_DEBUG is explicitly set to '1'."""
    return os.getenv(DEBUG_ENV_VAR) == "1"


def render_heading(title: str) -> None:
    """Print a consistent section heading."""
    print(f"\n=== {title} ===")


def render_menu(title: str, options: Sequence[str]) -> None:
    """Display a menu section with numbered options."""
    render_heading(title)
    for idx, label in enumerate(options, start=1):
        print(f"{idx}. {label}")


def render_bullet_lines(lines: Iterable[str]) -> None:
    for line in lines:
        print(f"- {line}")


def format_slot(slot: AbilitySlotView) -> str:
    status = "READY" if slot.is_ready else f"CD: {slot.cooldown_remaining:.1f}s"
    return f"{slot.name} (power {slot.power}) [{status}]"


def format_event(event: EncounterEvent) -> str:
    """Turn an encounter event into a single display line."""
    if isinstance(event, EncounterStartedEvent):
        return f"{event.player_name} faces {event.monster_name}!"
    if isinstance(event, AbilityResolvedEvent):
        combat = event.combat_event
        return (
            f"{combat.attacker_name} uses {combat.ability_used} on {combat.defender_name} "
            f"for {combat.damage} damage (HP {event.target_hp})."
        )
    if isinstance(event, HealResolvedEvent):
        return f"{event.combatant_name} uses {event.combat_event.ability_used} and heals {event.amount} HP (HP {event.hp})."
    if isinstance(event, ActionRejectedEvent):
        reason = _REJECTION_TEXT.get(event.reason, event.reason)
        return f"{event.combatant_name} cannot act: {reason}."
    if isinstance(event, CombatantDefeatedEvent):
        return f"{event.combatant_name} has been defeated!"
    if isinstance(event, TurnChangedEvent):
        if isinstance(event.state, MonsterTurn):
            return "Monster's turn."
        return f"Your turn (round {event.turn})."
    if isinstance(event, EncounterResolvedEvent):
        return f"{event.winner} wins!"
    return str(event)


def render_events(events: Sequence[EncounterEvent]) -> None:
    if not events:
        return
    render_bullet_lines(format_event(event) for event in events)


def render_encounter_view(view: EncounterView) -> None:
    """Print both combatants, the player's abilities and the newest log lines."""
    render_heading(f"Round {view.turn}")
    print(f"  {view.player.name:<12} HP {view.player.hp_display}")
    print(f"  {view.monster.name:<12} HP {view.monster.hp_display}")
    if debug_enabled():
        for line in view.log_lines[-_RECENT_LOG_LINES:]:
            print(f"  | {line}")
    if isinstance(view.state, GameOver):
        print(f"Winner: {view.state.winner}")


def render_simulation_report(report: SimulationReport) -> None:
    render_heading("Simulation Results")
    print(f"Total Simulations: {report.simulations}")
    print(f"Player Wins: {report.player_wins} ({report.win_rate(report.player_wins):.1f}%)")
    print(f"Monster Wins: {report.monster_wins} ({report.win_rate(report.monster_wins):.1f}%)")
    if report.timeouts:
        print(f"Turn Limit Reached: {report.timeouts}")
    if report.simulations:
        print(f"Average Combat Length: {report.average_turns:.2f} turns")


def render_standings(standings: Sequence[TournamentStanding]) -> None:
    render_heading("Tournament Results")
    for rank, standing in enumerate(standings, start=1):
        print(f"{rank}. {standing.name.title()} - {standing.series_wins} wins")
