"""Console-driven UI loops for Skirmish."""
from __future__ import annotations

import argparse
import logging
import time
from typing import Sequence

from skirmish.domain.encounter_models import Encounter
from skirmish.services import EncounterAction, EncounterController, EncounterService, SimulationService
from skirmish.services.simulation_service import DEFAULT_MAX_TURNS
from skirmish.services.strategies import DEFAULT_DUEL_TURNS, run_tournament

from .render import (
    debug_enabled,
    format_slot,
    render_encounter_view,
    render_events,
    render_heading,
    render_menu,
    render_simulation_report,
    render_standings,
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="skirmish", description="Turn-based duel against a monster.")
    subparsers = parser.add_subparsers(dest="command")

    play = subparsers.add_parser("play", help="Fight an interactive duel (default)")
    play.add_argument("--name", default=None, help="Hero name")
    play.add_argument("--monster", default=None, help="Monster name")
    play.add_argument("--rules", default="standard", help="Rules profile from rules.json")

    simulate = subparsers.add_parser("simulate", help="Run headless encounters and report statistics")
    simulate.add_argument("--count", type=int, default=100, help="Number of encounters to run")
    simulate.add_argument("--max-turns", type=int, default=DEFAULT_MAX_TURNS, help="Turn limit per encounter")

    tournament = subparsers.add_parser("tournament", help="Pit the demo strategies against each other")
    tournament.add_argument("--rounds", type=int, default=5, help="Duels per pairing")
    tournament.add_argument("--max-turns", type=int, default=DEFAULT_DUEL_TURNS, help="Turn limit per duel")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Parse arguments and dispatch to the requested mode."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if debug_enabled() else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    service = EncounterService()

    if args.command == "simulate":
        report = SimulationService(service).run(args.count, max_turns=args.max_turns)
        render_simulation_report(report)
        return 0
    if args.command == "tournament":
        render_standings(run_tournament(rounds=args.rounds, max_turns=args.max_turns))
        return 0

    name = getattr(args, "name", None)
    monster = getattr(args, "monster", None)
    rules_id = getattr(args, "rules", "standard")
    winner = run_play(service, player_name=name, monster_name=monster, rules_id=rules_id)
    print(f"\n{winner} wins! Goodbye!")
    return 0


def run_play(
    service: EncounterService,
    *,
    player_name: str | None = None,
    monster_name: str | None = None,
    rules_id: str = "standard",
) -> str:
    """Run an interactive duel until game over and return the winner's name."""
    controller = EncounterController(service)
    encounter, events = service.start_encounter(player_name, monster_name, rules_id=rules_id)
    render_heading("Combat Start")
    render_events(events)

    last_tick = time.monotonic()
    while not controller.is_over(encounter):
        if controller.is_player_turn(encounter):
            render_encounter_view(controller.get_view(encounter))
            action = _prompt_action(controller, encounter)
            now = time.monotonic()
            events = controller.apply_player_action(encounter, action, elapsed=now - last_tick)
            last_tick = now
            render_events(events)
            continue

        print(f"{encounter.monster.name} is preparing to attack...")
        remaining = encounter.monster_think_delay - encounter.think_elapsed
        if remaining > 0:
            time.sleep(remaining)
        now = time.monotonic()
        events = controller.run_monster_turn(encounter, max(now - last_tick, remaining))
        last_tick = now
        render_events(events)

    render_encounter_view(controller.get_view(encounter))
    assert encounter.winner is not None
    return encounter.winner


def _prompt_action(controller: EncounterController, encounter: Encounter) -> EncounterAction:
    slots = controller.get_view(encounter).player_abilities
    render_menu("Your Turn", [format_slot(slot) for slot in slots])
    while True:
        raw = input("Choose an ability (blank for Basic Attack): ").strip()
        if not raw:
            return EncounterAction(action_type="attack")
        try:
            index = int(raw) - 1
        except ValueError:
            print("Please enter a number.")
            continue
        if 0 <= index < len(slots):
            return EncounterAction(action_type="ability", ability_index=index)
        print(f"Please enter a value between 1 and {len(slots)}.")
