"""Illustrative duel strategies and a small round-robin tournament.

These personalities are demonstrations for simulations. The monster's real
decision policy lives in ``skirmish.domain.ai``.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Callable, Dict, List, Mapping

from skirmish.domain.abilities import BASIC_ATTACK, HEAL, Ability
from skirmish.domain.combat import CombatEvent, compute_attack
from skirmish.domain.entities import Character, new_player

Strategy = Callable[[Character, Character], Ability]

DEFAULT_DUEL_TURNS = 20


def _percent(character: Character) -> int:
    if character.stats.hp <= 0:
        return 0
    return character.hp * 100 // character.stats.hp


def aggressive(actor: Character, opponent: Character) -> Ability:
    """Always swing as hard as possible."""
    return Ability(name="Aggressive Strike", power=15)


def defensive(actor: Character, opponent: Character) -> Ability:
    """Heal below half health, otherwise attack normally."""
    if actor.hp < actor.stats.hp // 2:
        return HEAL
    return BASIC_ATTACK


def balanced(actor: Character, opponent: Character) -> Ability:
    """Pressure a healthy opponent and finish a critical one."""
    opponent_percent = _percent(opponent)
    if opponent_percent > 70:
        return Ability(name="Power Attack", power=12)
    if opponent_percent > 30:
        return BASIC_ATTACK
    return Ability(name="Finishing Blow", power=20)


def smart(actor: Character, opponent: Character) -> Ability:
    """Weigh both health totals and the opponent's armor."""
    own_percent = _percent(actor)
    opponent_percent = _percent(opponent)
    if own_percent < 30 and opponent_percent < 40:
        return Ability(name="Desperate Strike", power=25)
    if opponent.stats.defense > 5:
        return Ability(name="Armor Break", power=18)
    if own_percent > 70 and opponent_percent > 70:
        return Ability(name="Charge Attack", power=8)
    return BASIC_ATTACK


STRATEGIES: Dict[str, Strategy] = {
    "aggressive": aggressive,
    "defensive": defensive,
    "balanced": balanced,
    "smart": smart,
}


@dataclass(slots=True)
class DuelResult:
    """Outcome of a simulated duel between two strategies."""

    winner: str
    turns: int
    timed_out: bool
    events: List[CombatEvent]


@dataclass(slots=True)
class TournamentStanding:
    name: str
    series_wins: int


def _act(actor: Character, opponent: Character, ability: Ability) -> CombatEvent:
    if ability.is_heal:
        event = compute_attack(actor, actor, ability)
        actor.hp = min(event.defender_hp_after, actor.stats.hp)
        return event
    event = compute_attack(actor, opponent, ability)
    opponent.hp = event.defender_hp_after
    return event


def simulate_duel(
    first: Character,
    first_strategy: Strategy,
    second: Character,
    second_strategy: Strategy,
    max_turns: int = DEFAULT_DUEL_TURNS,
) -> DuelResult:
    """Alternate exchanges until someone falls or ``max_turns`` runs out.

    The inputs are copied, not mutated. At the turn limit the combatant with
    more health wins, ties going to ``second``.
    """
    a = replace(first)
    b = replace(second)
    events: List[CombatEvent] = []
    turn = 0
    while turn < max_turns:
        turn += 1
        events.append(_act(a, b, first_strategy(a, b)))
        if b.is_defeated:
            return DuelResult(winner=a.name, turns=turn, timed_out=False, events=events)
        events.append(_act(b, a, second_strategy(b, a)))
        if a.is_defeated:
            return DuelResult(winner=b.name, turns=turn, timed_out=False, events=events)
    winner = a.name if a.hp > b.hp else b.name
    return DuelResult(winner=winner, turns=turn, timed_out=True, events=events)


def run_tournament(
    strategies: Mapping[str, Strategy] = STRATEGIES,
    rounds: int = 5,
    max_turns: int = DEFAULT_DUEL_TURNS,
) -> List[TournamentStanding]:
    """Play every pairing as a best-of-``rounds`` series and rank series wins."""
    if rounds < 1:
        raise ValueError("Tournament needs at least one round per pairing.")
    names = list(strategies)
    wins = {name: 0 for name in names}
    for i, first_name in enumerate(names):
        for second_name in names[i + 1 :]:
            first_wins = 0
            second_wins = 0
            for _ in range(rounds):
                result = simulate_duel(
                    new_player("Fighter1"),
                    strategies[first_name],
                    new_player("Fighter2"),
                    strategies[second_name],
                    max_turns=max_turns,
                )
                if result.winner == "Fighter1":
                    first_wins += 1
                else:
                    second_wins += 1
            wins[first_name if first_wins > second_wins else second_name] += 1
    standings = [TournamentStanding(name=name, series_wins=wins[name]) for name in names]
    standings.sort(key=lambda standing: -standing.series_wins)
    return standings
