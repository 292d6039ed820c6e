import pytest

from skirmish.domain.abilities import BASIC_ATTACK, HEAL
from skirmish.domain.entities import Character, Stats, new_player
from skirmish.services.strategies import (
    STRATEGIES,
    aggressive,
    balanced,
    defensive,
    run_tournament,
    simulate_duel,
    smart,
)


def _fighter(name: str, hp: int = 30, defense: int = 2) -> Character:
    return Character(name=name, hp=hp, stats=Stats(hp=30, attack=10, defense=defense))


def test_aggressive_always_hits_hard() -> None:
    ability = aggressive(_fighter("A", hp=1), _fighter("B"))
    assert (ability.name, ability.power) == ("Aggressive Strike", 15)


def test_defensive_heals_below_half_health() -> None:
    assert defensive(_fighter("A", hp=14), _fighter("B")) == HEAL
    assert defensive(_fighter("A", hp=15), _fighter("B")) == BASIC_ATTACK


@pytest.mark.parametrize(
    ("opponent_hp", "expected"),
    [(30, "Power Attack"), (15, "Basic Attack"), (9, "Finishing Blow")],
)
def test_balanced_reads_opponent_health(opponent_hp: int, expected: str) -> None:
    assert balanced(_fighter("A"), _fighter("B", hp=opponent_hp)).name == expected


def test_smart_desperate_strike_when_both_low() -> None:
    ability = smart(_fighter("A", hp=8), _fighter("B", hp=10))
    assert (ability.name, ability.power) == ("Desperate Strike", 25)


def test_smart_breaks_heavy_armor() -> None:
    ability = smart(_fighter("A", hp=20), _fighter("B", defense=6))
    assert (ability.name, ability.power) == ("Armor Break", 18)


def test_smart_charges_when_both_healthy() -> None:
    assert smart(_fighter("A"), _fighter("B")).name == "Charge Attack"


def test_smart_defaults_to_basic_attack() -> None:
    assert smart(_fighter("A", hp=15), _fighter("B")) == BASIC_ATTACK


def test_simulate_duel_aggressive_beats_balanced() -> None:
    first = new_player("Fighter1")
    second = new_player("Fighter2")

    result = simulate_duel(first, aggressive, second, balanced)

    assert result.winner == "Fighter1"
    assert result.turns == 2
    assert not result.timed_out
    assert [event.damage for event in result.events] == [23, 20, 23]
    assert first.hp == 30
    assert second.hp == 30


def test_simulate_duel_turn_limit_prefers_healthier() -> None:
    result = simulate_duel(new_player("Fighter1"), aggressive, new_player("Fighter2"), aggressive, max_turns=1)

    assert result.timed_out
    assert result.turns == 1
    # Both sit at 7 HP; ties go to the second fighter.
    assert result.winner == "Fighter2"


def test_defensive_fighter_heals_mid_duel() -> None:
    result = simulate_duel(new_player("Fighter1"), defensive, new_player("Fighter2"), defensive)

    assert any(event.is_heal for event in result.events)
    assert result.winner == "Fighter1"


def test_tournament_ranks_every_strategy() -> None:
    standings = run_tournament(rounds=1)

    assert {standing.name for standing in standings} == set(STRATEGIES)
    assert sum(standing.series_wins for standing in standings) == 6
    wins = [standing.series_wins for standing in standings]
    assert wins == sorted(wins, reverse=True)


def test_tournament_requires_rounds() -> None:
    with pytest.raises(ValueError):
        run_tournament(rounds=0)
