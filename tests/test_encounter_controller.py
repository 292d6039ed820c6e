import pytest

from skirmish.domain.combat_state import GameOver
from skirmish.domain.cooldowns import AbilitySet
from skirmish.domain.encounter_models import Encounter
from skirmish.domain.entities import new_monster, new_player
from skirmish.services.controllers import EncounterAction, EncounterController
from skirmish.services.encounter_service import AbilityResolvedEvent, EncounterService


def _make_encounter(think_delay: float = 0.0) -> Encounter:
    return Encounter(
        player=new_player("Hero"),
        monster=new_monster("Slime"),
        player_abilities=AbilitySet.player_default(),
        monster_abilities=AbilitySet.monster_tactics(),
        monster_think_delay=think_delay,
    )


def _make_controller() -> EncounterController:
    return EncounterController(EncounterService())


def test_attack_action_resolves_basic_attack() -> None:
    controller = _make_controller()
    encounter = _make_encounter()

    events = controller.apply_player_action(encounter, EncounterAction(action_type="attack"))

    assert isinstance(events[0], AbilityResolvedEvent)
    assert encounter.monster.hp == 6
    assert controller.is_monster_turn(encounter)


def test_ability_action_uses_selected_slot() -> None:
    controller = _make_controller()
    encounter = _make_encounter()

    controller.apply_player_action(encounter, EncounterAction(action_type="ability", ability_index=3))

    # Quick Strike: 10 + 3 - 1
    assert encounter.monster.hp == 8
    assert encounter.player_abilities.slots[3].cooldown_current == 0.2


def test_ability_action_requires_index() -> None:
    with pytest.raises(ValueError):
        _make_controller().apply_player_action(_make_encounter(), EncounterAction(action_type="ability"))


def test_attack_action_rejects_index() -> None:
    with pytest.raises(ValueError):
        _make_controller().apply_player_action(
            _make_encounter(), EncounterAction(action_type="attack", ability_index=0)
        )


def test_unknown_action_type_is_rejected() -> None:
    with pytest.raises(ValueError):
        _make_controller().apply_player_action(
            _make_encounter(), EncounterAction(action_type="flee")  # type: ignore[arg-type]
        )


def test_available_actions_are_ready_slots_on_player_turn() -> None:
    controller = _make_controller()
    encounter = _make_encounter()
    encounter.player_abilities.slots[2].activate()

    names = [slot.name for slot in controller.get_available_actions(encounter)]

    assert names == ["Basic Attack", "Powerful Attack", "Quick Strike"]


def test_no_available_actions_outside_player_turn() -> None:
    controller = _make_controller()
    encounter = _make_encounter()
    controller.apply_player_action(encounter, EncounterAction(action_type="attack"))

    assert controller.get_available_actions(encounter) == []


def test_run_monster_turn_is_noop_on_player_turn() -> None:
    controller = _make_controller()
    encounter = _make_encounter()

    assert controller.run_monster_turn(encounter, 5.0) == []
    assert encounter.player.hp == 30


def test_run_monster_turn_respects_delay() -> None:
    controller = _make_controller()
    encounter = _make_encounter(think_delay=1.0)
    controller.apply_player_action(encounter, EncounterAction(action_type="attack"))

    assert controller.run_monster_turn(encounter, 0.5) == []
    assert controller.run_monster_turn(encounter, 0.5)
    assert controller.is_player_turn(encounter)


def test_full_duel_through_controller() -> None:
    controller = _make_controller()
    encounter = _make_encounter()

    while not controller.is_over(encounter):
        if controller.is_player_turn(encounter):
            controller.apply_player_action(encounter, EncounterAction(action_type="attack"))
        else:
            controller.run_monster_turn(encounter, 0.0)

    assert encounter.state == GameOver(winner="Hero")
    assert controller.get_view(encounter).turn == 2
