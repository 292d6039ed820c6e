import json
from pathlib import Path

import pytest

from skirmish.data.errors import DataLoadError, DataReferenceError, DataValidationError
from skirmish.data.repositories import AbilitiesRepository, CharactersRepository, RulesRepository


def _write_json(path: Path, payload: object) -> None:
    path.write_text(json.dumps(payload), encoding="utf-8")


def _make_definitions_dir(tmp_path: Path) -> Path:
    definitions_dir = tmp_path / "definitions"
    definitions_dir.mkdir()
    _write_json(
        definitions_dir / "abilities.json",
        {
            "jab": {"name": "Jab", "power": 2, "effect": "damage", "kind": "basic_attack"},
            "mend": {"name": "Mend", "power": -4, "effect": "heal", "kind": "heal"},
        },
    )
    return definitions_dir


def _character_payload(**overrides: object) -> dict[str, object]:
    payload: dict[str, object] = {
        "role": "monster",
        "default_name": "Rat",
        "hp": 8,
        "attack": 3,
        "defense": 0,
        "tactics": [{"ability": "jab", "cooldown": 0}, {"ability": "mend", "cooldown": 2}],
    }
    payload.update(overrides)
    return payload


def _rules_payload(**overrides: object) -> dict[str, object]:
    payload: dict[str, object] = {
        "log_capacity": 5,
        "monster_think_delay": 0.5,
        "monster_turn_tick": 1,
        "ai": {"low_health_threshold": 0.25, "high_health_threshold": 0.75},
    }
    payload.update(overrides)
    return payload


def test_abilities_repo_loads_definitions(tmp_path: Path) -> None:
    repo = AbilitiesRepository(base_path=_make_definitions_dir(tmp_path))

    assert repo.ids() == ["jab", "mend"]
    mend = repo.get("mend")
    assert mend.effect == "heal"
    assert mend.to_ability().is_heal


def test_abilities_repo_unknown_id_raises_key_error(tmp_path: Path) -> None:
    repo = AbilitiesRepository(base_path=_make_definitions_dir(tmp_path))
    with pytest.raises(KeyError):
        repo.get("fireball")


def test_abilities_repo_missing_field(tmp_path: Path) -> None:
    _write_json(tmp_path / "abilities.json", {"jab": {"name": "Jab", "power": 2, "effect": "damage"}})
    with pytest.raises(DataValidationError):
        AbilitiesRepository(base_path=tmp_path).all()


def test_abilities_repo_rejects_positive_heal(tmp_path: Path) -> None:
    _write_json(
        tmp_path / "abilities.json",
        {"mend": {"name": "Mend", "power": 4, "effect": "heal", "kind": "heal"}},
    )
    with pytest.raises(DataValidationError):
        AbilitiesRepository(base_path=tmp_path).all()


def test_abilities_repo_rejects_unknown_effect(tmp_path: Path) -> None:
    _write_json(
        tmp_path / "abilities.json",
        {"hex": {"name": "Hex", "power": 4, "effect": "curse", "kind": "other"}},
    )
    with pytest.raises(DataValidationError):
        AbilitiesRepository(base_path=tmp_path).all()


def test_abilities_repo_rejects_boolean_power(tmp_path: Path) -> None:
    _write_json(
        tmp_path / "abilities.json",
        {"jab": {"name": "Jab", "power": True, "effect": "damage", "kind": "other"}},
    )
    with pytest.raises(DataValidationError):
        AbilitiesRepository(base_path=tmp_path).all()


def test_missing_file_raises_load_error(tmp_path: Path) -> None:
    with pytest.raises(DataLoadError):
        AbilitiesRepository(base_path=tmp_path).all()


def test_invalid_json_raises_load_error(tmp_path: Path) -> None:
    (tmp_path / "abilities.json").write_text("{not json", encoding="utf-8")
    with pytest.raises(DataLoadError):
        AbilitiesRepository(base_path=tmp_path).all()


def test_top_level_must_be_object(tmp_path: Path) -> None:
    _write_json(tmp_path / "abilities.json", ["jab"])
    with pytest.raises(DataValidationError):
        AbilitiesRepository(base_path=tmp_path).all()


def test_characters_repo_loads_tactics(tmp_path: Path) -> None:
    definitions_dir = _make_definitions_dir(tmp_path)
    _write_json(definitions_dir / "characters.json", {"rat": _character_payload()})

    rat = CharactersRepository(base_path=definitions_dir).get("rat")

    assert rat.role == "monster"
    assert rat.loadout == ()
    assert [(entry.ability_id, entry.cooldown) for entry in rat.tactics] == [("jab", 0.0), ("mend", 2.0)]


def test_characters_repo_missing_ability_reference(tmp_path: Path) -> None:
    definitions_dir = _make_definitions_dir(tmp_path)
    _write_json(
        definitions_dir / "characters.json",
        {"rat": _character_payload(tactics=[{"ability": "fireball", "cooldown": 1}])},
    )
    with pytest.raises(DataReferenceError):
        CharactersRepository(base_path=definitions_dir).all()


def test_characters_repo_negative_cooldown(tmp_path: Path) -> None:
    definitions_dir = _make_definitions_dir(tmp_path)
    _write_json(
        definitions_dir / "characters.json",
        {"rat": _character_payload(loadout=[{"ability": "jab", "cooldown": -1}])},
    )
    with pytest.raises(DataValidationError):
        CharactersRepository(base_path=definitions_dir).all()


def test_characters_repo_unknown_role(tmp_path: Path) -> None:
    definitions_dir = _make_definitions_dir(tmp_path)
    _write_json(definitions_dir / "characters.json", {"rat": _character_payload(role="boss")})
    with pytest.raises(DataValidationError):
        CharactersRepository(base_path=definitions_dir).all()


def test_rules_repo_loads_profile(tmp_path: Path) -> None:
    _write_json(tmp_path / "rules.json", {"standard": _rules_payload()})

    rules = RulesRepository(base_path=tmp_path).default()

    assert rules.log_capacity == 5
    assert rules.monster_think_delay == 0.5
    assert rules.monster_turn_tick == 1.0
    assert rules.ai.low_health_threshold == 0.25


def test_rules_repo_rejects_inverted_thresholds(tmp_path: Path) -> None:
    _write_json(
        tmp_path / "rules.json",
        {"standard": _rules_payload(ai={"low_health_threshold": 0.8, "high_health_threshold": 0.2})},
    )
    with pytest.raises(DataValidationError):
        RulesRepository(base_path=tmp_path).all()


def test_rules_repo_rejects_zero_capacity(tmp_path: Path) -> None:
    _write_json(tmp_path / "rules.json", {"standard": _rules_payload(log_capacity=0)})
    with pytest.raises(DataValidationError):
        RulesRepository(base_path=tmp_path).all()


def test_rules_repo_rejects_negative_delay(tmp_path: Path) -> None:
    _write_json(tmp_path / "rules.json", {"standard": _rules_payload(monster_think_delay=-1)})
    with pytest.raises(DataValidationError):
        RulesRepository(base_path=tmp_path).all()
