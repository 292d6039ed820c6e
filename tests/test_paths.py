from pathlib import Path

from skirmish.data import paths
from skirmish.data.repositories import RulesRepository


def test_get_definitions_path_base_path(tmp_path: Path) -> None:
    assert paths.get_definitions_path(tmp_path) == tmp_path


def test_get_definitions_path_source_repo_exists(monkeypatch) -> None:
    monkeypatch.delenv(paths.DEFINITIONS_ENV_VAR, raising=False)
    definitions_path = paths.get_definitions_path()

    assert definitions_path.name == "definitions"
    assert (definitions_path / "abilities.json").exists()


def test_environment_override(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv(paths.DEFINITIONS_ENV_VAR, str(tmp_path))
    assert paths.get_definitions_path() == tmp_path


def test_explicit_base_path_beats_environment(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv(paths.DEFINITIONS_ENV_VAR, "/nowhere")
    assert paths.get_definitions_path(tmp_path) == tmp_path


def test_repository_follows_environment_override(monkeypatch, tmp_path: Path) -> None:
    (tmp_path / "rules.json").write_text(
        '{"custom": {"log_capacity": 3, "monster_think_delay": 0, "monster_turn_tick": 1,'
        ' "ai": {"low_health_threshold": 0.3, "high_health_threshold": 0.7}}}',
        encoding="utf-8",
    )
    monkeypatch.setenv(paths.DEFINITIONS_ENV_VAR, str(tmp_path))

    assert RulesRepository().ids() == ["custom"]
