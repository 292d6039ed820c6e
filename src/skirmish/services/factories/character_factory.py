"""Factory for creating characters from templates."""
from __future__ import annotations

from skirmish.data.repositories import CharactersRepository
from skirmish.domain.entities import Character, Stats, character_from_stats
from skirmish.services.errors import FactoryError


def create_character(
    template_id: str,
    characters_repo: CharactersRepository,
    name: str | None = None,
) -> Character:
    """Instantiate a full-health character from a template."""
    try:
        character_def = characters_repo.get(template_id)
    except KeyError as exc:
        raise FactoryError(f"Character template '{template_id}' not found.") from exc

    stats = Stats(hp=character_def.hp, attack=character_def.attack, defense=character_def.defense)
    return character_from_stats(name or character_def.default_name, stats)
