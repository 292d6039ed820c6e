"""Encounter rules repository."""
from __future__ import annotations

from typing import Dict

from skirmish.data.errors import DataValidationError
from skirmish.data.repositories.base import RepositoryBase
from skirmish.domain.ai import AiPolicyConfig
from skirmish.domain.defs import RulesDef

DEFAULT_RULES_ID = "standard"


class RulesRepository(RepositoryBase[RulesDef]):
    """Loads named rule profiles (log size, pacing and AI thresholds)."""

    def __init__(self, base_path=None) -> None:
        super().__init__("rules.json", base_path)

    def default(self) -> RulesDef:
        return self.get(DEFAULT_RULES_ID)

    def _build(self, raw: dict[str, object]) -> Dict[str, RulesDef]:
        rules: Dict[str, RulesDef] = {}
        for raw_id, payload in raw.items():
            context = f"rules '{raw_id}'"
            data = self._require_mapping(payload, context)
            self._assert_required(data, {"log_capacity", "monster_think_delay", "monster_turn_tick", "ai"}, context)

            log_capacity = self._require_int(data["log_capacity"], f"{context} log_capacity")
            if log_capacity < 1:
                raise DataValidationError(f"{context} log_capacity must be at least 1.")
            think_delay = self._require_number(data["monster_think_delay"], f"{context} monster_think_delay")
            turn_tick = self._require_number(data["monster_turn_tick"], f"{context} monster_turn_tick")
            if think_delay < 0 or turn_tick < 0:
                raise DataValidationError(f"{context} timings cannot be negative.")

            rules[raw_id] = RulesDef(
                id=raw_id,
                log_capacity=log_capacity,
                monster_think_delay=think_delay,
                monster_turn_tick=turn_tick,
                ai=self._parse_ai(data["ai"], f"{context} ai"),
            )
        return rules

    def _parse_ai(self, value: object, context: str) -> AiPolicyConfig:
        data = self._require_mapping(value, context)
        self._assert_required(data, {"low_health_threshold", "high_health_threshold"}, context)
        try:
            return AiPolicyConfig(
                low_health_threshold=self._require_number(
                    data["low_health_threshold"], f"{context} low_health_threshold"
                ),
                high_health_threshold=self._require_number(
                    data["high_health_threshold"], f"{context} high_health_threshold"
                ),
            )
        except ValueError as exc:
            raise DataValidationError(f"{context}: {exc}") from exc
