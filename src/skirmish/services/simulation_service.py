"""Headless batch simulation of full encounters."""
from __future__ import annotations

import logging
from dataclasses import dataclass

from skirmish.services.encounter_service import EncounterService, PlayerAction

logger = logging.getLogger(__name__)

DEFAULT_MAX_TURNS = 100


@dataclass(slots=True)
class SimulationReport:
    """Aggregate results of a simulation batch."""

    simulations: int = 0
    player_wins: int = 0
    monster_wins: int = 0
    timeouts: int = 0
    total_turns: int = 0

    @property
    def average_turns(self) -> float:
        if self.simulations == 0:
            return 0.0
        return self.total_turns / self.simulations

    def win_rate(self, wins: int) -> float:
        if self.simulations == 0:
            return 0.0
        return wins / self.simulations * 100.0


class SimulationService:
    """Runs encounters without rendering, the player always using Basic Attack."""

    def __init__(self, encounter_service: EncounterService) -> None:
        self._service = encounter_service

    def run(
        self,
        count: int,
        *,
        max_turns: int = DEFAULT_MAX_TURNS,
        rules_id: str = "standard",
    ) -> SimulationReport:
        if count < 0:
            raise ValueError("Simulation count cannot be negative.")
        report = SimulationReport()
        for index in range(count):
            encounter, _ = self._service.start_encounter(rules_id=rules_id)
            # The thinking pause is real time; headless runs skip it.
            encounter.monster_think_delay = 0.0
            while not encounter.is_over and encounter.turn <= max_turns:
                self._service.advance(encounter, PlayerAction())
                self._service.advance(encounter)

            report.simulations += 1
            if encounter.winner is None:
                report.timeouts += 1
                report.total_turns += max_turns
                logger.info("Simulation %d/%d reached the turn limit", index + 1, count)
                continue
            report.total_turns += encounter.turn
            if encounter.winner == encounter.player.name:
                report.player_wins += 1
            else:
                report.monster_wins += 1
            logger.info("Simulation %d/%d: %s wins in %d turns", index + 1, count, encounter.winner, encounter.turn)
        return report
