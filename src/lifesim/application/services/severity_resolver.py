from __future__ import annotations

import logging
import random

from lifesim.domain.models.escalation import EscalationState
from lifesim.domain.models.health_event import HealthEventDefinition, Severity
from lifesim.domain.services.health_event_catalog import HealthEventCatalog


BASE_CRITICAL_CHANCE = 0.8
EVENT_COUNT_MULTIPLIER = 0.02

CRITICAL_HEALTH = 10
SEVERE_HEALTH = 25
MODERATE_HEALTH = 40

logger = logging.getLogger(__name__)


def critical_chance(event_count: int) -> float:
    return min(1.0, BASE_CRITICAL_CHANCE + max(0, int(event_count)) * EVENT_COUNT_MULTIPLIER)


def choose_severity(health: float, event_count: int, rng: random.Random) -> Severity:
    if health <= CRITICAL_HEALTH:
        if rng.random() <= critical_chance(event_count):
            return Severity.CRITICAL
        return Severity.SEVERE
    if health <= SEVERE_HEALTH:
        return Severity.SEVERE
    if health <= MODERATE_HEALTH:
        return Severity.MODERATE
    return Severity.MINOR


class SeverityResolver:
    def __init__(self, catalog: HealthEventCatalog | None = None) -> None:
        self.catalog = catalog or HealthEventCatalog()

    def resolve(self, state: EscalationState, health: float, rng: random.Random) -> HealthEventDefinition | None:
        """Count the incoming event, then pick one definition for the health band.

        The counter is bumped before the severity roll, so the event being
        generated already contributes to its own critical chance.
        """
        count = state.record_event()
        severity = choose_severity(health, count, rng)
        pool = self.catalog.for_severity(severity)
        if not pool:
            logger.warning(
                "No health events defined for severity",
                extra={"severity": severity.value, "event_count": count},
            )
            return None
        return rng.choice(pool)
