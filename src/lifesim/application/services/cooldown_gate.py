from __future__ import annotations

import math
import random

from lifesim.application.dtos import GateDecision
from lifesim.domain.models.active_event import DAY_SECONDS


YEARLY_CAP = 3
CRITICAL_THRESHOLD = 8
LOW_THRESHOLD = 20
COOLDOWN_WINDOW = 14 * DAY_SECONDS

CRITICAL_ADMIT_CHANCE = 0.75
LOW_ADMIT_CHANCE = 0.15
BASELINE_ADMIT_CHANCE = 0.0025
BASELINE_MIN_WEALTH = 1000


def _as_number(value, default: float = 0.0) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        return default
    return default if math.isnan(number) else number


class CooldownGate:
    """Decides whether a health event may fire on this tick.

    Rules run in a fixed order and the first one that applies settles the
    tick; later rules are never consulted.
    """

    def __init__(
        self,
        *,
        yearly_cap: int = YEARLY_CAP,
        cooldown_window: float = COOLDOWN_WINDOW,
        critical_threshold: float = CRITICAL_THRESHOLD,
        low_threshold: float = LOW_THRESHOLD,
    ) -> None:
        self.yearly_cap = int(yearly_cap)
        self.cooldown_window = float(cooldown_window)
        self.critical_threshold = float(critical_threshold)
        self.low_threshold = float(low_threshold)

    def evaluate(
        self,
        *,
        event_count: int,
        last_event_timestamp: float | None,
        now: float,
        health: float,
        wealth: float,
        rng: random.Random,
    ) -> GateDecision:
        health_value = _as_number(health)
        wealth_value = _as_number(wealth)

        if int(event_count) > self.yearly_cap and health_value > self.critical_threshold:
            return GateDecision(admitted=False, rule="yearly_cap")

        if last_event_timestamp is not None and float(now) - float(last_event_timestamp) < self.cooldown_window:
            return GateDecision(admitted=False, rule="cooldown")

        if health_value <= self.critical_threshold:
            return self._roll("critical_health", CRITICAL_ADMIT_CHANCE, rng)

        if health_value <= self.low_threshold:
            return self._roll("low_health", LOW_ADMIT_CHANCE, rng)

        if wealth_value <= BASELINE_MIN_WEALTH:
            return GateDecision(admitted=False, rule="baseline", probability=BASELINE_ADMIT_CHANCE)
        return self._roll("baseline", BASELINE_ADMIT_CHANCE, rng)

    @staticmethod
    def _roll(rule: str, probability: float, rng: random.Random) -> GateDecision:
        return GateDecision(admitted=rng.random() < probability, rule=rule, probability=probability)
