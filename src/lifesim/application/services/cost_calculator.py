from __future__ import annotations

import math

from lifesim.domain.models.health_event import HealthEventDefinition


WEALTH_ADDITION_CAP = 3.0
LOW_WEALTH_RATIO = 2.0
LOW_WEALTH_SCALE = 0.25
MAX_WEALTH_SHARE = 0.5
MIN_COST_SHARE = 0.1

DEBT_COST_SHARE = 0.1
DEBT_COST_CAP = 50.0
WEALTH_FLOOR = -1000.0


def _valid_wealth(wealth) -> float:
    try:
        value = float(wealth)
    except (TypeError, ValueError):
        return 0.0
    if math.isnan(value):
        return 0.0
    return max(0.0, value)


def calculate_event_cost(event: HealthEventDefinition, wealth) -> float:
    """Wealth-bounded medical cost for one health event.

    Never exceeds half of a positive wealth, and never drops below a tenth of
    the event's base cost.
    """
    base_cost = float(event.base_cost)
    valid_wealth = _valid_wealth(wealth)

    cost = base_cost
    if event.wealth_multiplier and valid_wealth > 0:
        cost += min(valid_wealth * float(event.wealth_multiplier), base_cost * WEALTH_ADDITION_CAP)

    if valid_wealth < cost * LOW_WEALTH_RATIO:
        cost = max(cost * LOW_WEALTH_SCALE, min(cost, valid_wealth * MAX_WEALTH_SHARE))

    return max(min(cost, valid_wealth * MAX_WEALTH_SHARE), base_cost * MIN_COST_SHARE)


def apply_debt_policy(cost: float, wealth) -> float:
    """Caller-side adjustment for characters already in (or near) debt."""
    try:
        current = float(wealth)
    except (TypeError, ValueError):
        current = 0.0
    if math.isnan(current):
        current = 0.0

    adjusted = max(0.0, float(cost))
    if current < 0:
        adjusted = min(adjusted * DEBT_COST_SHARE, DEBT_COST_CAP)
    if current - adjusted < WEALTH_FLOOR:
        adjusted = max(0.0, current - WEALTH_FLOOR)
    return adjusted
