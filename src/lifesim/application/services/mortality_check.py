from __future__ import annotations

import random

from lifesim.domain.models.escalation import EscalationState
from lifesim.domain.models.health_event import HealthEventDefinition


DEATH_CHANCE = 0.01


class MortalityCheck:
    def __init__(self, death_chance: float = DEATH_CHANCE) -> None:
        self.death_chance = float(death_chance)

    def applies_to(self, event: HealthEventDefinition, state: EscalationState) -> bool:
        return event.is_critical and not state.death_signaled

    def roll(self, event: HealthEventDefinition, state: EscalationState, rng: random.Random) -> bool:
        """One Bernoulli trial. The caller owns the death flag and sets it once effects land."""
        if not self.applies_to(event, state):
            return False
        return rng.random() <= self.death_chance
