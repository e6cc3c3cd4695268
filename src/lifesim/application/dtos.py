from dataclasses import dataclass
from enum import Enum
from typing import Optional

from lifesim.domain.models.active_event import ActiveHealthEvent
from lifesim.domain.models.health_event import HealthEventDefinition


class TickPhase(str, Enum):
    IDLE = "idle"
    EVALUATING = "evaluating"
    APPLIED = "applied"
    DENIED = "denied"


@dataclass(frozen=True)
class GateDecision:
    admitted: bool
    rule: str
    probability: float = 0.0


@dataclass
class TickOutcome:
    phase: TickPhase
    reason: str
    event: Optional[HealthEventDefinition] = None
    cost: float = 0.0
    died: bool = False
    active_event: Optional[ActiveHealthEvent] = None

    @property
    def applied(self) -> bool:
        return self.phase is TickPhase.APPLIED


@dataclass
class AchievementSummaryView:
    total: int
    unlocked: int
    in_progress: int
    claimed: int
