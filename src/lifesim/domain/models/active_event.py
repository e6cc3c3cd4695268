from __future__ import annotations

from dataclasses import dataclass

from lifesim.domain.models.health_event import Severity


DAY_SECONDS = 24 * 60 * 60
DEFAULT_RECOVERY_DAYS = 3


@dataclass
class ActiveHealthEvent:
    id: str
    event_id: str
    title: str
    description: str
    severity: Severity
    started_at: float
    expires_at: float
    health_change: int = 0
    stress_change: int = 0
    wealth_change: float = 0.0
    category: str = "health"
    is_active: bool = True

    def is_expired(self, now: float) -> bool:
        return float(now) >= float(self.expires_at)


def expiry_for(started_at: float, recovery_time_days: int | None) -> float:
    days = recovery_time_days or DEFAULT_RECOVERY_DAYS
    return float(started_at) + float(days) * DAY_SECONDS
