from __future__ import annotations

from dataclasses import dataclass


@dataclass
class EscalationState:
    """Per-character health escalation counters.

    ``event_count`` only grows between resets, ``last_event_timestamp`` is the
    clock value of the most recent admitted event (``None`` until the first
    one), and ``death_signaled`` is set at most once per character lifetime.
    """

    event_count: int = 0
    last_event_timestamp: float | None = None
    death_signaled: bool = False

    def __post_init__(self) -> None:
        try:
            self.event_count = max(0, int(self.event_count or 0))
        except (TypeError, ValueError):
            self.event_count = 0

    def record_event(self) -> int:
        self.event_count += 1
        return self.event_count

    def mark_triggered(self, now: float) -> None:
        self.last_event_timestamp = float(now)

    def signal_death(self) -> bool:
        if self.death_signaled:
            return False
        self.death_signaled = True
        return True

    def reset(self) -> None:
        self.event_count = 0
        self.last_event_timestamp = None
        self.death_signaled = False
