from __future__ import annotations

import logging
import random
import threading
import time
from typing import Callable

from lifesim.application.dtos import TickOutcome, TickPhase
from lifesim.application.services.cooldown_gate import CooldownGate
from lifesim.application.services.cost_calculator import apply_debt_policy, calculate_event_cost
from lifesim.application.services.event_bus import EventBus
from lifesim.application.services.mortality_check import MortalityCheck
from lifesim.application.services.severity_resolver import SeverityResolver
from lifesim.domain.collaborators import AudioCues, CharacterStore, HealthEventLog, Notification, Notifier
from lifesim.domain.events import CharacterDied, CharacterReset, HealthEventApplied, HealthTickEvaluated
from lifesim.domain.models.active_event import ActiveHealthEvent, expiry_for
from lifesim.domain.models.escalation import EscalationState
from lifesim.domain.models.health_event import HealthEventDefinition, Severity


DEFAULT_TICK_INTERVAL_S = 60.0
FATAL_HEALTH_WIPE = -100

_NOTIFICATION_STYLE = {
    Severity.MINOR: ("warning", 6000),
    Severity.MODERATE: ("warning", 6000),
    Severity.SEVERE: ("error", 8000),
    Severity.CRITICAL: ("error", 8000),
}


def format_cost(cost: float) -> str:
    return f"${cost:,.0f}"


def describe_health_event(event: HealthEventDefinition, cost: float) -> str:
    parts = [event.description, f"Medical costs: {format_cost(cost)}."]
    if event.recovery_time_days:
        parts.append(f"Recovery time: {event.recovery_time_days} days.")
    if event.chronic_effect:
        parts.append("This condition will have ongoing effects.")
    if event.preventable:
        parts.append("This could have been prevented with better health maintenance.")
    if event.requires_hospitalization:
        parts.append("This condition requires hospitalization.")
    return " ".join(parts)


class HealthMonitor:
    """Runs the health escalation pipeline once per tick.

    Each tick goes gate -> severity -> cost -> mortality and, when admitted,
    writes the effects to the character before returning. Ticks are
    serialized, so the escalation state has a single writer.
    """

    def __init__(
        self,
        character: CharacterStore,
        *,
        event_log: HealthEventLog,
        notifier: Notifier | None = None,
        audio: AudioCues | None = None,
        state: EscalationState | None = None,
        gate: CooldownGate | None = None,
        resolver: SeverityResolver | None = None,
        mortality: MortalityCheck | None = None,
        event_bus: EventBus | None = None,
        rng: random.Random | None = None,
        clock: Callable[[], float] | None = None,
    ) -> None:
        self.character = character
        self.event_log = event_log
        self.notifier = notifier
        self.audio = audio
        self.state = state or EscalationState()
        self.gate = gate or CooldownGate()
        self.resolver = resolver or SeverityResolver()
        self.mortality = mortality or MortalityCheck()
        self.event_bus = event_bus
        self.rng = rng or random.Random()
        self.clock = clock or time.time
        self.phase = TickPhase.IDLE
        self._lock = threading.Lock()
        self._ticker: _PeriodicTicker | None = None
        self._logger = logging.getLogger(__name__)

    @property
    def awaiting_death_confirmation(self) -> bool:
        return self.state.death_signaled

    def tick(self, now: float | None = None) -> TickOutcome:
        with self._lock:
            outcome = self._evaluate(self.clock() if now is None else float(now))
            self.phase = outcome.phase
            return outcome

    def _evaluate(self, now: float) -> TickOutcome:
        self.phase = TickPhase.EVALUATING
        self.event_log.prune_expired(now)
        if self.state.death_signaled:
            return TickOutcome(phase=TickPhase.DENIED, reason="awaiting_confirmation")

        health = self.character.health
        wealth = self.character.wealth

        decision = self.gate.evaluate(
            event_count=self.state.event_count,
            last_event_timestamp=self.state.last_event_timestamp,
            now=now,
            health=health,
            wealth=wealth,
            rng=self.rng,
        )
        if not decision.admitted:
            self._publish(
                HealthTickEvaluated(
                    phase=TickPhase.DENIED.value,
                    reason=decision.rule,
                    health=health,
                    event_count=self.state.event_count,
                )
            )
            return TickOutcome(phase=TickPhase.DENIED, reason=decision.rule)

        self.state.mark_triggered(now)
        event = self.resolver.resolve(self.state, health, self.rng)
        if event is None:
            return TickOutcome(phase=TickPhase.DENIED, reason="unknown_event")

        cost = apply_debt_policy(calculate_event_cost(event, wealth), wealth)
        died = self.mortality.roll(event, self.state, self.rng)

        try:
            record = self._apply_effects(event, cost, died, now)
        except Exception:
            self._logger.exception(
                "Health event effects could not be applied; event dropped",
                extra={"event_id": event.id, "severity": event.severity.value},
            )
            return TickOutcome(phase=TickPhase.DENIED, reason="effect_failed", event=event, cost=cost)

        if died:
            self.state.signal_death()

        self._announce(event, cost, died)
        if died:
            self._publish(CharacterDied(event_id=event.id, cost=cost, event_count=self.state.event_count))
        else:
            self._publish(
                HealthEventApplied(
                    event_id=event.id,
                    severity=event.severity.value,
                    cost=cost,
                    health_change=record.health_change,
                    stress_change=record.stress_change,
                    event_count=self.state.event_count,
                )
            )
        return TickOutcome(
            phase=TickPhase.APPLIED,
            reason="fatal" if died else decision.rule,
            event=event,
            cost=cost,
            died=died,
            active_event=record,
        )

    def _apply_effects(self, event: HealthEventDefinition, cost: float, died: bool, now: float) -> ActiveHealthEvent:
        health_change = FATAL_HEALTH_WIPE if died else int(event.health_impact or 0)
        stress_change = 0 if died else int(event.stress_impact or 0)

        self.character.add_wealth(-cost)
        if health_change:
            self.character.add_health(health_change)
        if stress_change:
            self.character.add_stress(stress_change)

        record = ActiveHealthEvent(
            id=f"health-event-{int(now * 1000)}-{self.state.event_count}",
            event_id=event.id,
            title=event.title,
            description=describe_health_event(event, cost),
            severity=event.severity,
            started_at=now,
            expires_at=expiry_for(now, event.recovery_time_days),
            health_change=health_change,
            stress_change=stress_change,
            wealth_change=-cost,
        )
        self.event_log.append(record)
        return record

    def _announce(self, event: HealthEventDefinition, cost: float, died: bool) -> None:
        if died:
            notification = Notification(
                severity="critical",
                title="Fatal health event",
                body=(
                    f"{event.title} proved fatal. Medical costs: {format_cost(cost)}. "
                    "Confirm to start a new life."
                ),
                duration_ms=None,
                requires_confirmation=True,
            )
        else:
            style, duration_ms = _NOTIFICATION_STYLE[event.severity]
            body = f"{event.description}\n\nMedical costs: {format_cost(cost)}"
            if event.requires_hospitalization and event.severity in (Severity.SEVERE, Severity.CRITICAL):
                body += "\n\nRequires hospitalization"
            notification = Notification(severity=style, title=event.title, body=body, duration_ms=duration_ms)

        try:
            if self.audio is not None:
                self.audio.play(AudioCues.HIT)
            if self.notifier is not None:
                self.notifier.notify(notification)
        except Exception:
            self._logger.exception("Health event notification failed", extra={"event_id": event.id})

    def confirm_death(self) -> bool:
        """Run the character-reset flow after the player acknowledges a death."""
        with self._lock:
            if not self.state.death_signaled:
                return False
            self.character.reset_character()
            self.state.reset()
        self._publish(CharacterReset(reason="death"))
        return True

    def reset(self) -> None:
        with self._lock:
            self.state.reset()
        self._publish(CharacterReset(reason="restart"))

    def start(self, interval_seconds: float = DEFAULT_TICK_INTERVAL_S) -> Callable[[], None]:
        self.stop()
        self._ticker = _PeriodicTicker(interval_seconds, self._timer_tick)
        self._ticker.start()
        return self.stop

    def stop(self) -> None:
        if self._ticker is not None:
            self._ticker.cancel()
            self._ticker = None

    def _timer_tick(self) -> None:
        try:
            self.tick()
        except Exception:
            self._logger.exception("Health monitor tick failed")

    def _publish(self, event: object) -> None:
        if self.event_bus is not None:
            self.event_bus.publish(event)


class _PeriodicTicker:
    def __init__(self, interval_seconds: float, callback: Callable[[], None]) -> None:
        self.interval_seconds = max(0.001, float(interval_seconds))
        self.callback = callback
        self._timer: threading.Timer | None = None
        self._cancelled = threading.Event()
        self._lock = threading.Lock()

    def start(self) -> None:
        self._schedule()

    def _schedule(self) -> None:
        with self._lock:
            if self._cancelled.is_set():
                return
            timer = threading.Timer(self.interval_seconds, self._run)
            timer.daemon = True
            self._timer = timer
            timer.start()

    def _run(self) -> None:
        if self._cancelled.is_set():
            return
        self.callback()
        self._schedule()

    def cancel(self) -> None:
        with self._lock:
            self._cancelled.set()
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None
