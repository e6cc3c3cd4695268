from __future__ import annotations

import threading
from typing import List

from lifesim.domain.collaborators import (
    AssetTracker,
    AudioCues,
    CharacterStore,
    GameStore,
    HealthEventLog,
    Notification,
    Notifier,
)
from lifesim.domain.models.active_event import ActiveHealthEvent


class InMemoryGame(GameStore):
    def __init__(self, phase: str = "playing", cash: float = 0.0, income_multiplier: float = 1.0) -> None:
        self.phase = phase
        self.cash = float(cash)
        self.income_multiplier = float(income_multiplier)

    def add_cash(self, delta: float) -> None:
        self.cash += float(delta)

    def apply_income_multiplier(self, factor: float) -> None:
        self.income_multiplier *= float(factor)


class InMemoryAssetTracker(AssetTracker):
    """Mirrors the character's wealth as spendable cash."""

    def __init__(self, character: CharacterStore) -> None:
        self.character = character
        self.cash = float(character.wealth)
        self.sync_count = 0

    def sync_derived_caches(self) -> None:
        self.cash = float(self.character.wealth)
        self.sync_count += 1


class RecordingNotifier(Notifier):
    def __init__(self) -> None:
        self.notifications: List[Notification] = []

    def notify(self, notification: Notification) -> None:
        self.notifications.append(notification)


class RecordingAudio(AudioCues):
    def __init__(self) -> None:
        self.played: List[str] = []

    def play(self, cue: str) -> None:
        self.played.append(str(cue))


class InMemoryHealthEventLog(HealthEventLog):
    def __init__(self) -> None:
        self._events: List[ActiveHealthEvent] = []
        self._lock = threading.Lock()

    def append(self, event: ActiveHealthEvent) -> None:
        with self._lock:
            self._events.append(event)

    def list_active(self, now: float) -> List[ActiveHealthEvent]:
        with self._lock:
            return [row for row in self._events if row.is_active and not row.is_expired(now)]

    def list_all(self) -> List[ActiveHealthEvent]:
        with self._lock:
            return list(self._events)

    def prune_expired(self, now: float) -> int:
        with self._lock:
            expired = [row for row in self._events if row.is_active and row.is_expired(now)]
            for row in expired:
                row.is_active = False
            return len(expired)
