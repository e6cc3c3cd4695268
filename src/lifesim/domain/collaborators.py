from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional, Sequence

from lifesim.domain.models.active_event import ActiveHealthEvent


class CharacterStore(ABC):
    wealth: float
    health: float
    happiness: float
    prestige: float
    properties: Sequence[object]
    assets: Sequence[object]
    lifestyle_items: Sequence[object]

    @abstractmethod
    def add_wealth(self, delta: float) -> None:
        raise NotImplementedError

    @abstractmethod
    def add_health(self, delta: float) -> None:
        raise NotImplementedError

    @abstractmethod
    def add_stress(self, delta: float) -> None:
        raise NotImplementedError

    @abstractmethod
    def add_happiness(self, delta: float) -> None:
        raise NotImplementedError

    @abstractmethod
    def add_prestige(self, delta: float) -> None:
        raise NotImplementedError

    @abstractmethod
    def improve_skill(self, name: str, delta: float) -> None:
        raise NotImplementedError

    @abstractmethod
    def reset_character(self) -> None:
        raise NotImplementedError


class GameStore(ABC):
    phase: str

    @abstractmethod
    def add_cash(self, delta: float) -> None:
        raise NotImplementedError

    @abstractmethod
    def apply_income_multiplier(self, factor: float) -> None:
        raise NotImplementedError


class AssetTracker(ABC):
    cash: float

    @abstractmethod
    def sync_derived_caches(self) -> None:
        """Recompute every value derived from the character's wealth."""
        raise NotImplementedError


@dataclass(frozen=True)
class Notification:
    severity: str
    title: str
    body: str
    duration_ms: Optional[int] = 5000
    requires_confirmation: bool = False


class Notifier(ABC):
    @abstractmethod
    def notify(self, notification: Notification) -> None:
        raise NotImplementedError


class AudioCues(ABC):
    HIT = "hit"
    SUCCESS = "success"

    @abstractmethod
    def play(self, cue: str) -> None:
        raise NotImplementedError


class HealthEventLog(ABC):
    @abstractmethod
    def append(self, event: ActiveHealthEvent) -> None:
        raise NotImplementedError

    @abstractmethod
    def list_active(self, now: float) -> List[ActiveHealthEvent]:
        raise NotImplementedError

    def prune_expired(self, now: float) -> int:
        """Deactivate records whose recovery window has passed; returns how many changed."""
        return 0
