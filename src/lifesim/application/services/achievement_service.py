from __future__ import annotations

import logging
import math
import threading
from collections.abc import Sequence
from dataclasses import replace
from datetime import datetime, timezone
from typing import Callable

from lifesim.application.services.event_bus import EventBus
from lifesim.domain.errors import PersistenceError
from lifesim.domain.events import AchievementUnlocked
from lifesim.domain.models.achievement import Achievement, AchievementCategory
from lifesim.domain.repositories import AchievementStateRepository
from lifesim.domain.services.achievement_catalog import ACHIEVEMENT_CATALOG, fresh_achievements


logger = logging.getLogger(__name__)


def _utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def _metric(value) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    if math.isnan(number):
        return 0.0
    return number


def normalize_progress(raw_metric, threshold: float) -> int:
    ratio = _metric(raw_metric) / float(threshold) * 100
    if math.isinf(ratio):
        return 100 if ratio > 0 else 0
    return max(0, min(100, int(math.floor(ratio))))


class AchievementService:
    """Mutable achievement progress derived from the static catalog.

    Every committed mutation is written through the repository right away;
    a failed write is logged and the in-memory state stays authoritative.
    """

    def __init__(
        self,
        repository: AchievementStateRepository | None = None,
        *,
        catalog: Sequence[Achievement] | None = None,
        event_bus: EventBus | None = None,
        clock: Callable[[], str] | None = None,
    ) -> None:
        self.repository = repository
        self.catalog = tuple(ACHIEVEMENT_CATALOG if catalog is None else catalog)
        self.event_bus = event_bus
        self.clock = clock or _utc_now_iso
        self._lock = threading.RLock()
        self._achievements: dict[str, Achievement] = {}
        self._newly_unlocked: list[str] = []
        self._last_unlocked_id: str | None = None
        self.show_notification = False
        self._load()

    def _load(self) -> None:
        stored: dict[str, Achievement] = {}
        last_unlocked_id = None
        if self.repository is not None:
            rows = self.repository.load() or []
            stored = {row.id: row for row in rows}
            last_unlocked_id = self.repository.load_last_unlocked_id()

        merged: dict[str, Achievement] = {}
        for template in fresh_achievements(self.catalog):
            previous = stored.get(template.id)
            if previous is not None:
                template = replace(
                    template,
                    progress=previous.progress,
                    is_unlocked=previous.is_unlocked,
                    unlocked_date=previous.unlocked_date,
                )
            merged[template.id] = template
        self._achievements = merged
        self._last_unlocked_id = last_unlocked_id if last_unlocked_id in merged else None

    def _commit(self) -> None:
        if self.repository is None:
            return
        try:
            self.repository.save(
                [row.clone() for row in self._achievements.values()],
                last_unlocked_id=self._last_unlocked_id,
            )
        except PersistenceError:
            logger.exception("Achievement state could not be persisted")

    def get_achievement(self, achievement_id: str) -> Achievement | None:
        with self._lock:
            row = self._achievements.get(str(achievement_id))
            return row.clone() if row is not None else None

    def is_unlocked(self, achievement_id: str) -> bool:
        with self._lock:
            row = self._achievements.get(str(achievement_id))
            return bool(row is not None and row.is_unlocked)

    def list_achievements(self) -> list[Achievement]:
        with self._lock:
            return [row.clone() for row in self._achievements.values()]

    def get_category_achievements(self, category: AchievementCategory | str) -> list[Achievement]:
        wanted = AchievementCategory(str(getattr(category, "value", category)).strip().lower())
        return [row for row in self.list_achievements() if row.category is wanted]

    def get_completed_achievements(self) -> list[Achievement]:
        return [row for row in self.list_achievements() if row.is_unlocked]

    def get_in_progress_achievements(self) -> list[Achievement]:
        return [row for row in self.list_achievements() if not row.is_unlocked and row.progress > 0]

    def update_progress(self, achievement_id: str, raw_metric) -> int:
        with self._lock:
            row = self._achievements.get(str(achievement_id))
            if row is None:
                logger.warning("Progress update for unknown achievement", extra={"achievement_id": achievement_id})
                return 0
            if row.is_unlocked:
                return 100

            progress = max(row.progress, normalize_progress(raw_metric, row.threshold))
            if progress == row.progress and progress < 100:
                return progress
            row.progress = progress
            if progress >= 100:
                self._mark_unlocked(row)
            self._commit()
        if progress >= 100:
            self._announce(row)
        return progress

    def unlock_achievement(self, achievement_id: str) -> bool:
        """Force-unlock a binary achievement. Repeat calls change nothing."""
        with self._lock:
            row = self._achievements.get(str(achievement_id))
            if row is None:
                logger.warning("Unlock requested for unknown achievement", extra={"achievement_id": achievement_id})
                return False
            if row.is_unlocked:
                return False
            self._mark_unlocked(row)
            self._commit()
        self._announce(row)
        return True

    def _mark_unlocked(self, row: Achievement) -> None:
        row.progress = 100
        row.is_unlocked = True
        row.unlocked_date = self.clock()
        self._newly_unlocked.append(row.id)
        self._last_unlocked_id = row.id
        self.show_notification = True

    def _announce(self, row: Achievement) -> None:
        logger.info("Achievement unlocked", extra={"achievement_id": row.id})
        if self.event_bus is not None:
            self.event_bus.publish(
                AchievementUnlocked(
                    achievement_id=row.id,
                    category=row.category.value,
                    unlocked_date=row.unlocked_date,
                )
            )

    def pop_newly_unlocked(self) -> list[Achievement]:
        with self._lock:
            ids, self._newly_unlocked = self._newly_unlocked, []
            return [self._achievements[achievement_id].clone() for achievement_id in ids]

    @property
    def last_unlocked(self) -> Achievement | None:
        with self._lock:
            if self._last_unlocked_id is None:
                return None
            return self._achievements[self._last_unlocked_id].clone()

    def dismiss_notification(self) -> None:
        self.show_notification = False

    def reset_achievements(self) -> None:
        with self._lock:
            self._achievements = {row.id: row for row in fresh_achievements(self.catalog)}
            self._newly_unlocked = []
            self._last_unlocked_id = None
            self.show_notification = False
            self._commit()
