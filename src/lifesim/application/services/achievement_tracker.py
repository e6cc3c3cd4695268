from __future__ import annotations

import logging
from collections.abc import Sequence

from lifesim.application.services.achievement_service import AchievementService
from lifesim.domain.collaborators import AudioCues, CharacterStore


WEALTH_IDS = ("wealth-1", "wealth-2", "wealth-3", "wealth-4", "wealth-5")
PROPERTY_COUNT_IDS = ("property-1", "property-2")
TIME_IDS = ("general-2", "general-3")

COLLECTION_SIZE_FOR_VALUE = 10
MAGNATE_WEALTH = 10_000_000
MAGNATE_HAPPINESS = 90
MAGNATE_PRESTIGE = 75


logger = logging.getLogger(__name__)


def _read(item: object, name: str, default: float = 0.0) -> float:
    value = item.get(name, default) if isinstance(item, dict) else getattr(item, name, default)
    try:
        return float(value)
    except (TypeError, ValueError):
        return default


class AchievementTracker:
    """Feeds gameplay metrics into achievement progress.

    Each track_* method mirrors one family of achievements and returns the
    ids that unlocked during the call.
    """

    def __init__(self, achievements: AchievementService, audio: AudioCues | None = None) -> None:
        self.achievements = achievements
        self.audio = audio

    def _progress(self, achievement_id: str, metric: float, unlocked: list[str]) -> None:
        if self.achievements.is_unlocked(achievement_id):
            return
        if self.achievements.update_progress(achievement_id, metric) >= 100:
            unlocked.append(achievement_id)

    def _force(self, achievement_id: str, unlocked: list[str]) -> None:
        if self.achievements.unlock_achievement(achievement_id):
            unlocked.append(achievement_id)

    def _celebrate(self, unlocked: list[str]) -> list[str]:
        if self.audio is not None:
            for _ in unlocked:
                self.audio.play(AudioCues.SUCCESS)
        return unlocked

    def track_wealth(self, wealth: float) -> list[str]:
        unlocked: list[str] = []
        for achievement_id in WEALTH_IDS:
            self._progress(achievement_id, wealth, unlocked)
        return self._celebrate(unlocked)

    def track_properties(self, properties: Sequence[object]) -> list[str]:
        unlocked: list[str] = []
        for achievement_id in PROPERTY_COUNT_IDS:
            self._progress(achievement_id, len(properties), unlocked)
        combined = sum(_read(row, "value") for row in properties)
        qualifying = combined if len(properties) >= COLLECTION_SIZE_FOR_VALUE else 0
        self._progress("property-3", qualifying, unlocked)
        return self._celebrate(unlocked)

    def track_investments(self, assets: Sequence[object]) -> list[str]:
        unlocked: list[str] = []
        if assets:
            self._force("investment-1", unlocked)
        distinct = {str(row.get("id") if isinstance(row, dict) else getattr(row, "id", "")) for row in assets}
        self._progress("investment-2", len(distinct), unlocked)
        invested = sum(_read(row, "purchase_price") * _read(row, "quantity", 1.0) for row in assets)
        self._progress("investment-3", invested, unlocked)
        return self._celebrate(unlocked)

    def track_lifestyle(self, items: Sequence[object]) -> list[str]:
        unlocked: list[str] = []
        if items:
            self._force("lifestyle-1", unlocked)
        self._progress("lifestyle-2", len(items), unlocked)
        combined = sum(_read(row, "purchase_price") for row in items)
        qualifying = combined if len(items) >= COLLECTION_SIZE_FOR_VALUE else 0
        self._progress("lifestyle-3", qualifying, unlocked)
        return self._celebrate(unlocked)

    def track_days_played(self, days_played: int) -> list[str]:
        unlocked: list[str] = []
        days = max(0, int(days_played or 0))
        for achievement_id in TIME_IDS:
            self._progress(achievement_id, days, unlocked)
        # Only counts once the player has actually advanced time.
        if days >= 1:
            self._force("general-1", unlocked)
        return self._celebrate(unlocked)

    def track_magnate(self, wealth: float, happiness: float, prestige: float) -> list[str]:
        unlocked: list[str] = []
        if wealth >= MAGNATE_WEALTH and happiness >= MAGNATE_HAPPINESS and prestige >= MAGNATE_PRESTIGE:
            overall = 100
        else:
            overall = int(
                (
                    min(max(wealth, 0), MAGNATE_WEALTH) / MAGNATE_WEALTH * 100
                    + min(max(happiness, 0), MAGNATE_HAPPINESS) / MAGNATE_HAPPINESS * 100
                    + min(max(prestige, 0), MAGNATE_PRESTIGE) / MAGNATE_PRESTIGE * 100
                )
                / 3
            )
        self._progress("general-4", overall, unlocked)
        return self._celebrate(unlocked)

    def check_all(self, character: CharacterStore, days_played: int = 0) -> list[str]:
        unlocked: list[str] = []
        unlocked += self.track_wealth(character.wealth)
        unlocked += self.track_properties(list(character.properties))
        unlocked += self.track_investments(list(character.assets))
        unlocked += self.track_lifestyle(list(character.lifestyle_items))
        unlocked += self.track_days_played(days_played)
        unlocked += self.track_magnate(character.wealth, character.happiness, character.prestige)
        if unlocked:
            logger.info("Achievements unlocked by sweep", extra={"achievement_ids": list(unlocked)})
        return unlocked
