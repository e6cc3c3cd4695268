from __future__ import annotations

import logging
import threading
from collections import defaultdict

from lifesim.application.dtos import AchievementSummaryView
from lifesim.application.services.achievement_service import AchievementService
from lifesim.application.services.event_bus import EventBus
from lifesim.domain.collaborators import AssetTracker, CharacterStore, GameStore
from lifesim.domain.errors import PersistenceError
from lifesim.domain.events import RewardClaimed, RewardLedgerWiped
from lifesim.domain.models.achievement import ALL_SKILLS, SKILL_NAMES, AchievementReward, RewardType, StatTarget
from lifesim.domain.repositories import RewardLedgerRepository


logger = logging.getLogger(__name__)


class RewardClaimLedger:
    """Durable record of which achievement rewards were already granted.

    Entries only move from unclaimed to claimed; ``wipe`` is the single way
    back and is reserved for starting a new game.
    """

    def __init__(self, repository: RewardLedgerRepository | None = None) -> None:
        self.repository = repository
        self._lock = threading.Lock()
        self._claimed: dict[str, bool] = {}
        if repository is not None:
            self._claimed = {key: True for key, value in repository.load().items() if value is True}

    def is_claimed(self, achievement_id: str) -> bool:
        with self._lock:
            return self._claimed.get(str(achievement_id), False)

    def mark_claimed(self, achievement_id: str) -> bool:
        with self._lock:
            key = str(achievement_id)
            if self._claimed.get(key, False):
                return False
            self._claimed[key] = True
            snapshot = dict(self._claimed)
        self._persist(snapshot)
        return True

    def claimed_ids(self) -> list[str]:
        with self._lock:
            return sorted(key for key, value in self._claimed.items() if value)

    def wipe(self) -> int:
        with self._lock:
            cleared = len(self._claimed)
            self._claimed = {}
        self._persist({})
        return cleared

    def _persist(self, snapshot: dict[str, bool]) -> None:
        if self.repository is None:
            return
        try:
            self.repository.save(snapshot)
        except PersistenceError:
            logger.exception("Reward ledger could not be persisted", extra={"entries": len(snapshot)})


class RewardApplier:
    def __init__(
        self,
        character: CharacterStore,
        *,
        game: GameStore | None = None,
        asset_tracker: AssetTracker | None = None,
    ) -> None:
        self.character = character
        self.game = game
        self.asset_tracker = asset_tracker

    def apply(self, reward: AchievementReward) -> None:
        handler = {
            RewardType.CASH: self._apply_cash,
            RewardType.MULTIPLIER: self._apply_multiplier,
            RewardType.UNLOCK: self._apply_unlock,
            RewardType.BONUS: self._apply_bonus,
            RewardType.SKILL: self._apply_skill,
        }[reward.type]
        handler(reward)

    def _apply_cash(self, reward: AchievementReward) -> None:
        self.character.add_wealth(float(reward.value))
        if self.asset_tracker is not None:
            self.asset_tracker.sync_derived_caches()

    def _apply_multiplier(self, reward: AchievementReward) -> None:
        if self.game is None:
            logger.warning("No game store to receive income multiplier", extra={"value": reward.value})
            return
        self.game.apply_income_multiplier(float(reward.value))

    def _apply_unlock(self, reward: AchievementReward) -> None:
        # Gated features read the achievement's unlock flag directly.
        return None

    def _apply_bonus(self, reward: AchievementReward) -> None:
        if reward.stat_target is StatTarget.HAPPINESS:
            self.character.add_happiness(float(reward.value))
        elif reward.stat_target is StatTarget.PRESTIGE:
            self.character.add_prestige(float(reward.value))
        else:
            logger.warning("Bonus reward has no stat target", extra={"description": reward.description})

    def _apply_skill(self, reward: AchievementReward) -> None:
        target = reward.skill_target or ALL_SKILLS
        names = SKILL_NAMES if target == ALL_SKILLS else (target,)
        for name in names:
            self.character.improve_skill(name, float(reward.value))


class RewardClaimService:
    def __init__(
        self,
        achievements: AchievementService,
        ledger: RewardClaimLedger,
        applier: RewardApplier,
        *,
        event_bus: EventBus | None = None,
    ) -> None:
        self.achievements = achievements
        self.ledger = ledger
        self.applier = applier
        self.event_bus = event_bus
        self._guard = threading.Lock()
        self._claim_locks: defaultdict[str, threading.Lock] = defaultdict(threading.Lock)

    def _lock_for(self, achievement_id: str) -> threading.Lock:
        with self._guard:
            return self._claim_locks[achievement_id]

    def claim_reward(self, achievement_id: str) -> AchievementReward | None:
        """Grant an unlocked achievement's reward once.

        Unknown, still-locked and already-claimed ids all return None. The
        ledger entry is written only after the reward has been applied, so a
        crash in between leaves the reward claimable again on restart.
        """
        key = str(achievement_id)
        if self.achievements.get_achievement(key) is None:
            logger.warning("Claim for unknown achievement", extra={"achievement_id": key})
            return None

        with self._lock_for(key):
            achievement = self.achievements.get_achievement(key)
            if achievement is None:
                return None
            if not achievement.is_unlocked:
                logger.info("Claim for locked achievement", extra={"achievement_id": key})
                return None
            if self.ledger.is_claimed(key):
                logger.info("Duplicate reward claim ignored", extra={"achievement_id": key})
                return None

            reward = achievement.reward
            self.applier.apply(reward)
            self.ledger.mark_claimed(key)

        if self.event_bus is not None:
            self.event_bus.publish(RewardClaimed(achievement_id=key, reward_type=reward.type.value, value=reward.value))
        return reward

    def is_claimed(self, achievement_id: str) -> bool:
        return self.ledger.is_claimed(achievement_id)

    def start_new_game(self) -> None:
        """Wipe the ledger and relock every achievement."""
        cleared = self.ledger.wipe()
        self.achievements.reset_achievements()
        if self.event_bus is not None:
            self.event_bus.publish(RewardLedgerWiped(entries_cleared=cleared))

    def summary(self) -> AchievementSummaryView:
        rows = self.achievements.list_achievements()
        return AchievementSummaryView(
            total=len(rows),
            unlocked=sum(1 for row in rows if row.is_unlocked),
            in_progress=sum(1 for row in rows if not row.is_unlocked and row.progress > 0),
            claimed=len(self.ledger.claimed_ids()),
        )
