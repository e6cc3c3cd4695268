from __future__ import annotations

import json
import logging
from typing import Any, Dict, List, Optional

from lifesim.domain.errors import PersistenceError
from lifesim.domain.models.achievement import Achievement, AchievementReward
from lifesim.domain.repositories import (
    ACHIEVEMENTS_STATE_KEY,
    CLAIMED_REWARDS_KEY,
    AchievementStateRepository,
    KeyValueStore,
    RewardLedgerRepository,
)


logger = logging.getLogger(__name__)


def reward_to_row(reward: AchievementReward) -> Dict[str, Any]:
    return {
        "type": reward.type.value,
        "value": reward.value,
        "description": reward.description,
        "skill_target": reward.skill_target,
        "stat_target": reward.stat_target.value if reward.stat_target is not None else None,
    }


def reward_from_row(row: Dict[str, Any]) -> AchievementReward:
    return AchievementReward(
        type=row["type"],
        value=float(row["value"]),
        description=str(row.get("description", "")),
        skill_target=row.get("skill_target"),
        stat_target=row.get("stat_target"),
    )


def achievement_to_row(achievement: Achievement) -> Dict[str, Any]:
    return {
        "id": achievement.id,
        "title": achievement.title,
        "description": achievement.description,
        "category": achievement.category.value,
        "threshold": achievement.threshold,
        "reward": reward_to_row(achievement.reward),
        "is_unlocked": achievement.is_unlocked,
        "progress": achievement.progress,
        "unlocked_date": achievement.unlocked_date,
    }


def achievement_from_row(row: Dict[str, Any]) -> Achievement:
    return Achievement(
        id=str(row["id"]),
        title=str(row.get("title", "")),
        description=str(row.get("description", "")),
        category=row["category"],
        threshold=float(row["threshold"]),
        reward=reward_from_row(row["reward"]),
        is_unlocked=bool(row.get("is_unlocked", False)),
        progress=row.get("progress", 0),
        unlocked_date=row.get("unlocked_date"),
    )


class JsonAchievementStateRepository(AchievementStateRepository):
    """Achievement snapshot stored as one JSON blob.

    Accepts both the ``{"achievements": [...], "last_unlocked_id": ...}``
    envelope and a bare list of rows written by older saves.
    """

    def __init__(self, store: KeyValueStore, key: str = ACHIEVEMENTS_STATE_KEY) -> None:
        self.store = store
        self.key = key

    def _read_envelope(self) -> Optional[Dict[str, Any]]:
        try:
            raw = self.store.get(self.key)
        except PersistenceError:
            logger.exception("Achievement state could not be read", extra={"key": self.key})
            return None
        if raw is None:
            return None
        try:
            payload = json.loads(raw)
        except ValueError:
            logger.warning("Achievement state is not valid JSON; starting fresh", extra={"key": self.key})
            return None
        if isinstance(payload, list):
            return {"achievements": payload, "last_unlocked_id": None}
        if isinstance(payload, dict) and isinstance(payload.get("achievements"), list):
            return payload
        logger.warning("Achievement state has an unexpected shape; starting fresh", extra={"key": self.key})
        return None

    def load(self) -> Optional[List[Achievement]]:
        envelope = self._read_envelope()
        if envelope is None:
            return None
        rows: List[Achievement] = []
        for raw_row in envelope["achievements"]:
            try:
                rows.append(achievement_from_row(raw_row))
            except (KeyError, TypeError, ValueError):
                logger.warning("Skipping unreadable achievement row", extra={"row": raw_row})
        return rows

    def load_last_unlocked_id(self) -> Optional[str]:
        envelope = self._read_envelope()
        if envelope is None:
            return None
        value = envelope.get("last_unlocked_id")
        return str(value) if value else None

    def save(self, achievements: List[Achievement], *, last_unlocked_id: Optional[str] = None) -> None:
        envelope = {
            "achievements": [achievement_to_row(row) for row in achievements],
            "last_unlocked_id": last_unlocked_id,
        }
        self.store.set(self.key, json.dumps(envelope, ensure_ascii=False))


class JsonRewardLedgerRepository(RewardLedgerRepository):
    def __init__(self, store: KeyValueStore, key: str = CLAIMED_REWARDS_KEY) -> None:
        self.store = store
        self.key = key

    def load(self) -> Dict[str, bool]:
        try:
            raw = self.store.get(self.key)
        except PersistenceError:
            logger.exception("Reward ledger could not be read", extra={"key": self.key})
            return {}
        if raw is None:
            return {}
        try:
            payload = json.loads(raw)
        except ValueError:
            logger.warning("Reward ledger is not valid JSON; treating as empty", extra={"key": self.key})
            return {}
        if not isinstance(payload, dict):
            logger.warning("Reward ledger has an unexpected shape; treating as empty", extra={"key": self.key})
            return {}
        return {str(key): value is True for key, value in payload.items()}

    def save(self, ledger: Dict[str, bool]) -> None:
        payload = {str(key): True for key, value in ledger.items() if value}
        self.store.set(self.key, json.dumps(payload, ensure_ascii=False, sort_keys=True))
