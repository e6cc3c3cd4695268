import json
import sys
from pathlib import Path
import unittest

sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "src"))

from lifesim.application.services.achievement_service import AchievementService
from lifesim.application.services.reward_service import RewardClaimLedger
from lifesim.domain.errors import PersistenceError
from lifesim.domain.models.achievement import RewardType, StatTarget
from lifesim.domain.repositories import ACHIEVEMENTS_STATE_KEY, CLAIMED_REWARDS_KEY, KeyValueStore
from lifesim.infrastructure.inmemory.inmemory_kv_store import InMemoryKeyValueStore
from lifesim.infrastructure.json_repositories import JsonAchievementStateRepository, JsonRewardLedgerRepository


class _UnreadableStore(KeyValueStore):
    def get(self, key):
        raise PersistenceError(key, "device error")

    def set(self, key, value) -> None:
        raise PersistenceError(key, "device error")

    def delete(self, key) -> None:
        raise PersistenceError(key, "device error")


class JsonAchievementStateRepositoryTests(unittest.TestCase):
    def test_service_state_survives_restart(self) -> None:
        store = InMemoryKeyValueStore()
        first = AchievementService(JsonAchievementStateRepository(store))
        first.update_progress("wealth-1", 10_000)
        first.update_progress("wealth-2", 30_000)

        second = AchievementService(JsonAchievementStateRepository(store))

        self.assertTrue(second.is_unlocked("wealth-1"))
        self.assertEqual(30, second.get_achievement("wealth-2").progress)
        self.assertEqual("wealth-1", second.last_unlocked.id)

    def test_envelope_shape(self) -> None:
        store = InMemoryKeyValueStore()
        AchievementService(JsonAchievementStateRepository(store)).unlock_achievement("lifestyle-2")

        payload = json.loads(store.get(ACHIEVEMENTS_STATE_KEY))

        self.assertEqual("lifestyle-2", payload["last_unlocked_id"])
        row = next(item for item in payload["achievements"] if item["id"] == "lifestyle-2")
        self.assertTrue(row["is_unlocked"])
        self.assertEqual(100, row["progress"])
        self.assertEqual("bonus", row["reward"]["type"])
        self.assertEqual("happiness", row["reward"]["stat_target"])

    def test_rows_round_trip_reward_fields(self) -> None:
        store = InMemoryKeyValueStore()
        AchievementService(JsonAchievementStateRepository(store)).unlock_achievement("strategy-4")

        rows = JsonAchievementStateRepository(store).load()
        strategy = next(row for row in rows if row.id == "strategy-4")
        lifestyle = next(row for row in rows if row.id == "lifestyle-3")

        self.assertIs(RewardType.SKILL, strategy.reward.type)
        self.assertEqual("all", strategy.reward.skill_target)
        self.assertIs(StatTarget.PRESTIGE, lifestyle.reward.stat_target)

    def test_corrupt_blob_starts_fresh(self) -> None:
        store = InMemoryKeyValueStore({ACHIEVEMENTS_STATE_KEY: "{broken"})

        with self.assertLogs("lifesim.infrastructure.json_repositories", level="WARNING"):
            service = AchievementService(JsonAchievementStateRepository(store))

        self.assertEqual([], service.get_completed_achievements())

    def test_bare_list_from_older_saves_is_accepted(self) -> None:
        store = InMemoryKeyValueStore()
        AchievementService(JsonAchievementStateRepository(store)).update_progress("wealth-1", 5_000)
        envelope = json.loads(store.get(ACHIEVEMENTS_STATE_KEY))
        store.set(ACHIEVEMENTS_STATE_KEY, json.dumps(envelope["achievements"]))

        service = AchievementService(JsonAchievementStateRepository(store))

        self.assertEqual(50, service.get_achievement("wealth-1").progress)

    def test_unreadable_row_is_skipped(self) -> None:
        store = InMemoryKeyValueStore(
            {ACHIEVEMENTS_STATE_KEY: json.dumps({"achievements": [{"id": "wealth-1"}], "last_unlocked_id": None})}
        )

        with self.assertLogs("lifesim.infrastructure.json_repositories", level="WARNING"):
            rows = JsonAchievementStateRepository(store).load()

        self.assertEqual([], rows)

    def test_backend_read_failure_is_logged(self) -> None:
        with self.assertLogs("lifesim.infrastructure.json_repositories", level="ERROR"):
            self.assertIsNone(JsonAchievementStateRepository(_UnreadableStore()).load())


class JsonRewardLedgerRepositoryTests(unittest.TestCase):
    def test_ledger_survives_restart(self) -> None:
        store = InMemoryKeyValueStore()
        RewardClaimLedger(JsonRewardLedgerRepository(store)).mark_claimed("wealth-1")

        ledger = RewardClaimLedger(JsonRewardLedgerRepository(store))

        self.assertTrue(ledger.is_claimed("wealth-1"))
        self.assertEqual({"wealth-1": True}, json.loads(store.get(CLAIMED_REWARDS_KEY)))

    def test_corrupt_ledger_is_empty(self) -> None:
        store = InMemoryKeyValueStore({CLAIMED_REWARDS_KEY: "[1, 2"})

        with self.assertLogs("lifesim.infrastructure.json_repositories", level="WARNING"):
            self.assertEqual({}, JsonRewardLedgerRepository(store).load())

    def test_non_true_values_are_not_claims(self) -> None:
        store = InMemoryKeyValueStore({CLAIMED_REWARDS_KEY: json.dumps({"a": True, "b": "yes", "c": 1})})

        self.assertEqual({"a": True, "b": False, "c": False}, JsonRewardLedgerRepository(store).load())

    def test_unreadable_backend_yields_empty_ledger(self) -> None:
        with self.assertLogs("lifesim.infrastructure.json_repositories", level="ERROR"):
            ledger = RewardClaimLedger(JsonRewardLedgerRepository(_UnreadableStore()))

        self.assertEqual([], ledger.claimed_ids())


if __name__ == "__main__":
    unittest.main()
