import sys
import threading
from pathlib import Path
import unittest

sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "src"))

from lifesim.domain.models.achievement import Achievement, AchievementCategory, AchievementReward, RewardType
from lifesim.domain.models.active_event import DAY_SECONDS, expiry_for
from lifesim.domain.models.character import Character
from lifesim.domain.services.achievement_catalog import ACHIEVEMENT_CATALOG, catalog_ids, fresh_achievements


def _reward() -> AchievementReward:
    return AchievementReward(type=RewardType.CASH, value=10, description="$10")


class CharacterTests(unittest.TestCase):
    def test_stats_are_clamped(self) -> None:
        character = Character(id=1, name="Ada", health=140, happiness=-5)

        character.add_health(-500)
        character.add_prestige(250)

        self.assertEqual(0, character.health)
        self.assertEqual(100, character.prestige)
        self.assertEqual(0, character.happiness)

    def test_wealth_may_go_negative(self) -> None:
        character = Character(id=1, name="Ada", wealth=100)

        character.add_wealth(-600)

        self.assertEqual(-500, character.wealth)

    def test_non_finite_deltas_are_ignored(self) -> None:
        character = Character(id=1, name="Ada", wealth=100)

        character.add_wealth(float("nan"))
        character.add_stress(float("inf"))

        self.assertEqual(100, character.wealth)
        self.assertEqual(0, character.stress)

    def test_concurrent_mutations_do_not_lose_updates(self) -> None:
        character = Character(id=1, name="Ada", wealth=0)
        start = threading.Barrier(8)
        interval = sys.getswitchinterval()

        def _deposit() -> None:
            start.wait()
            for _ in range(2_000):
                character.add_wealth(1)
                character.add_wealth(-0.5)

        sys.setswitchinterval(1e-6)
        try:
            workers = [threading.Thread(target=_deposit) for _ in range(8)]
            for worker in workers:
                worker.start()
            for worker in workers:
                worker.join()
        finally:
            sys.setswitchinterval(interval)

        self.assertEqual(8_000, character.wealth)

    def test_lock_stays_out_of_equality_and_repr(self) -> None:
        self.assertEqual(Character(id=1, name="Ada"), Character(id=1, name="Ada"))
        self.assertNotIn("_lock", repr(Character(id=1, name="Ada")))

    def test_improve_unknown_skill_raises(self) -> None:
        with self.assertRaises(ValueError):
            Character(id=1, name="Ada").improve_skill("juggling", 5)

    def test_reset_restores_starting_state(self) -> None:
        character = Character(id=1, name="Ada", wealth=5, health=3, starting_wealth=2500)
        character.improve_skill("technical", 40)

        character.reset_character()

        self.assertEqual(2500, character.wealth)
        self.assertEqual(100, character.health)
        self.assertEqual(10, character.skills["technical"])


class AchievementModelTests(unittest.TestCase):
    def test_threshold_must_be_positive(self) -> None:
        with self.assertRaises(ValueError):
            Achievement(
                id="bad",
                title="Bad",
                description="",
                category=AchievementCategory.GENERAL,
                threshold=0,
                reward=_reward(),
            )

    def test_unlocked_flag_and_full_progress_stay_in_step(self) -> None:
        full = Achievement(
            id="a", title="A", description="", category="general", threshold=1, reward=_reward(), progress=100
        )
        locked = Achievement(
            id="b",
            title="B",
            description="",
            category="general",
            threshold=1,
            reward=_reward(),
            progress=20,
            unlocked_date="2026-01-01",
        )

        self.assertTrue(full.is_unlocked)
        self.assertIsNone(locked.unlocked_date)

    def test_unknown_category_rejected(self) -> None:
        with self.assertRaises(ValueError):
            Achievement(id="c", title="C", description="", category="cosmic", threshold=1, reward=_reward())


class AchievementCatalogTests(unittest.TestCase):
    def test_ids_are_unique(self) -> None:
        ids = catalog_ids()

        self.assertEqual(48, len(ids))
        self.assertEqual(len(ids), len(set(ids)))

    def test_fresh_copies_do_not_alias_templates(self) -> None:
        rows = fresh_achievements()
        rows[0].progress = 50

        self.assertEqual(0, ACHIEVEMENT_CATALOG[0].progress)
        self.assertTrue(all(not row.is_unlocked for row in fresh_achievements()))

    def test_bonus_rewards_carry_stat_target(self) -> None:
        bonus = [row for row in ACHIEVEMENT_CATALOG if row.reward.type is RewardType.BONUS]

        self.assertTrue(bonus)
        self.assertTrue(all(row.reward.stat_target is not None for row in bonus))


class ActiveEventTests(unittest.TestCase):
    def test_default_recovery_window_is_three_days(self) -> None:
        self.assertEqual(100 + 3 * DAY_SECONDS, expiry_for(100, None))
        self.assertEqual(100 + 7 * DAY_SECONDS, expiry_for(100, 7))


if __name__ == "__main__":
    unittest.main()
