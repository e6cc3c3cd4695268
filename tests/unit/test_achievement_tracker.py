import sys
from pathlib import Path
import unittest

sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "src"))

from lifesim.application.services.achievement_service import AchievementService
from lifesim.application.services.achievement_tracker import AchievementTracker
from lifesim.domain.models.character import Character, LifestyleItem, OwnedAsset, OwnedProperty
from lifesim.infrastructure.inmemory.inmemory_collaborators import RecordingAudio


class AchievementTrackerTests(unittest.TestCase):
    def setUp(self) -> None:
        self.achievements = AchievementService()
        self.audio = RecordingAudio()
        self.tracker = AchievementTracker(self.achievements, audio=self.audio)

    def test_wealth_tracks_every_tier(self) -> None:
        unlocked = self.tracker.track_wealth(150_000)

        self.assertEqual(["wealth-1", "wealth-2"], unlocked)
        self.assertEqual(15, self.achievements.get_achievement("wealth-3").progress)
        self.assertEqual(["success", "success"], self.audio.played)

    def test_repeat_sweep_does_not_replay_cues(self) -> None:
        self.tracker.track_wealth(10_000)
        self.tracker.track_wealth(10_000)

        self.assertEqual(["success"], self.audio.played)

    def test_property_value_counts_only_for_large_portfolios(self) -> None:
        few = [OwnedProperty(id=f"p{i}", name="Flat", value=2_000_000) for i in range(3)]
        self.tracker.track_properties(few)

        self.assertTrue(self.achievements.is_unlocked("property-1"))
        self.assertEqual(60, self.achievements.get_achievement("property-2").progress)
        self.assertEqual(0, self.achievements.get_achievement("property-3").progress)

        many = [OwnedProperty(id=f"p{i}", name="Flat", value=600_000) for i in range(10)]
        unlocked = self.tracker.track_properties(many)

        self.assertIn("property-2", unlocked)
        self.assertIn("property-3", unlocked)

    def test_investments_use_distinct_ids_and_invested_value(self) -> None:
        assets = [
            OwnedAsset(id="acme", purchase_price=100_000, quantity=3),
            OwnedAsset(id="acme", purchase_price=50_000, quantity=2),
            {"id": "bond", "purchase_price": 100_000, "quantity": 1},
        ]

        unlocked = self.tracker.track_investments(assets)

        self.assertEqual(["investment-1"], unlocked)
        self.assertEqual(40, self.achievements.get_achievement("investment-2").progress)
        self.assertEqual(50, self.achievements.get_achievement("investment-3").progress)

    def test_lifestyle_tracking(self) -> None:
        items = [LifestyleItem(id=f"l{i}", name="Watch", purchase_price=1_000) for i in range(5)]

        unlocked = self.tracker.track_lifestyle(items)

        self.assertEqual(["lifestyle-1", "lifestyle-2"], unlocked)
        self.assertEqual(0, self.achievements.get_achievement("lifestyle-3").progress)

    def test_days_played_unlocks_getting_started_once_time_moves(self) -> None:
        self.assertEqual([], self.tracker.track_days_played(0))

        unlocked = self.tracker.track_days_played(30)

        self.assertEqual(["general-2", "general-1"], unlocked)

    def test_magnate_blends_three_ratings(self) -> None:
        self.tracker.track_magnate(5_000_000, 45, 0)
        self.assertEqual(33, self.achievements.get_achievement("general-4").progress)

        unlocked = self.tracker.track_magnate(10_000_000, 90, 75)
        self.assertEqual(["general-4"], unlocked)

    def test_check_all_reads_character(self) -> None:
        character = Character(id=1, name="Ada", wealth=12_000)
        character.properties.append(OwnedProperty(id="home", name="Home", value=250_000))

        unlocked = self.tracker.check_all(character, days_played=1)

        self.assertIn("wealth-1", unlocked)
        self.assertIn("property-1", unlocked)
        self.assertIn("general-1", unlocked)
        self.assertNotIn("investment-1", unlocked)


if __name__ == "__main__":
    unittest.main()
