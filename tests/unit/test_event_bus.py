import sys
from pathlib import Path
import unittest

sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "src"))

from lifesim.application.services.event_bus import EventBus
from lifesim.domain.events import AchievementUnlocked, RewardClaimed


class EventBusTests(unittest.TestCase):
    def test_publish_notifies_all_handlers_for_event_type(self) -> None:
        bus = EventBus()
        seen: list[str] = []

        bus.subscribe(RewardClaimed, lambda evt: seen.append("first"))
        bus.subscribe(RewardClaimed, lambda evt: seen.append("second"))

        delivered = bus.publish(RewardClaimed(achievement_id="wealth-1", reward_type="cash", value=1000))

        self.assertEqual(["first", "second"], seen)
        self.assertEqual(2, delivered)

    def test_publish_filters_handlers_by_event_class(self) -> None:
        bus = EventBus()
        seen: list[str] = []

        bus.subscribe(RewardClaimed, lambda evt: seen.append("claimed"))
        bus.subscribe(AchievementUnlocked, lambda evt: seen.append("unlocked"))

        bus.publish(AchievementUnlocked(achievement_id="wealth-1", category="wealth", unlocked_date=None))

        self.assertEqual(["unlocked"], seen)

    def test_lower_priority_runs_first(self) -> None:
        bus = EventBus()
        seen: list[str] = []

        bus.subscribe(RewardClaimed, lambda evt: seen.append("late"), priority=200)
        bus.subscribe(RewardClaimed, lambda evt: seen.append("early"), priority=10)

        bus.publish(RewardClaimed(achievement_id="x", reward_type="cash", value=1))

        self.assertEqual(["early", "late"], seen)

    def test_failing_handler_is_isolated(self) -> None:
        bus = EventBus()
        seen: list[str] = []

        def _broken(evt) -> None:
            raise ValueError("listener bug")

        bus.subscribe(RewardClaimed, _broken, priority=1)
        bus.subscribe(RewardClaimed, lambda evt: seen.append("after"))

        with self.assertLogs("lifesim.application.services.event_bus", level="ERROR"):
            delivered = bus.publish(RewardClaimed(achievement_id="x", reward_type="cash", value=1))

        self.assertEqual(["after"], seen)
        self.assertEqual(1, delivered)
        self.assertEqual(1, len(bus.last_publish_errors()))

    def test_unsubscribe(self) -> None:
        bus = EventBus()
        seen: list[str] = []
        handler = lambda evt: seen.append("hit")

        bus.subscribe(RewardClaimed, handler)
        self.assertTrue(bus.unsubscribe(RewardClaimed, handler))
        self.assertFalse(bus.unsubscribe(RewardClaimed, handler))

        bus.publish(RewardClaimed(achievement_id="x", reward_type="cash", value=1))
        self.assertEqual([], seen)


if __name__ == "__main__":
    unittest.main()
