import sys
from pathlib import Path
import unittest

sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "src"))

from lifesim.application.services.cost_calculator import apply_debt_policy, calculate_event_cost
from lifesim.domain.models.health_event import HealthEventDefinition, Severity


def _event(base_cost: float, wealth_multiplier: float | None = None) -> HealthEventDefinition:
    return HealthEventDefinition(
        id="cost-sample",
        title="Probe",
        description="",
        severity=Severity.MODERATE,
        base_cost=base_cost,
        health_impact=-10,
        wealth_multiplier=wealth_multiplier,
    )


class CalculateEventCostTests(unittest.TestCase):
    def test_low_wealth_scales_cost_down(self) -> None:
        self.assertEqual(250, calculate_event_cost(_event(1000), 500))

    def test_wealthy_character_pays_base_cost(self) -> None:
        self.assertEqual(1000, calculate_event_cost(_event(1000), 1_000_000))

    def test_wealth_multiplier_addition_is_capped(self) -> None:
        cost = calculate_event_cost(_event(1000, wealth_multiplier=0.5), 1_000_000)

        self.assertEqual(4000, cost)

    def test_wealth_multiplier_adds_proportional_share(self) -> None:
        cost = calculate_event_cost(_event(1000, wealth_multiplier=0.01), 100_000)

        self.assertEqual(2000, cost)

    def test_never_exceeds_half_of_positive_wealth_when_above_minimum(self) -> None:
        for wealth in (300, 2_000, 5_000, 20_000):
            cost = calculate_event_cost(_event(1000), wealth)
            self.assertLessEqual(cost, max(wealth * 0.5, 100))
            self.assertGreaterEqual(cost, 100)

    def test_zero_or_invalid_wealth_charges_minimum_share(self) -> None:
        self.assertEqual(100, calculate_event_cost(_event(1000), 0))
        self.assertEqual(100, calculate_event_cost(_event(1000), -5000))
        self.assertEqual(100, calculate_event_cost(_event(1000), float("nan")))
        self.assertEqual(100, calculate_event_cost(_event(1000), None))


class DebtPolicyTests(unittest.TestCase):
    def test_solvent_character_pays_full_cost(self) -> None:
        self.assertEqual(250, apply_debt_policy(250, 500))

    def test_debt_caps_cost_at_fifty(self) -> None:
        self.assertEqual(50, apply_debt_policy(1000, -10))
        self.assertEqual(5, apply_debt_policy(50, -10))

    def test_cost_never_pushes_wealth_below_floor(self) -> None:
        self.assertEqual(20, apply_debt_policy(1000, -980))
        self.assertEqual(0, apply_debt_policy(1000, -1000))
        self.assertEqual(0, apply_debt_policy(1000, -2500))

    def test_near_zero_wealth_stops_at_floor(self) -> None:
        self.assertEqual(1010, apply_debt_policy(2000, 10))


if __name__ == "__main__":
    unittest.main()
