from dataclasses import dataclass
from typing import Optional


@dataclass
class HealthTickEvaluated:
    phase: str
    reason: str
    health: float
    event_count: int


@dataclass
class HealthEventApplied:
    event_id: str
    severity: str
    cost: float
    health_change: int
    stress_change: int
    event_count: int


@dataclass
class CharacterDied:
    event_id: str
    cost: float
    event_count: int


@dataclass
class CharacterReset:
    reason: str


@dataclass
class AchievementUnlocked:
    achievement_id: str
    category: str
    unlocked_date: Optional[str]


@dataclass
class RewardClaimed:
    achievement_id: str
    reward_type: str
    value: float


@dataclass
class RewardLedgerWiped:
    entries_cleared: int
