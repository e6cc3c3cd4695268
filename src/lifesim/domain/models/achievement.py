from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum


SKILL_NAMES: tuple[str, ...] = (
    "intelligence",
    "creativity",
    "charisma",
    "technical",
    "leadership",
    "physical",
)
ALL_SKILLS = "all"


class AchievementCategory(str, Enum):
    WEALTH = "wealth"
    PROPERTY = "property"
    INVESTMENT = "investment"
    LIFESTYLE = "lifestyle"
    GENERAL = "general"
    CHALLENGE = "challenge"
    STRATEGY = "strategy"


class RewardType(str, Enum):
    CASH = "cash"
    MULTIPLIER = "multiplier"
    UNLOCK = "unlock"
    BONUS = "bonus"
    SKILL = "skill"


class StatTarget(str, Enum):
    HAPPINESS = "happiness"
    PRESTIGE = "prestige"


def _stat_target_from_description(description: str) -> StatTarget | None:
    # Older save data only carries the human-readable text.
    text = str(description or "")
    if "Happiness" in text:
        return StatTarget.HAPPINESS
    if "Prestige" in text:
        return StatTarget.PRESTIGE
    return None


@dataclass(frozen=True)
class AchievementReward:
    type: RewardType
    value: float
    description: str
    skill_target: str | None = None
    stat_target: StatTarget | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "type", RewardType(str(getattr(self.type, "value", self.type)).strip().lower()))
        if self.stat_target is not None:
            object.__setattr__(self, "stat_target", StatTarget(str(getattr(self.stat_target, "value", self.stat_target))))
        elif self.type is RewardType.BONUS:
            object.__setattr__(self, "stat_target", _stat_target_from_description(self.description))
        if self.skill_target is not None:
            target = str(self.skill_target).strip().lower()
            if target != ALL_SKILLS and target not in SKILL_NAMES:
                raise ValueError(f"Unknown skill target: {self.skill_target}")
            object.__setattr__(self, "skill_target", target)


@dataclass
class Achievement:
    id: str
    title: str
    description: str
    category: AchievementCategory
    threshold: float
    reward: AchievementReward
    is_unlocked: bool = False
    progress: int = 0
    unlocked_date: str | None = None

    def __post_init__(self) -> None:
        self.category = AchievementCategory(str(getattr(self.category, "value", self.category)).strip().lower())
        if not float(self.threshold) > 0:
            raise ValueError(f"Achievement {self.id} must have a positive threshold")
        try:
            progress = int(self.progress or 0)
        except (TypeError, ValueError):
            progress = 0
        self.progress = max(0, min(100, progress))
        if self.is_unlocked or self.progress >= 100:
            self.is_unlocked = True
            self.progress = 100
        else:
            self.unlocked_date = None

    def clone(self) -> "Achievement":
        return replace(self)

    def fresh_copy(self) -> "Achievement":
        return replace(self, is_unlocked=False, progress=0, unlocked_date=None)
