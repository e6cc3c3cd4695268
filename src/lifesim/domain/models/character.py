import math
import threading
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from lifesim.domain.collaborators import CharacterStore
from lifesim.domain.models.achievement import SKILL_NAMES


DEFAULT_STARTING_WEALTH = 10000.0
DEFAULT_SKILL_LEVEL = 10
DEFAULT_ATTRIBUTES: Dict[str, float] = {
    "health": 100.0,
    "stress": 0.0,
    "happiness": 50.0,
    "prestige": 0.0,
}


def _finite(value, default: float = 0.0) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        return default
    if math.isnan(number) or math.isinf(number):
        return default
    return number


def _bounded(value: float, low: float = 0.0, high: float = 100.0) -> float:
    return max(low, min(high, value))


@dataclass(frozen=True)
class OwnedProperty:
    id: str
    name: str
    value: float


@dataclass(frozen=True)
class OwnedAsset:
    id: str
    purchase_price: float
    quantity: float = 1


@dataclass(frozen=True)
class LifestyleItem:
    id: str
    name: str
    purchase_price: float


@dataclass
class Character(CharacterStore):
    id: Optional[int]
    name: str
    wealth: float = DEFAULT_STARTING_WEALTH
    health: float = DEFAULT_ATTRIBUTES["health"]
    stress: float = DEFAULT_ATTRIBUTES["stress"]
    happiness: float = DEFAULT_ATTRIBUTES["happiness"]
    prestige: float = DEFAULT_ATTRIBUTES["prestige"]
    skills: Dict[str, float] = field(default_factory=lambda: {name: DEFAULT_SKILL_LEVEL for name in SKILL_NAMES})
    properties: List[OwnedProperty] = field(default_factory=list)
    assets: List[OwnedAsset] = field(default_factory=list)
    lifestyle_items: List[LifestyleItem] = field(default_factory=list)
    starting_wealth: float = DEFAULT_STARTING_WEALTH
    _lock: threading.RLock = field(default_factory=threading.RLock, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        self.wealth = _finite(self.wealth)
        self.health = _bounded(_finite(self.health, DEFAULT_ATTRIBUTES["health"]))
        self.stress = _bounded(_finite(self.stress))
        self.happiness = _bounded(_finite(self.happiness, DEFAULT_ATTRIBUTES["happiness"]))
        self.prestige = _bounded(_finite(self.prestige))

        normalized: Dict[str, float] = {name: DEFAULT_SKILL_LEVEL for name in SKILL_NAMES}
        if isinstance(self.skills, dict):
            for raw_name, raw_level in self.skills.items():
                name = str(raw_name or "").strip().lower()
                if name not in normalized:
                    continue
                normalized[name] = _bounded(_finite(raw_level, DEFAULT_SKILL_LEVEL))
        self.skills = normalized

    def add_wealth(self, delta: float) -> None:
        with self._lock:
            self.wealth = self.wealth + _finite(delta)

    def add_health(self, delta: float) -> None:
        with self._lock:
            self.health = _bounded(self.health + _finite(delta))

    def add_stress(self, delta: float) -> None:
        with self._lock:
            self.stress = _bounded(self.stress + _finite(delta))

    def add_happiness(self, delta: float) -> None:
        with self._lock:
            self.happiness = _bounded(self.happiness + _finite(delta))

    def add_prestige(self, delta: float) -> None:
        with self._lock:
            self.prestige = _bounded(self.prestige + _finite(delta))

    def improve_skill(self, name: str, delta: float) -> None:
        skill = str(name or "").strip().lower()
        if skill not in self.skills:
            raise ValueError(f"Unknown skill: {name}")
        with self._lock:
            self.skills[skill] = _bounded(self.skills[skill] + _finite(delta))

    def reset_character(self) -> None:
        with self._lock:
            self.wealth = self.starting_wealth
            self.health = DEFAULT_ATTRIBUTES["health"]
            self.stress = DEFAULT_ATTRIBUTES["stress"]
            self.happiness = DEFAULT_ATTRIBUTES["happiness"]
            self.prestige = DEFAULT_ATTRIBUTES["prestige"]
            self.skills = {name: DEFAULT_SKILL_LEVEL for name in SKILL_NAMES}
            self.properties = []
            self.assets = []
            self.lifestyle_items = []
