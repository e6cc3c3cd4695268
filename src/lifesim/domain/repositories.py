from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from lifesim.domain.models.achievement import Achievement


ACHIEVEMENTS_STATE_KEY = "achievements-state"
CLAIMED_REWARDS_KEY = "claimed-rewards"


class KeyValueStore(ABC):
    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        raise NotImplementedError

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        raise NotImplementedError

    @abstractmethod
    def delete(self, key: str) -> None:
        raise NotImplementedError


class AchievementStateRepository(ABC):
    @abstractmethod
    def load(self) -> Optional[List[Achievement]]:
        """Return the stored snapshot, or None when nothing usable is stored."""
        raise NotImplementedError

    @abstractmethod
    def save(self, achievements: List[Achievement], *, last_unlocked_id: Optional[str] = None) -> None:
        raise NotImplementedError

    def load_last_unlocked_id(self) -> Optional[str]:
        return None


class RewardLedgerRepository(ABC):
    @abstractmethod
    def load(self) -> Dict[str, bool]:
        raise NotImplementedError

    @abstractmethod
    def save(self, ledger: Dict[str, bool]) -> None:
        raise NotImplementedError
