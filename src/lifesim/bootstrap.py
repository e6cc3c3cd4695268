import logging
import random
import socket
from dataclasses import dataclass
from typing import Callable, Optional
from urllib.parse import urlparse

from dotenv import load_dotenv

from lifesim.application.services.achievement_service import AchievementService
from lifesim.application.services.achievement_tracker import AchievementTracker
from lifesim.application.services.event_bus import EventBus
from lifesim.application.services.health_monitor import HealthMonitor
from lifesim.application.services.reward_service import RewardApplier, RewardClaimLedger, RewardClaimService
from lifesim.config import EngineSettings, load_settings
from lifesim.domain.collaborators import AudioCues, CharacterStore, GameStore, HealthEventLog, Notifier
from lifesim.domain.models.character import Character
from lifesim.domain.repositories import KeyValueStore
from lifesim.infrastructure.file_kv_store import FileKeyValueStore
from lifesim.infrastructure.inmemory.inmemory_collaborators import (
    InMemoryAssetTracker,
    InMemoryGame,
    InMemoryHealthEventLog,
)
from lifesim.infrastructure.inmemory.inmemory_kv_store import InMemoryKeyValueStore
from lifesim.infrastructure.json_repositories import JsonAchievementStateRepository, JsonRewardLedgerRepository


logger = logging.getLogger(__name__)


@dataclass
class EngineServices:
    settings: EngineSettings
    store: KeyValueStore
    event_bus: EventBus
    character: CharacterStore
    game: GameStore
    asset_tracker: InMemoryAssetTracker
    monitor: HealthMonitor
    achievements: AchievementService
    tracker: AchievementTracker
    claims: RewardClaimService

    def start_health_ticks(self) -> Callable[[], None]:
        return self.monitor.start(self.settings.health_tick_seconds)


def _looks_like_local_mysql_unreachable(database_url: str, timeout: float) -> bool:
    parsed = urlparse(database_url)
    if not parsed.scheme.startswith("mysql"):
        return False

    host = (parsed.hostname or "").strip().lower()
    if host not in {"localhost", "127.0.0.1", "::1"}:
        return False

    port = parsed.port or 3306
    try:
        with socket.create_connection((host, port), timeout=timeout):
            return False
    except OSError:
        return True


def _build_sql_store(settings: EngineSettings) -> KeyValueStore:
    from lifesim.infrastructure.db.sql_kv_store import SqlKeyValueStore

    return SqlKeyValueStore.from_url(settings.database_url)


def build_store(settings: EngineSettings) -> KeyValueStore:
    if settings.storage_backend == "file":
        return FileKeyValueStore(settings.storage_path)

    if settings.storage_backend == "sql":
        if not settings.database_url:
            logger.warning("SQL backend selected without LIFESIM_DATABASE_URL; using in-memory storage")
            return InMemoryKeyValueStore()
        if _looks_like_local_mysql_unreachable(settings.database_url, settings.db_connect_probe_timeout_s):
            logger.warning("Database appears unreachable; using in-memory storage")
            return InMemoryKeyValueStore()
        try:
            return _build_sql_store(settings)
        except Exception as exc:  # pragma: no cover - best-effort fallback
            logger.warning("Database unavailable; using in-memory storage", extra={"reason": str(exc)})
            return InMemoryKeyValueStore()

    return InMemoryKeyValueStore()


def configure_logging(level: str) -> None:
    logging.getLogger().setLevel(getattr(logging, str(level).upper(), logging.WARNING))


def create_engine_services(
    settings: Optional[EngineSettings] = None,
    *,
    character: Optional[CharacterStore] = None,
    game: Optional[GameStore] = None,
    notifier: Optional[Notifier] = None,
    audio: Optional[AudioCues] = None,
    event_log: Optional[HealthEventLog] = None,
    store: Optional[KeyValueStore] = None,
) -> EngineServices:
    if settings is None:
        load_dotenv()
        settings = load_settings()
        configure_logging(settings.log_level)

    store = store or build_store(settings)
    event_bus = EventBus()
    character = character or Character(id=1, name="Player")
    game = game or InMemoryGame()
    asset_tracker = InMemoryAssetTracker(character)
    rng = random.Random(settings.rng_seed)

    monitor = HealthMonitor(
        character,
        event_log=event_log or InMemoryHealthEventLog(),
        notifier=notifier,
        audio=audio,
        event_bus=event_bus,
        rng=rng,
    )
    achievements = AchievementService(JsonAchievementStateRepository(store), event_bus=event_bus)
    tracker = AchievementTracker(achievements, audio=audio)
    claims = RewardClaimService(
        achievements,
        RewardClaimLedger(JsonRewardLedgerRepository(store)),
        RewardApplier(character, game=game, asset_tracker=asset_tracker),
        event_bus=event_bus,
    )

    return EngineServices(
        settings=settings,
        store=store,
        event_bus=event_bus,
        character=character,
        game=game,
        asset_tracker=asset_tracker,
        monitor=monitor,
        achievements=achievements,
        tracker=tracker,
        claims=claims,
    )
