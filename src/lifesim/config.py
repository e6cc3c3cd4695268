import os
from dataclasses import dataclass
from typing import Optional


STORAGE_BACKENDS = ("memory", "file", "sql")


@dataclass(frozen=True)
class EngineSettings:
    storage_backend: str = "memory"
    storage_path: str = ".lifesim"
    database_url: str = ""
    health_tick_seconds: float = 60.0
    rng_seed: Optional[int] = None
    log_level: str = "WARNING"
    db_connect_probe_timeout_s: float = 0.35


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError:
        return default
    return value if value > 0 else default


def _env_seed(name: str) -> Optional[int]:
    raw = os.getenv(name, "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        return None


def load_settings() -> EngineSettings:
    backend = os.getenv("LIFESIM_STORAGE_BACKEND", "memory").strip().lower()
    if backend not in STORAGE_BACKENDS:
        backend = "memory"
    return EngineSettings(
        storage_backend=backend,
        storage_path=os.getenv("LIFESIM_STORAGE_PATH", ".lifesim").strip() or ".lifesim",
        database_url=os.getenv("LIFESIM_DATABASE_URL", "").strip(),
        health_tick_seconds=_env_float("LIFESIM_HEALTH_TICK_S", 60.0),
        rng_seed=_env_seed("LIFESIM_RNG_SEED"),
        log_level=os.getenv("LIFESIM_LOG_LEVEL", "WARNING").strip().upper() or "WARNING",
        db_connect_probe_timeout_s=_env_float("LIFESIM_DB_CONNECT_PROBE_TIMEOUT_S", 0.35),
    )
