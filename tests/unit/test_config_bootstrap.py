import os
import sys
import tempfile
from pathlib import Path
import unittest
from unittest import mock

sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "src"))

from lifesim import bootstrap
from lifesim.config import EngineSettings, load_settings
from lifesim.infrastructure.file_kv_store import FileKeyValueStore
from lifesim.infrastructure.inmemory.inmemory_collaborators import RecordingAudio
from lifesim.infrastructure.inmemory.inmemory_kv_store import InMemoryKeyValueStore


class LoadSettingsTests(unittest.TestCase):
    def test_defaults(self) -> None:
        with mock.patch.dict("os.environ", {}, clear=True):
            settings = load_settings()

        self.assertEqual("memory", settings.storage_backend)
        self.assertEqual(".lifesim", settings.storage_path)
        self.assertEqual(60.0, settings.health_tick_seconds)
        self.assertIsNone(settings.rng_seed)
        self.assertEqual("WARNING", settings.log_level)
        self.assertEqual(0.35, settings.db_connect_probe_timeout_s)

    def test_environment_overrides(self) -> None:
        env = {
            "LIFESIM_STORAGE_BACKEND": "SQL",
            "LIFESIM_DATABASE_URL": "sqlite:///:memory:",
            "LIFESIM_HEALTH_TICK_S": "5",
            "LIFESIM_RNG_SEED": "42",
            "LIFESIM_LOG_LEVEL": "debug",
            "LIFESIM_DB_CONNECT_PROBE_TIMEOUT_S": "1.5",
        }
        with mock.patch.dict("os.environ", env, clear=True):
            settings = load_settings()

        self.assertEqual("sql", settings.storage_backend)
        self.assertEqual("sqlite:///:memory:", settings.database_url)
        self.assertEqual(5.0, settings.health_tick_seconds)
        self.assertEqual(42, settings.rng_seed)
        self.assertEqual("DEBUG", settings.log_level)
        self.assertEqual(1.5, settings.db_connect_probe_timeout_s)

    def test_suite_runs_without_inherited_lifesim_variables(self) -> None:
        inherited = [name for name in os.environ if name.startswith("LIFESIM_")]

        self.assertEqual([], inherited)

    def test_invalid_values_fall_back_to_defaults(self) -> None:
        env = {
            "LIFESIM_STORAGE_BACKEND": "cloud",
            "LIFESIM_HEALTH_TICK_S": "-3",
            "LIFESIM_RNG_SEED": "abc",
            "LIFESIM_DB_CONNECT_PROBE_TIMEOUT_S": "0",
        }
        with mock.patch.dict("os.environ", env, clear=True):
            settings = load_settings()

        self.assertEqual("memory", settings.storage_backend)
        self.assertEqual(60.0, settings.health_tick_seconds)
        self.assertIsNone(settings.rng_seed)
        self.assertEqual(0.35, settings.db_connect_probe_timeout_s)


class BuildStoreTests(unittest.TestCase):
    def test_file_backend(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            store = bootstrap.build_store(EngineSettings(storage_backend="file", storage_path=tmp))

            self.assertIsInstance(store, FileKeyValueStore)

    def test_sql_without_url_falls_back_to_memory(self) -> None:
        with self.assertLogs("lifesim.bootstrap", level="WARNING"):
            store = bootstrap.build_store(EngineSettings(storage_backend="sql"))

        self.assertIsInstance(store, InMemoryKeyValueStore)

    def test_unreachable_local_mysql_falls_back_to_memory(self) -> None:
        settings = EngineSettings(storage_backend="sql", database_url="mysql+mysqlconnector://u:p@localhost:3306/lifesim")

        with mock.patch.object(bootstrap, "_looks_like_local_mysql_unreachable", return_value=True):
            with self.assertLogs("lifesim.bootstrap", level="WARNING"):
                store = bootstrap.build_store(settings)

        self.assertIsInstance(store, InMemoryKeyValueStore)

    def test_sql_build_failure_falls_back_to_memory(self) -> None:
        settings = EngineSettings(storage_backend="sql", database_url="postgresql://nowhere/lifesim")

        with mock.patch.object(bootstrap, "_build_sql_store", side_effect=RuntimeError("no driver")):
            with self.assertLogs("lifesim.bootstrap", level="WARNING"):
                store = bootstrap.build_store(settings)

        self.assertIsInstance(store, InMemoryKeyValueStore)

    def test_non_mysql_urls_skip_socket_probe(self) -> None:
        self.assertFalse(bootstrap._looks_like_local_mysql_unreachable("sqlite:///x.db", 0.01))


class CreateEngineServicesTests(unittest.TestCase):
    def test_wires_shared_store_and_character(self) -> None:
        audio = RecordingAudio()
        services = bootstrap.create_engine_services(EngineSettings(rng_seed=7), audio=audio)

        services.character.add_wealth(5_000)
        services.tracker.track_wealth(services.character.wealth)
        reward = services.claims.claim_reward("wealth-1")

        self.assertEqual(1000, reward.value)
        self.assertEqual(16_000, services.character.wealth)
        self.assertEqual(16_000, services.asset_tracker.cash)
        self.assertIs(services.character, services.monitor.character)
        self.assertIsNotNone(services.store.get("claimed-rewards"))
        self.assertIn("success", audio.played)

    def test_health_ticks_use_configured_interval(self) -> None:
        services = bootstrap.create_engine_services(EngineSettings(health_tick_seconds=12.5))

        with mock.patch.object(services.monitor, "start", return_value=services.monitor.stop) as start:
            stop = services.start_health_ticks()

        start.assert_called_once_with(12.5)
        self.assertEqual(services.monitor.stop, stop)

    def test_reads_environment_when_settings_omitted(self) -> None:
        with mock.patch.dict("os.environ", {"LIFESIM_STORAGE_BACKEND": "memory"}, clear=True):
            with mock.patch.object(bootstrap, "load_dotenv") as load_dotenv:
                services = bootstrap.create_engine_services()

        load_dotenv.assert_called_once_with()
        self.assertIsInstance(services.store, InMemoryKeyValueStore)


if __name__ == "__main__":
    unittest.main()
