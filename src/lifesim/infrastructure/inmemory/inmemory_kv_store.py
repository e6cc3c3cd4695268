from __future__ import annotations

import threading
from typing import Dict

from lifesim.domain.repositories import KeyValueStore


class InMemoryKeyValueStore(KeyValueStore):
    def __init__(self, seed: Dict[str, str] | None = None) -> None:
        self._values: Dict[str, str] = dict(seed or {})
        self._lock = threading.Lock()

    def get(self, key: str) -> str | None:
        with self._lock:
            return self._values.get(str(key))

    def set(self, key: str, value: str) -> None:
        with self._lock:
            self._values[str(key)] = str(value)

    def delete(self, key: str) -> None:
        with self._lock:
            self._values.pop(str(key), None)
