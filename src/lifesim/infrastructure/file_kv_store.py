import json
import os
import re
import time
from hashlib import sha1
from pathlib import Path

from lifesim.domain.errors import PersistenceError
from lifesim.domain.repositories import KeyValueStore


_SAFE_KEY = re.compile(r"^[a-z0-9][a-z0-9_.-]{0,63}$")


class FileKeyValueStore(KeyValueStore):
    """One JSON envelope per key under ``root_dir``.

    Writes land in a sibling ``.tmp`` file first and are moved into place
    with ``os.replace``, so a reader never sees a half-written blob.
    """

    def __init__(self, root_dir: str | Path) -> None:
        self.root_dir = Path(root_dir)
        self.root_dir.mkdir(parents=True, exist_ok=True)

    def _path_for_key(self, key: str) -> Path:
        name = str(key)
        if not _SAFE_KEY.match(name):
            name = sha1(name.encode("utf-8")).hexdigest()
        return self.root_dir / f"{name}.json"

    def get(self, key: str) -> str | None:
        path = self._path_for_key(key)
        if not path.exists():
            return None
        try:
            envelope = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise PersistenceError(key, f"unreadable blob at {path}") from exc
        if not isinstance(envelope, dict) or not isinstance(envelope.get("value"), str):
            raise PersistenceError(key, f"malformed envelope at {path}")
        return envelope["value"]

    def set(self, key: str, value: str) -> None:
        path = self._path_for_key(key)
        envelope = {
            "key": str(key),
            "stored_at": int(time.time()),
            "value": str(value),
        }
        tmp_path = path.with_suffix(".tmp")
        try:
            tmp_path.write_text(json.dumps(envelope, ensure_ascii=False), encoding="utf-8")
            os.replace(tmp_path, path)
        except OSError as exc:
            raise PersistenceError(key, f"could not write {path}") from exc

    def delete(self, key: str) -> None:
        path = self._path_for_key(key)
        try:
            path.unlink()
        except FileNotFoundError:
            return
        except OSError as exc:
            raise PersistenceError(key, f"could not delete {path}") from exc
