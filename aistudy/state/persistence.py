# aistudy/state/persistence.py
"""Local key-value storage for the persisted state blob."""
from __future__ import annotations
import logging
import os
import tempfile
from dataclasses import dataclass
from pathlib import Path

from ..config import STORAGE_KEY

logger = logging.getLogger(__name__)


class StorageError(RuntimeError):
    """Raised by a storage backend when a read or write cannot complete."""


class StorageFullError(StorageError):
    """Raised when a write would exceed the backend's quota."""


@dataclass(frozen=True)
class SaveResult:
    ok: bool
    size: int = 0
    error: str | None = None

    def __bool__(self) -> bool:
        return self.ok


def _check_quota(key: str, value: str, quota_bytes: int | None) -> int:
    size = len(key.encode("utf-8")) + len(value.encode("utf-8"))
    if quota_bytes is not None and size > quota_bytes:
        raise StorageFullError(f"{size} bytes exceeds quota of {quota_bytes}")
    return size


class MemoryStorage:
    def __init__(self, quota_bytes: int | None = None):
        self.quota_bytes = quota_bytes
        self._items: dict[str, str] = {}

    def get_item(self, key: str) -> str | None:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        _check_quota(key, value, self.quota_bytes)
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)


class FileStorage:
    """One ``<key>.json`` file per key inside ``directory``."""

    def __init__(self, directory: str | Path, quota_bytes: int | None = None):
        self.directory = Path(directory)
        self.quota_bytes = quota_bytes

    def _path(self, key: str) -> Path:
        return self.directory / f"{key}.json"

    def get_item(self, key: str) -> str | None:
        p = self._path(key)
        if not p.exists():
            return None
        try:
            return p.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise StorageError(f"cannot read {p}: {e}") from e

    def set_item(self, key: str, value: str) -> None:
        _check_quota(key, value, self.quota_bytes)
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            fd, tmp = tempfile.mkstemp(prefix=f".{key}.", suffix=".tmp", dir=self.directory)
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    f.write(value)
                os.replace(tmp, self._path(key))
            except BaseException:
                Path(tmp).unlink(missing_ok=True)
                raise
        except OSError as e:
            raise StorageError(f"cannot write {self._path(key)}: {e}") from e

    def remove_item(self, key: str) -> None:
        self._path(key).unlink(missing_ok=True)


class PersistenceAdapter:
    """Reads and writes the state blob under a single fixed key.

    Reads are best-effort: a missing or unreadable entry comes back as None.
    Writes never raise; a failure is logged and returned as a failed
    SaveResult so callers may surface it if they care.
    """

    def __init__(self, storage, key: str = STORAGE_KEY):
        self.storage = storage
        self.key = key

    def load(self) -> str | None:
        try:
            return self.storage.get_item(self.key)
        except StorageError as e:
            logger.warning("Storage read failed for %r: %s", self.key, e)
            return None

    def save(self, raw: str) -> SaveResult:
        try:
            self.storage.set_item(self.key, raw)
        except StorageFullError as e:
            logger.warning("Storage full: %s", e)
            return SaveResult(False, error=f"StorageFullError: {e}")
        except StorageError as e:
            logger.warning("Storage write failed for %r: %s", self.key, e)
            return SaveResult(False, error=f"{type(e).__name__}: {e}")
        return SaveResult(True, size=len(raw.encode("utf-8")))
