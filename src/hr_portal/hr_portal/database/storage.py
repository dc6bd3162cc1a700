from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Dict, Optional, Protocol

from ..core.exceptions import StorageError

logger = logging.getLogger(__name__)


class KeyValueStorage(Protocol):
    """Durable string key/value storage (the local-storage contract).

    Note (DIP): the document store and the auth gate depend on this interface,
    not on where values actually live.
    """

    def get(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def set(self, key: str, value: str) -> None:
        raise NotImplementedError

    def remove(self, key: str) -> None:
        raise NotImplementedError


def _check_quota(items: Dict[str, str], quota_bytes: Optional[int]) -> None:
    if quota_bytes is None:
        return
    used = sum(len(k.encode("utf-8")) + len(v.encode("utf-8")) for k, v in items.items())
    if used > quota_bytes:
        raise StorageError(f"Storage quota exceeded ({used} > {quota_bytes} bytes)")


class InMemoryStorage(KeyValueStorage):
    def __init__(self, initial: Optional[Dict[str, str]] = None, *, quota_bytes: Optional[int] = None):
        self._items: Dict[str, str] = dict(initial or {})
        self._quota_bytes = quota_bytes

    def get(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set(self, key: str, value: str) -> None:
        candidate = {**self._items, key: value}
        _check_quota(candidate, self._quota_bytes)
        self._items = candidate

    def remove(self, key: str) -> None:
        self._items.pop(key, None)


class FileStorage(KeyValueStorage):
    """All keys kept in one JSON object on disk.

    Writes go to a sibling temp file first and are swapped in with os.replace,
    so a failed write never leaves a half-written file behind.
    """

    def __init__(self, path: str | Path, *, quota_bytes: Optional[int] = None):
        self._path = Path(path)
        self._quota_bytes = quota_bytes

    @property
    def path(self) -> Path:
        return self._path

    def _read_all(self) -> Dict[str, str]:
        try:
            raw = self._path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return {}
        except OSError as e:
            raise StorageError(f"Cannot read {self._path}: {e}")

        try:
            data = json.loads(raw)
        except ValueError:
            logger.warning("Storage file %s is not valid JSON, starting empty", self._path)
            return {}
        if not isinstance(data, dict):
            logger.warning("Storage file %s does not hold an object, starting empty", self._path)
            return {}
        return {str(k): str(v) for k, v in data.items()}

    def _write_all(self, items: Dict[str, str]) -> None:
        _check_quota(items, self._quota_bytes)
        tmp_path = self._path.with_name(self._path.name + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(json.dumps(items, ensure_ascii=False), encoding="utf-8")
            os.replace(tmp_path, self._path)
        except OSError as e:
            raise StorageError(f"Cannot write {self._path}: {e}")

    def get(self, key: str) -> Optional[str]:
        return self._read_all().get(key)

    def set(self, key: str, value: str) -> None:
        items = self._read_all()
        items[key] = value
        self._write_all(items)

    def remove(self, key: str) -> None:
        items = self._read_all()
        if items.pop(key, None) is not None:
            self._write_all(items)
