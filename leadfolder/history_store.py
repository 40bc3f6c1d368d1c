# leadfolder/history_store.py
"""
Recent-runs history: a most-recent-first list of HistoryItem, capped at 15,
persisted as one JSON array under a fixed key.

History is best-effort. Nothing in here raises to the caller: unreadable data
loads as an empty list and failed writes are logged and dropped.
"""
from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Dict, List, Optional, Protocol

from pydantic import ValidationError as PydanticValidationError

from leadfolder.errors import PersistenceError
from leadfolder.models import HistoryItem

logger = logging.getLogger(__name__)

HISTORY_KEY = "jc-ai-proposal-history-v1"
HISTORY_LIMIT = 15


class KeyValueStore(Protocol):
    def get(self, key: str) -> Optional[str]: ...

    def set(self, key: str, value: str) -> None: ...


class MemoryStore:
    """Dict-backed store; used by tests and as a throwaway fallback."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value


class JsonFileStore:
    """
    String key/value pairs kept in one JSON object on disk.
    Writes go through a temp file in the same directory and os.replace.
    """

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def _read_all(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            raise PersistenceError(f"Could not read {self.path}: {e}") from e
        if not isinstance(data, dict):
            raise PersistenceError(f"{self.path} does not hold a JSON object")
        return data

    def get(self, key: str) -> Optional[str]:
        value = self._read_all().get(key)
        return value if isinstance(value, str) else None

    def set(self, key: str, value: str) -> None:
        try:
            data = self._read_all()
        except PersistenceError:
            data = {}
        data[key] = value
        tmp = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp = tempfile.mkstemp(dir=self.path.parent, prefix=".history-", suffix=".tmp")
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, ensure_ascii=False)
            os.replace(tmp, self.path)
        except OSError as e:
            if tmp is not None and os.path.exists(tmp):
                os.remove(tmp)
            raise PersistenceError(f"Could not write {self.path}: {e}") from e


class HistoryStore:
    def __init__(self, backend: KeyValueStore, key: str = HISTORY_KEY, limit: int = HISTORY_LIMIT):
        self.backend = backend
        self.key = key
        self.limit = limit
        self._items: List[HistoryItem] = []

    @property
    def items(self) -> List[HistoryItem]:
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def load(self) -> List[HistoryItem]:
        """Read persisted history once; any problem yields an empty list."""
        self._items = self._read()
        return self.items

    def _read(self) -> List[HistoryItem]:
        try:
            raw = self.backend.get(self.key)
        except PersistenceError as e:
            logger.warning("History read failed: %s", e)
            return []
        if not raw:
            return []
        try:
            parsed = json.loads(raw)
        except ValueError:
            logger.debug("Stored history is not valid JSON; starting fresh")
            return []
        if not isinstance(parsed, list):
            logger.debug("Stored history is not an array; starting fresh")
            return []

        items: List[HistoryItem] = []
        for entry in parsed:
            try:
                items.append(HistoryItem.model_validate(entry))
            except PydanticValidationError:
                logger.debug("Skipping malformed history entry: %r", entry)
        return items[: self.limit]

    def record(self, item: HistoryItem) -> List[HistoryItem]:
        """Prepend, cap to the limit, persist the whole list."""
        self._items = [item, *self._items][: self.limit]
        self._persist()
        return self.items

    def get(self, item_id: str) -> Optional[HistoryItem]:
        return next((it for it in self._items if it.id == item_id), None)

    def _persist(self) -> None:
        payload = json.dumps([it.to_json_dict() for it in self._items], ensure_ascii=False)
        try:
            self.backend.set(self.key, payload)
        except PersistenceError as e:
            logger.warning("History write failed: %s", e)
