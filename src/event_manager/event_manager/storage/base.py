from __future__ import annotations

import logging
import threading
from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Any, Callable, Iterator, Optional, Sequence

logger = logging.getLogger(__name__)


class DuplicateRecordError(Exception):
    """Raised by ``insert`` when a uniqueness constraint would be violated."""

    def __init__(self, collection: str, fields: Sequence[str], existing: dict):
        super().__init__(f"duplicate {collection} record on {', '.join(fields)}")
        self.collection = collection
        self.fields = tuple(fields)
        self.existing = existing


def _normalize(value: Any) -> Any:
    return value.casefold() if isinstance(value, str) else value


def next_id(records: Sequence[dict]) -> int:
    ids = [int(r["id"]) for r in records if isinstance(r.get("id"), int)]
    return max(ids) + 1 if ids else 1


class CollectionStore(ABC):
    """Durable mapping of collection name -> ordered list of records.

    Subclasses only implement whole-collection read/write. ``insert`` and
    ``update`` run their read-check-write under a per-collection lock, so
    uniqueness rules hold for concurrent requests within one process.
    """

    def __init__(self) -> None:
        self._locks: dict[str, threading.RLock] = {}
        self._locks_guard = threading.Lock()

    @abstractmethod
    def read_collection(self, name: str) -> list[dict]:
        """Return every record; an unreadable collection reads as empty."""
        raise NotImplementedError

    @abstractmethod
    def write_collection(self, name: str, records: list[dict]) -> None:
        raise NotImplementedError

    @contextmanager
    def locked(self, name: str) -> Iterator[None]:
        with self._locks_guard:
            lock = self._locks.setdefault(name, threading.RLock())
        with lock:
            yield

    def insert(self, name: str, record: dict, *, unique_on: Sequence[str] = ()) -> dict:
        with self.locked(name):
            records = self.read_collection(name)
            if unique_on:
                wanted = tuple(_normalize(record.get(f)) for f in unique_on)
                for existing in records:
                    if tuple(_normalize(existing.get(f)) for f in unique_on) == wanted:
                        logger.warning("Rejected duplicate %s record on %s", name, ", ".join(unique_on))
                        raise DuplicateRecordError(name, unique_on, dict(existing))

            stored = {"id": next_id(records), **{k: v for k, v in record.items() if k != "id"}}
            records.append(stored)
            self.write_collection(name, records)
            return dict(stored)

    def update(self, name: str, record_id: int, mutate: Callable[[dict], None]) -> Optional[dict]:
        with self.locked(name):
            records = self.read_collection(name)
            for record in records:
                if record.get("id") == record_id:
                    mutate(record)
                    record["id"] = record_id
                    self.write_collection(name, records)
                    return dict(record)
            return None

    def find(self, name: str, record_id: int) -> Optional[dict]:
        for record in self.read_collection(name):
            if record.get("id") == record_id:
                return record
        return None
