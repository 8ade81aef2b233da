from __future__ import annotations

import copy
from typing import Iterable

from .base import CollectionStore


class InMemoryStore(CollectionStore):
    """Process-local store used by tests and throwaway runs."""

    def __init__(self, seed: dict[str, Iterable[dict]] | None = None):
        super().__init__()
        self._collections: dict[str, list[dict]] = {}
        for name, records in (seed or {}).items():
            self._collections[name] = copy.deepcopy(list(records))

    def read_collection(self, name: str) -> list[dict]:
        return copy.deepcopy(self._collections.get(name, []))

    def write_collection(self, name: str, records: list[dict]) -> None:
        self._collections[name] = copy.deepcopy(list(records))
