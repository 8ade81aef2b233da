from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Union

from ..core.exceptions import StorageError
from .base import CollectionStore

logger = logging.getLogger(__name__)


class JsonFileStore(CollectionStore):
    """One pretty-printed ``<collection>.json`` file per collection.

    Writes go through a temporary file in the same directory followed by
    ``os.replace``.
    """

    def __init__(self, data_dir: Union[str, Path]):
        super().__init__()
        self._data_dir = Path(data_dir)

    def path_for(self, name: str) -> Path:
        return self._data_dir / f"{name}.json"

    def read_collection(self, name: str) -> list[dict]:
        path = self.path_for(name)
        try:
            with path.open("r", encoding="utf-8") as fh:
                data = json.load(fh)
        except (OSError, ValueError) as e:
            logger.error("Error reading %s: %s", path, e)
            return []

        if not isinstance(data, list):
            logger.error("Error reading %s: expected a JSON array, got %s", path, type(data).__name__)
            return []
        return data

    def write_collection(self, name: str, records: list[dict]) -> None:
        path = self.path_for(name)
        tmp_name = None
        try:
            self._data_dir.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(prefix=f".{name}.", suffix=".tmp", dir=self._data_dir)
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(records, fh, indent=2, ensure_ascii=False)
            os.replace(tmp_name, path)
        except (OSError, TypeError, ValueError) as e:
            logger.error("Error writing %s: %s", path, e)
            if tmp_name and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise StorageError(f"Failed to save {name}") from e
