from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Iterable, Union

from ..core.constants import COLLECTIONS

logger = logging.getLogger(__name__)


def initialize_data_storage(data_dir: Union[str, Path], collections: Iterable[str] = COLLECTIONS) -> list[Path]:
    """Create the data directory and an empty array file per missing collection.

    Existing files are left untouched. Returns the files that were created.
    """

    root = Path(data_dir)
    try:
        root.mkdir(parents=True, exist_ok=True)
        created: list[Path] = []
        for name in collections:
            path = root / f"{name}.json"
            if path.exists():
                continue
            path.write_text(json.dumps([], indent=2), encoding="utf-8")
            created.append(path)
    except OSError:
        logger.exception("Error initializing data storage in %s", root)
        raise

    if created:
        logger.info("Initialized %d collection file(s) in %s", len(created), root)
    return created
