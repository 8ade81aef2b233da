from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.event_manager.event_manager.storage.bootstrap import initialize_data_storage


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    data_dir = Path(settings.DATA_DIR).resolve()

    created = initialize_data_storage(data_dir)
    print(f"OK: data storage ready in {data_dir} (created {len(created)} collection file(s))")


if __name__ == "__main__":
    main()
