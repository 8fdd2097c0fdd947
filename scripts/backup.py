"""Backup the store.

Note: dumps every collection of the configured backend (json or mysql) into a
single timestamped JSON file under backups/.
"""

from __future__ import annotations

import importlib
import json
import sys
from datetime import datetime
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.shopkeeper.shopkeeper.container import build_store
from src.shopkeeper.shopkeeper.core.constants import ATTENDANCE_KEY, EMPLOYEES_KEY


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    store = build_store(settings)

    out_dir = REPO_ROOT / "backups"
    out_dir.mkdir(parents=True, exist_ok=True)

    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    out_file = out_dir / f"shopkeeper_{ts}.json"

    snapshot = {key: store.get(key) or [] for key in (EMPLOYEES_KEY, ATTENDANCE_KEY)}
    out_file.write_text(json.dumps(snapshot, ensure_ascii=False, indent=2), encoding="utf-8")
    print(f"OK: Backup created: {out_file}")


if __name__ == "__main__":
    main()
