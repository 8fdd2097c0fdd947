from __future__ import annotations

import json
import logging
import os
import re
import tempfile
from pathlib import Path
from typing import Optional

from .store import Store

logger = logging.getLogger(__name__)

_SAFE_KEY = re.compile(r"^[A-Za-z0-9_.-]+$")


class JsonFileStore(Store):
    """One JSON document per collection key inside a data directory."""

    def __init__(self, data_dir: str | Path):
        self._dir = Path(data_dir)

    def _path(self, key: str) -> Path:
        if not _SAFE_KEY.match(key):
            raise ValueError(f"Invalid store key: {key!r}")
        return self._dir / f"{key}.json"

    def get(self, key: str) -> Optional[list[dict]]:
        path = self._path(key)
        if not path.exists():
            return None
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError:
            logger.error("Corrupted store file %s, treating collection as empty", path)
            return []
        if not isinstance(data, list):
            logger.error("Store file %s does not hold a list, treating collection as empty", path)
            return []
        return data

    def put(self, key: str, value: list[dict]) -> None:
        path = self._path(key)
        self._dir.mkdir(parents=True, exist_ok=True)

        # Write to a sibling temp file then swap, so readers never see half a document.
        fd, tmp_name = tempfile.mkstemp(dir=self._dir, prefix=f".{key}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(list(value), f, ensure_ascii=False, indent=2)
            os.replace(tmp_name, path)
        except Exception:
            if os.path.exists(tmp_name):
                os.remove(tmp_name)
            raise

    def keys(self) -> list[str]:
        if not self._dir.exists():
            return []
        return sorted(p.stem for p in self._dir.glob("*.json"))
