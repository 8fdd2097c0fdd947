"""Seed the configured store with the sample employees.

Existing employees with the same id are overwritten; others are left alone.
"""

from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.shopkeeper.shopkeeper.container import build_store
from src.shopkeeper.shopkeeper.employees.model import SAMPLE_EMPLOYEES
from src.shopkeeper.shopkeeper.employees.store_employee_repository import StoreEmployeeRepository


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    repo = StoreEmployeeRepository(build_store(settings))
    for emp in SAMPLE_EMPLOYEES:
        repo.save(emp)
    print(f"OK: Seeded {len(SAMPLE_EMPLOYEES)} employees ({settings.STORAGE_BACKEND} backend)")


if __name__ == "__main__":
    main()
