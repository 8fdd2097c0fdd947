from __future__ import annotations

from datetime import date

import pytest

from src.shopkeeper.shopkeeper.attendance.store_attendance_repository import StoreAttendanceRepository
from src.shopkeeper.shopkeeper.core.enums import AttendanceStatus
from src.shopkeeper.shopkeeper.employees.store_employee_repository import StoreEmployeeRepository
from src.shopkeeper.shopkeeper.storage.store import InMemoryStore


@pytest.fixture
def fixed_today():
    return date(2025, 3, 15)


@pytest.fixture
def store():
    return InMemoryStore()


@pytest.fixture
def employees_repo(store):
    return StoreEmployeeRepository(store, seed=())


@pytest.fixture
def attendance_repo(store):
    counter = iter(range(1, 10_000))
    return StoreAttendanceRepository(store, id_factory=lambda: f"gen-{next(counter)}")


@pytest.fixture
def scenario_a_statuses():
    P, A, H, L = (
        AttendanceStatus.PRESENT,
        AttendanceStatus.ABSENT,
        AttendanceStatus.HALF_DAY,
        AttendanceStatus.LATE,
    )
    return [P] * 20 + [A] * 5 + [H] * 2 + [L] * 3
