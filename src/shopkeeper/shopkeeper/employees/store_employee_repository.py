from __future__ import annotations

import logging
from typing import Any, Iterable, Optional, Sequence

from ..core.constants import EMPLOYEES_KEY
from ..storage.store import Store
from .model import SAMPLE_EMPLOYEES, Employee
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)


class StoreEmployeeRepository(EmployeeRepository):
    def __init__(self, store: Store, *, seed: Iterable[Employee] = SAMPLE_EMPLOYEES):
        self._store = store
        self._seed = tuple(seed)

    def _load_with_unreadable(self) -> tuple[list[Employee], list[Any]]:
        raw = self._store.get(EMPLOYEES_KEY)
        if raw is None:
            # First run: seed the directory with the sample staff.
            logger.info("Employee collection missing, seeding %d sample employees", len(self._seed))
            self._write(self._seed, ())
            return list(self._seed), []

        employees, unreadable = [], []
        for item in raw:
            emp = Employee.from_dict(item) if isinstance(item, dict) else None
            if emp is None:
                logger.warning("Skipping malformed employee entry: %r", item)
                unreadable.append(item)
                continue
            employees.append(emp)
        return employees, unreadable

    def _load(self) -> list[Employee]:
        return self._load_with_unreadable()[0]

    def _write(self, employees: Iterable[Employee], unreadable: Sequence[Any]) -> None:
        self._store.put(EMPLOYEES_KEY, [e.to_dict() for e in employees] + list(unreadable))

    def list_all(self) -> Sequence[Employee]:
        return self._load()

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        for emp in self._load():
            if emp.employee_id == employee_id:
                return emp
        return None

    def save(self, employee: Employee) -> Employee:
        employees, unreadable = self._load_with_unreadable()
        for i, existing in enumerate(employees):
            if existing.employee_id == employee.employee_id:
                employees[i] = employee
                break
        else:
            employees.append(employee)
        self._write(employees, unreadable)
        return employee

    def delete_by_id(self, employee_id: str) -> bool:
        employees, unreadable = self._load_with_unreadable()
        kept = [e for e in employees if e.employee_id != employee_id]
        if len(kept) == len(employees):
            return False
        self._write(kept, unreadable)
        return True
