from __future__ import annotations

import logging
from dataclasses import replace
from typing import Optional

from ..common.datetime_utils import today_local
from ..common.ids import generate_id
from ..common.validators import require_iso_date, require_non_empty, require_non_negative_number
from ..core.exceptions import NotFoundError, ValidationError
from .model import Employee
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)


class EmployeeService:
    """Use case: manage the employee directory."""

    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    def list_employees(self, *, active_only: bool = False) -> list[Employee]:
        employees = list(self._employees.list_all())
        if active_only:
            return [e for e in employees if e.is_active]
        return employees

    def search(self, term: str) -> list[Employee]:
        """Case-insensitive match on name or role."""
        needle = (term or "").strip().lower()
        employees = self.list_employees()
        if not needle:
            return employees
        return [e for e in employees if needle in e.name.lower() or needle in e.role.lower()]

    def get(self, employee_id: str) -> Employee:
        emp = self._employees.get_by_id(employee_id)
        if not emp:
            raise NotFoundError("Employee not found")
        return emp

    def create(
        self,
        *,
        name: str,
        role: str = "",
        phone: str = "",
        base_salary,
        joining_date: Optional[str] = None,
    ) -> Employee:
        emp = Employee(
            employee_id=generate_id(),
            name=require_non_empty(name, "Name"),
            role=(role or "").strip(),
            phone=(phone or "").strip(),
            base_salary=require_non_negative_number(base_salary, "Base salary"),
            joining_date=require_iso_date(joining_date or today_local().isoformat(), "Joining date"),
            is_active=True,
        )
        self._employees.save(emp)
        logger.info("Created employee %s (%s)", emp.employee_id, emp.name)
        return emp

    def update(
        self,
        employee_id: str,
        *,
        name: Optional[str] = None,
        role: Optional[str] = None,
        phone: Optional[str] = None,
        base_salary=None,
        joining_date: Optional[str] = None,
        is_active: Optional[bool] = None,
    ) -> Employee:
        current = self.get(employee_id)
        changes: dict = {}
        if name is not None:
            changes["name"] = require_non_empty(name, "Name")
        if role is not None:
            changes["role"] = role.strip()
        if phone is not None:
            changes["phone"] = phone.strip()
        if base_salary is not None:
            changes["base_salary"] = require_non_negative_number(base_salary, "Base salary")
        if joining_date is not None:
            changes["joining_date"] = require_iso_date(joining_date, "Joining date")
        if is_active is not None:
            changes["is_active"] = bool(is_active)

        updated = replace(current, **changes)
        self._employees.save(updated)
        return updated

    def set_active(self, employee_id: str, *, is_active: bool) -> Employee:
        return self.update(employee_id, is_active=is_active)

    def delete(self, employee_id: str) -> None:
        # Attendance rows of a deleted employee are left in place; they reference, not own.
        if not self._employees.delete_by_id(employee_id):
            raise NotFoundError("Employee not found")
        logger.info("Deleted employee %s", employee_id)

    def require_known(self, employee_ids) -> list[str]:
        known = {e.employee_id for e in self._employees.list_all()}
        unknown = [i for i in employee_ids if i not in known]
        if unknown:
            raise ValidationError(f"Unknown employee id(s): {', '.join(unknown)}")
        return list(employee_ids)
