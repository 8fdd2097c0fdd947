from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from ..common.validators import as_flag, as_number


@dataclass(frozen=True)
class Employee:
    """Domain entity: an employee master record.

    Note: Plain data object (no storage access). `base_salary` is monthly.
    """

    employee_id: str
    name: str
    role: str
    phone: str
    base_salary: float
    joining_date: str
    is_active: bool = True

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.employee_id,
            "name": self.name,
            "role": self.role,
            "phone": self.phone,
            "baseSalary": self.base_salary,
            "joiningDate": self.joining_date,
            "isActive": self.is_active,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Optional["Employee"]:
        employee_id = data.get("id")
        if employee_id is None or str(employee_id) == "":
            return None
        return cls(
            employee_id=str(employee_id),
            name=str(data.get("name") or ""),
            role=str(data.get("role") or ""),
            phone=str(data.get("phone") or ""),
            base_salary=max(as_number(data.get("baseSalary")), 0.0),
            joining_date=str(data.get("joiningDate") or ""),
            is_active=as_flag(data.get("isActive"), True),
        )


SAMPLE_EMPLOYEES: tuple[Employee, ...] = (
    Employee("1", "Rahul Kumar", "Sales Manager", "9876543210", 25000, "2023-01-15", True),
    Employee("2", "Priya Sharma", "Cashier", "9123456780", 18000, "2023-06-01", True),
    Employee("3", "Amit Singh", "Helper", "9988776655", 12000, "2024-02-10", True),
)
