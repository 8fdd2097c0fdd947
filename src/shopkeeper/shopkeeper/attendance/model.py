from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from ..common.validators import as_number
from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one employee's attendance for one day.

    `employee_id` is a reference, not ownership. `work_date` stays in ISO
    string form; readers that need a date parse it and skip malformed values.
    """

    record_id: str
    employee_id: str
    work_date: str
    status: AttendanceStatus
    overtime_hours: float = 0.0
    notes: Optional[str] = None

    @property
    def key(self) -> tuple[str, str]:
        return self.employee_id, self.work_date

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "id": self.record_id,
            "employeeId": self.employee_id,
            "date": self.work_date,
            "status": self.status.value,
            "overtimeHours": self.overtime_hours,
        }
        if self.notes:
            data["notes"] = self.notes
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Optional["AttendanceRecord"]:
        try:
            status = AttendanceStatus(data.get("status"))
        except ValueError:
            return None
        employee_id = data.get("employeeId")
        if employee_id is None:
            return None
        return cls(
            record_id=str(data.get("id") or ""),
            employee_id=str(employee_id),
            work_date=str(data.get("date") or ""),
            status=status,
            overtime_hours=as_number(data.get("overtimeHours")),
            notes=data.get("notes") or None,
        )


@dataclass(frozen=True)
class DayMark:
    """One line of a day sheet: what the shop owner marked for an employee."""

    employee_id: str
    status: AttendanceStatus
    overtime_hours: float = 0.0
    notes: Optional[str] = None
