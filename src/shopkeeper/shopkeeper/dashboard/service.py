from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Iterable, Optional

from ..attendance.model import AttendanceRecord
from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import today_local, try_parse_iso_date
from ..common.validators import round_half_up
from ..core.enums import AttendanceStatus
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from ..payroll.calculator.base import PayrollCalculator
from ..payroll.calculator.standard_calculator import StandardPayrollCalculator
from ..payroll.service import records_by_employee_for_month

ATTENDED_STATUSES = (AttendanceStatus.PRESENT, AttendanceStatus.LATE, AttendanceStatus.HALF_DAY)


def estimate_month_to_date(
    employees: Iterable[Employee],
    records: Iterable[AttendanceRecord],
    today: date,
    *,
    calculator: Optional[PayrollCalculator] = None,
) -> float:
    """Shop-wide payroll estimate for today's month, up to and including today.

    Same tally and amounts as the monthly payroll, summed over every employee
    (active or not) without per-employee rounding.
    """
    calculator = calculator or StandardPayrollCalculator()
    to_date = []
    for r in records:
        d = try_parse_iso_date(r.work_date)
        if d is not None and d <= today:
            to_date.append(r)

    grouped = records_by_employee_for_month(to_date, today.year, today.month)
    total = 0.0
    for emp in employees:
        t = calculator.tally(grouped.get(emp.employee_id, []))
        total += calculator.amounts(emp.base_salary, t).net_pay
    return total


@dataclass(frozen=True)
class DashboardStats:
    today: str
    total_staff: int
    present_today: int
    pending_attendance: int
    estimated_payroll: int

    def to_dict(self) -> dict:
        return {
            "today": self.today,
            "totalStaff": self.total_staff,
            "presentToday": self.present_today,
            "pendingAttendance": self.pending_attendance,
            "estimatedPayroll": self.estimated_payroll,
        }


class DashboardService:
    """Use case: live whole-shop summary for the current month."""

    def __init__(
        self,
        employees: EmployeeRepository,
        attendance: AttendanceRepository,
        *,
        calculator: Optional[PayrollCalculator] = None,
    ):
        self._employees = employees
        self._attendance = attendance
        self._calculator = calculator or StandardPayrollCalculator()

    def summary(self, *, today: Optional[date] = None) -> DashboardStats:
        today = today or today_local()
        employees = list(self._employees.list_all())
        records = list(self._attendance.list_all())

        today_iso = today.isoformat()
        staff_ids = {e.employee_id for e in employees}
        today_records = [
            r for r in records if r.employee_id in staff_ids and try_parse_iso_date(r.work_date) == today
        ]
        present_today = sum(1 for r in today_records if r.status in ATTENDED_STATUSES)

        estimate = estimate_month_to_date(employees, records, today, calculator=self._calculator)

        return DashboardStats(
            today=today_iso,
            total_staff=len(employees),
            present_today=present_today,
            pending_attendance=max(len(employees) - len(today_records), 0),
            estimated_payroll=round_half_up(estimate),
        )
