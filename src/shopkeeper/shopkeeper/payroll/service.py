from __future__ import annotations

import logging
import re
from collections import defaultdict
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

from ..attendance.model import AttendanceRecord
from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import try_parse_iso_date
from ..core.exceptions import ValidationError
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from .calculator.base import PayrollCalculator
from .calculator.standard_calculator import StandardPayrollCalculator
from .model import PayrollEntry

logger = logging.getLogger(__name__)

_MONTH_RE = re.compile(r"^(\d{4})-(\d{1,2})$")


def parse_month(value: str) -> tuple[int, int]:
    """Parse YYYY-MM into (year, month)."""
    m = _MONTH_RE.match((value or "").strip())
    if not m:
        raise ValidationError("Month must be in YYYY-MM form")
    year, month = int(m.group(1)), int(m.group(2))
    if not 1 <= month <= 12:
        raise ValidationError("Month must be between 01 and 12")
    return year, month


def records_by_employee_for_month(
    records: Iterable[AttendanceRecord],
    year: int,
    month: int,
) -> dict[str, list[AttendanceRecord]]:
    """Group records of the given calendar month by employee.

    Records whose date does not parse fall outside every month.
    """
    grouped: dict[str, list[AttendanceRecord]] = defaultdict(list)
    for r in records:
        d = try_parse_iso_date(r.work_date)
        if d is None or d.year != year or d.month != month:
            continue
        grouped[r.employee_id].append(r)
    return grouped


def compute_payroll(
    employees: Iterable[Employee],
    records: Iterable[AttendanceRecord],
    year: int,
    month: int,
    *,
    calculator: Optional[PayrollCalculator] = None,
) -> list[PayrollEntry]:
    """One PayrollEntry per employee, in input order.

    Pure function over the given snapshots; employees with no records for the
    month still get an all-zero attendance entry.
    """
    calculator = calculator or StandardPayrollCalculator()
    grouped = records_by_employee_for_month(records, year, month)
    return [calculator.build_entry(emp, grouped.get(emp.employee_id, [])) for emp in employees]


@dataclass(frozen=True)
class PayrollReport:
    year: int
    month: int
    entries: Sequence[PayrollEntry]

    @property
    def period(self) -> str:
        return f"{self.year:04d}-{self.month:02d}"

    @property
    def total_payout(self) -> int:
        return sum(e.net_pay for e in self.entries)

    @property
    def total_overtime_pay(self) -> float:
        return sum(e.overtime_pay for e in self.entries)

    @property
    def total_deductions(self) -> float:
        return sum(e.deductions for e in self.entries)


class PayrollService:
    """Use case: monthly payroll.

    Always recomputed from the current directory and attendance; editing a past
    attendance record changes that month's payroll on the next request.
    """

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

    def generate(self, year: int, month: int) -> PayrollReport:
        employees = list(self._employees.list_all())
        records = self._attendance.list_all()
        entries = compute_payroll(employees, records, year, month, calculator=self._calculator)
        logger.debug("Computed payroll for %04d-%02d over %d employee(s)", year, month, len(entries))
        return PayrollReport(year=year, month=month, entries=entries)

    def generate_for(self, month_value: str) -> PayrollReport:
        year, month = parse_month(month_value)
        return self.generate(year, month)
