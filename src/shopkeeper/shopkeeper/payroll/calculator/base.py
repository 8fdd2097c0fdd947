from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable

from ...attendance.model import AttendanceRecord
from ...common.validators import round_half_up
from ...employees.model import Employee
from ..model import AttendanceTally, PayAmounts, PayrollEntry


class PayrollCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll).

    The payroll engine and the dashboard estimator both go through the same
    calculator so their numbers reconcile.
    """

    @abstractmethod
    def tally(self, records: Iterable[AttendanceRecord]) -> AttendanceTally:
        raise NotImplementedError

    @abstractmethod
    def amounts(self, base_salary: float, tally: AttendanceTally) -> PayAmounts:
        raise NotImplementedError

    def build_entry(self, employee: Employee, records: Iterable[AttendanceRecord]) -> PayrollEntry:
        t = self.tally(records)
        a = self.amounts(employee.base_salary, t)
        return PayrollEntry(
            employee_id=employee.employee_id,
            employee_name=employee.name,
            present_days=t.present + t.late,
            absent_days=t.absent,
            half_days=t.half,
            late_days=t.late,
            total_overtime_hours=t.overtime_hours,
            base_salary=employee.base_salary,
            gross_pay=a.gross_pay,
            deductions=a.deductions,
            net_pay=round_half_up(a.net_pay),
            payable_days=a.payable_days,
            deduction_days=a.deduction_days,
        )
