from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class AttendanceTally:
    """Per-employee counters for one month.

    `present` already includes LATE days; `late` is the flagged subset.
    `off` is not pay-relevant and only kept so the counts add up.
    """

    present: int = 0
    half: int = 0
    late: int = 0
    absent: int = 0
    off: int = 0
    overtime_hours: float = 0.0

    @property
    def record_count(self) -> int:
        return (self.present - self.late) + self.half + self.late + self.absent + self.off


@dataclass(frozen=True)
class PayAmounts:
    """Unrounded money figures derived from a tally."""

    daily_rate: float
    hourly_rate: float
    payable_days: float
    deduction_days: float
    deductions: float
    overtime_pay: float
    gross_pay: float
    net_pay: float


@dataclass(frozen=True)
class PayrollEntry:
    """One employee's computed pay for one month. Derived, never stored."""

    employee_id: str
    employee_name: str
    present_days: int
    absent_days: int
    half_days: int
    late_days: int
    total_overtime_hours: float
    base_salary: float
    gross_pay: float
    deductions: float
    net_pay: int
    payable_days: float = 0.0
    deduction_days: float = 0.0

    @property
    def overtime_pay(self) -> float:
        return self.gross_pay - self.base_salary

    def to_dict(self) -> dict:
        return {
            "employeeId": self.employee_id,
            "employeeName": self.employee_name,
            "presentDays": self.present_days,
            "absentDays": self.absent_days,
            "halfDays": self.half_days,
            "lateDays": self.late_days,
            "totalOvertimeHours": self.total_overtime_hours,
            "baseSalary": self.base_salary,
            "grossPay": self.gross_pay,
            "overtimePay": self.overtime_pay,
            "deductions": self.deductions,
            "netPay": self.net_pay,
            "payableDays": self.payable_days,
            "deductionDays": self.deduction_days,
        }
