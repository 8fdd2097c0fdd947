from __future__ import annotations

from typing import Iterable

from ...attendance.model import AttendanceRecord
from ...common.validators import as_number
from ...core.constants import PAYABLE_DAYS_PER_MONTH, WORKING_HOURS_PER_DAY
from ...core.enums import AttendanceStatus
from ..model import AttendanceTally, PayAmounts
from .base import PayrollCalculator


class StandardPayrollCalculator(PayrollCalculator):
    """Standard rule: 30 payable days a month, 9 hours a day.

    net = max(0, base - (absent + half/2) * daily + overtime * hourly)

    A half day is credited half a payable day and debited half a deduction day.
    """

    def tally(self, records: Iterable[AttendanceRecord]) -> AttendanceTally:
        present = half = late = absent = off = 0
        overtime = 0.0

        for r in records:
            status = r.status
            if status == AttendanceStatus.PRESENT:
                present += 1
            elif status == AttendanceStatus.HALF_DAY:
                half += 1
            elif status == AttendanceStatus.LATE:
                late += 1
                present += 1
            elif status == AttendanceStatus.ABSENT:
                absent += 1
            elif status == AttendanceStatus.OFF:
                off += 1
            overtime += as_number(r.overtime_hours)

        return AttendanceTally(
            present=present,
            half=half,
            late=late,
            absent=absent,
            off=off,
            overtime_hours=overtime,
        )

    def amounts(self, base_salary: float, tally: AttendanceTally) -> PayAmounts:
        base = as_number(base_salary)
        daily_rate = base / PAYABLE_DAYS_PER_MONTH
        hourly_rate = daily_rate / WORKING_HOURS_PER_DAY

        payable_days = tally.present + tally.half * 0.5
        deduction_days = tally.absent + tally.half * 0.5
        deductions = deduction_days * daily_rate
        overtime_pay = tally.overtime_hours * hourly_rate

        return PayAmounts(
            daily_rate=daily_rate,
            hourly_rate=hourly_rate,
            payable_days=payable_days,
            deduction_days=deduction_days,
            deductions=deductions,
            overtime_pay=overtime_pay,
            gross_pay=base + overtime_pay,
            net_pay=max(0.0, base - deductions + overtime_pay),
        )
