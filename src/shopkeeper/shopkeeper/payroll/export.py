from __future__ import annotations

import csv
import io

from ..common.validators import round_half_up
from .service import PayrollReport

CSV_HEADERS = [
    "Employee ID",
    "Name",
    "Base Salary",
    "Present Days",
    "Absent Days",
    "Half Days",
    "OT Hours",
    "OT Pay",
    "Deductions",
    "Net Pay",
]


def _num(value):
    # 18000.0 -> 18000, 1.5 -> 1.5
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def report_rows(report: PayrollReport) -> list[list]:
    return [
        [
            e.employee_id,
            e.employee_name,
            _num(e.base_salary),
            e.present_days,
            e.absent_days,
            e.half_days,
            _num(e.total_overtime_hours),
            round_half_up(e.overtime_pay),
            round_half_up(e.deductions),
            e.net_pay,
        ]
        for e in report.entries
    ]


def report_to_csv(report: PayrollReport) -> str:
    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator="\n")
    writer.writerow(CSV_HEADERS)
    writer.writerows(report_rows(report))
    return buf.getvalue()


def export_filename(report: PayrollReport) -> str:
    return f"payroll_{report.period}.csv"
