from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

from ..common.ids import generate_id
from ..common.validators import as_number, require_iso_date
from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError
from ..employees.repository import EmployeeRepository
from .model import AttendanceRecord, DayMark
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DaySheetRow:
    employee_id: str
    employee_name: str
    status: Optional[AttendanceStatus]
    overtime_hours: float
    notes: Optional[str] = None


@dataclass(frozen=True)
class DayStats:
    present: int
    absent: int
    half: int


def coerce_status(value) -> AttendanceStatus:
    if isinstance(value, AttendanceStatus):
        return value
    try:
        return AttendanceStatus(str(value).strip().upper())
    except ValueError:
        allowed = ", ".join(s.value for s in AttendanceStatus)
        raise ValidationError(f"Status must be one of {allowed}") from None


class AttendanceService:
    """Use cases around daily attendance marking.

    Every write ends in the store's upsert, so the one-record-per-day rule is
    enforced in a single place.
    """

    def __init__(self, attendance: AttendanceRepository, employees: EmployeeRepository):
        self._attendance = attendance
        self._employees = employees

    def mark(
        self,
        employee_id: str,
        work_date: str,
        status,
        *,
        overtime_hours=0.0,
        notes: Optional[str] = None,
    ) -> AttendanceRecord:
        """Mark one employee for one day. Builds a fresh record and upserts it."""
        record = AttendanceRecord(
            record_id=generate_id(),
            employee_id=str(employee_id),
            work_date=require_iso_date(work_date, "Date"),
            status=coerce_status(status),
            overtime_hours=as_number(overtime_hours),
            notes=(notes or "").strip() or None,
        )
        self._attendance.upsert(record)
        return record

    def save_day(self, work_date: str, marks: Iterable[DayMark]) -> list[AttendanceRecord]:
        work_date = require_iso_date(work_date, "Date")
        saved = [
            self.mark(m.employee_id, work_date, m.status, overtime_hours=m.overtime_hours, notes=m.notes)
            for m in marks
        ]
        logger.info("Saved %d attendance mark(s) for %s", len(saved), work_date)
        return saved

    def mark_all(
        self,
        work_date: str,
        status,
        *,
        employee_ids: Optional[Iterable[str]] = None,
    ) -> Sequence[AttendanceRecord]:
        """Bulk mark. Defaults to every active employee; keeps existing overtime."""
        work_date = require_iso_date(work_date, "Date")
        status = coerce_status(status)
        if employee_ids is None:
            ids = [e.employee_id for e in self._employees.list_all() if e.is_active]
        else:
            ids = [str(i) for i in employee_ids]
        records = self._attendance.bulk_upsert(work_date, ids, status)
        logger.info("Bulk marked %d employee(s) %s on %s", len(ids), status.value, work_date)
        return records

    def day_sheet(self, work_date: str) -> list[DaySheetRow]:
        work_date = require_iso_date(work_date, "Date")
        by_employee = {r.employee_id: r for r in self._attendance.query(start=work_date, end=work_date)}
        rows = []
        for emp in self._employees.list_all():
            rec = by_employee.get(emp.employee_id)
            rows.append(
                DaySheetRow(
                    employee_id=emp.employee_id,
                    employee_name=emp.name,
                    status=rec.status if rec else None,
                    overtime_hours=rec.overtime_hours if rec else 0.0,
                    notes=rec.notes if rec else None,
                )
            )
        return rows

    def day_stats(self, work_date: str) -> DayStats:
        statuses = [r.status for r in self.day_sheet(work_date) if r.status is not None]
        return DayStats(
            present=sum(1 for s in statuses if s in (AttendanceStatus.PRESENT, AttendanceStatus.LATE)),
            absent=sum(1 for s in statuses if s == AttendanceStatus.ABSENT),
            half=sum(1 for s in statuses if s == AttendanceStatus.HALF_DAY),
        )

    def history(
        self,
        *,
        employee_id: Optional[str] = None,
        start: Optional[str] = None,
        end: Optional[str] = None,
    ) -> Sequence[AttendanceRecord]:
        if start:
            start = require_iso_date(start, "Start date")
        if end:
            end = require_iso_date(end, "End date")
        return self._attendance.query(employee_id=employee_id, start=start, end=end)
