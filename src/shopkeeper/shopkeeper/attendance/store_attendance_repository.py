from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Callable, Iterable, Optional, Sequence

from ..common.datetime_utils import try_parse_iso_date
from ..common.ids import generate_id
from ..core.constants import ATTENDANCE_KEY
from ..core.enums import AttendanceStatus
from ..storage.store import Store
from .model import AttendanceRecord
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


def normalize_work_date(work_date: str) -> str:
    """Canonical YYYY-MM-DD form when the value parses, else the value as given."""
    parsed = try_parse_iso_date(work_date)
    return parsed.isoformat() if parsed is not None else work_date


def _index_of(records: list[AttendanceRecord], employee_id: str, work_date: str) -> int:
    day = normalize_work_date(work_date)
    for i, r in enumerate(records):
        if r.employee_id == employee_id and normalize_work_date(r.work_date) == day:
            return i
    return -1


class StoreAttendanceRepository(AttendanceRepository):
    """Attendance Store on top of a key-value Store.

    Upsert is replace-not-merge: the candidate record, id included, takes the
    slot of any record with the same (employee_id, work_date). Callers must not
    hold on to record ids across an upsert.

    Stored entries that cannot be read are left untouched and written back
    as they were.
    """

    def __init__(self, store: Store, *, id_factory: Callable[[], str] = generate_id):
        self._store = store
        self._new_id = id_factory

    def _load_with_unreadable(self) -> tuple[list[AttendanceRecord], list[Any]]:
        records, unreadable = [], []
        for item in self._store.get(ATTENDANCE_KEY) or []:
            rec = AttendanceRecord.from_dict(item) if isinstance(item, dict) else None
            if rec is None:
                logger.warning("Skipping malformed attendance entry: %r", item)
                unreadable.append(item)
                continue
            records.append(rec)
        return records, unreadable

    def _load(self) -> list[AttendanceRecord]:
        return self._load_with_unreadable()[0]

    def _write(self, records: Iterable[AttendanceRecord], unreadable: Sequence[Any]) -> None:
        self._store.put(ATTENDANCE_KEY, [r.to_dict() for r in records] + list(unreadable))

    def list_all(self) -> Sequence[AttendanceRecord]:
        return self._load()

    def get_for_employee_and_date(self, employee_id: str, work_date: str) -> Optional[AttendanceRecord]:
        records = self._load()
        i = _index_of(records, employee_id, work_date)
        return records[i] if i != -1 else None

    def upsert(self, record: AttendanceRecord) -> None:
        record = replace(record, work_date=normalize_work_date(record.work_date))
        records, unreadable = self._load_with_unreadable()
        i = _index_of(records, record.employee_id, record.work_date)
        if i != -1:
            records[i] = record
        else:
            records.append(record)
        self._write(records, unreadable)

    def bulk_upsert(
        self,
        work_date: str,
        employee_ids: Iterable[str],
        status: AttendanceStatus,
    ) -> Sequence[AttendanceRecord]:
        work_date = normalize_work_date(work_date)
        records, unreadable = self._load_with_unreadable()
        for employee_id in employee_ids:
            i = _index_of(records, employee_id, work_date)
            if i != -1:
                prior = records[i]
                records[i] = AttendanceRecord(
                    record_id=prior.record_id,
                    employee_id=employee_id,
                    work_date=work_date,
                    status=status,
                    overtime_hours=prior.overtime_hours,
                )
            else:
                records.append(
                    AttendanceRecord(
                        record_id=self._new_id(),
                        employee_id=employee_id,
                        work_date=work_date,
                        status=status,
                        overtime_hours=0.0,
                    )
                )
        self._write(records, unreadable)
        return records

    def query(
        self,
        *,
        employee_id: Optional[str] = None,
        start: Optional[str] = None,
        end: Optional[str] = None,
    ) -> Sequence[AttendanceRecord]:
        start_d = try_parse_iso_date(start) if start else None
        end_d = try_parse_iso_date(end) if end else None

        out = []
        for r in self._load():
            if employee_id is not None and r.employee_id != employee_id:
                continue
            if start_d or end_d:
                d = try_parse_iso_date(r.work_date)
                if d is None:
                    continue
                if start_d and d < start_d:
                    continue
                if end_d and d > end_d:
                    continue
            out.append(r)
        return out
