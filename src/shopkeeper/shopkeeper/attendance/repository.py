from __future__ import annotations

from typing import Iterable, Optional, Protocol, Sequence

from ..core.enums import AttendanceStatus
from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    """Attendance Store interface.

    Invariant: at most one record per (employee_id, work_date). Writes go
    through `upsert`/`bulk_upsert` only, and both replace instead of append.
    """

    def list_all(self) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def get_for_employee_and_date(self, employee_id: str, work_date: str) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def upsert(self, record: AttendanceRecord) -> None:
        raise NotImplementedError

    def bulk_upsert(
        self,
        work_date: str,
        employee_ids: Iterable[str],
        status: AttendanceStatus,
    ) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def query(
        self,
        *,
        employee_id: Optional[str] = None,
        start: Optional[str] = None,
        end: Optional[str] = None,
    ) -> Sequence[AttendanceRecord]:
        raise NotImplementedError
