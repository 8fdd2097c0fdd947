from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Closed set of daily attendance statuses."""

    PRESENT = "PRESENT"
    ABSENT = "ABSENT"
    HALF_DAY = "HALF_DAY"
    LATE = "LATE"  # present for pay purposes, flagged
    OFF = "OFF"  # weekend / holiday
