"""Example: use the service layer without Flask.

Goal: controllers are a thin layer, business rules live in services.
"""

from src.shopkeeper.shopkeeper.container import build_container
from src.shopkeeper.shopkeeper.core.enums import AttendanceStatus
from src.shopkeeper.shopkeeper.storage.store import InMemoryStore


class _Settings:
    STORAGE_BACKEND = "memory"
    GEMINI_API_KEY = None


def main():
    container = build_container(_Settings(), store=InMemoryStore())
    container.attendance_service.mark_all("2025-03-03", AttendanceStatus.PRESENT)
    container.attendance_service.mark("2", "2025-03-04", AttendanceStatus.LATE, overtime_hours=2)

    report = container.payroll_service.generate(2025, 3)
    for entry in report.entries:
        print(entry.employee_name, entry.net_pay)
    print("total payout:", report.total_payout)


if __name__ == "__main__":
    main()
