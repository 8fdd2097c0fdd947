from datetime import date

import pytest

from src.shopkeeper.shopkeeper.core.enums import AttendanceStatus
from src.shopkeeper.shopkeeper.dashboard.service import DashboardService, estimate_month_to_date
from src.shopkeeper.shopkeeper.payroll.service import compute_payroll
from tests.factories import make_employee, make_record, month_of


def test_estimate_matches_payroll_once_month_is_complete(scenario_a_statuses):
    employees = [make_employee("e1", base_salary=18000), make_employee("e2", base_salary=27000)]
    records = month_of("e1", 2025, 3, scenario_a_statuses, overtime={2: 9}) + month_of(
        "e2", 2025, 3, [AttendanceStatus.ABSENT] * 3 + [AttendanceStatus.PRESENT] * 27
    )

    entries = compute_payroll(employees, records, 2025, 3)
    estimate = estimate_month_to_date(employees, records, date(2025, 3, 31))

    # e1: 18000 - 3600 + 9 * 600 / 9 = 15000; e2: 27000 - 2700
    assert estimate == pytest.approx(15000 + 24300)
    assert estimate == pytest.approx(sum(e.net_pay for e in entries))


def test_estimate_ignores_future_and_other_months():
    emp = make_employee(base_salary=3000)
    records = [
        make_record("e1", "2025-02-27", AttendanceStatus.ABSENT),
        make_record("e1", "2025-03-10", AttendanceStatus.ABSENT),
        make_record("e1", "2025-03-15", AttendanceStatus.ABSENT),
        make_record("e1", "2025-03-16", AttendanceStatus.ABSENT),
    ]

    assert estimate_month_to_date([emp], records, date(2025, 3, 15)) == pytest.approx(2800)


def test_estimate_includes_inactive_employees():
    employees = [make_employee("e1", base_salary=3000), make_employee("e2", base_salary=6000, is_active=False)]

    assert estimate_month_to_date(employees, [], date(2025, 3, 1)) == pytest.approx(9000)


def test_estimate_floors_each_employee_at_zero():
    employees = [make_employee("e1", base_salary=900), make_employee("e2", base_salary=3000)]
    records = month_of("e1", 2025, 1, [AttendanceStatus.ABSENT] * 31)

    assert estimate_month_to_date(employees, records, date(2025, 1, 31)) == pytest.approx(3000)


def test_summary_counts_today(employees_repo, attendance_repo, fixed_today):
    for i in range(1, 5):
        employees_repo.save(make_employee(f"e{i}", base_salary=3000))
    today = fixed_today.isoformat()
    attendance_repo.upsert(make_record("e1", today, AttendanceStatus.PRESENT))
    attendance_repo.upsert(make_record("e2", today, AttendanceStatus.HALF_DAY))
    attendance_repo.upsert(make_record("e3", today, AttendanceStatus.ABSENT))

    stats = DashboardService(employees_repo, attendance_repo).summary(today=fixed_today)

    assert stats.total_staff == 4
    assert stats.present_today == 2
    assert stats.pending_attendance == 1
    # e2: half day -> 50 off, e3: absent -> 100 off
    assert stats.estimated_payroll == 12000 - 150
    assert stats.to_dict()["today"] == "2025-03-15"


def test_pending_ignores_records_of_removed_staff(employees_repo, attendance_repo, fixed_today):
    employees_repo.save(make_employee("e1", base_salary=3000))
    employees_repo.save(make_employee("e2", base_salary=3000))
    today = fixed_today.isoformat()
    attendance_repo.upsert(make_record("gone", today, AttendanceStatus.PRESENT))
    attendance_repo.upsert(make_record("e1", today, AttendanceStatus.PRESENT))

    stats = DashboardService(employees_repo, attendance_repo).summary(today=fixed_today)

    assert stats.present_today == 1
    assert stats.pending_attendance == 1
