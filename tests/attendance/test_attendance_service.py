import pytest

from src.shopkeeper.shopkeeper.attendance.model import DayMark
from src.shopkeeper.shopkeeper.attendance.service import AttendanceService
from src.shopkeeper.shopkeeper.core.enums import AttendanceStatus
from src.shopkeeper.shopkeeper.core.exceptions import ValidationError
from tests.factories import make_employee


@pytest.fixture
def service(employees_repo, attendance_repo):
    employees_repo.save(make_employee("e1", name="Rahul"))
    employees_repo.save(make_employee("e2", name="Priya"))
    employees_repo.save(make_employee("e3", name="Amit", is_active=False))
    return AttendanceService(attendance_repo, employees_repo)


def test_mark_replaces_existing_day(service, attendance_repo):
    first = service.mark("e1", "2025-03-01", "present", overtime_hours=2)
    second = service.mark("e1", "2025-03-01", AttendanceStatus.HALF_DAY)

    records = attendance_repo.list_all()
    assert len(records) == 1
    assert records[0].status == AttendanceStatus.HALF_DAY
    assert records[0].overtime_hours == 0
    assert records[0].record_id == second.record_id != first.record_id


def test_mark_rejects_unknown_status_and_bad_date(service):
    with pytest.raises(ValidationError):
        service.mark("e1", "2025-03-01", "SICK")
    with pytest.raises(ValidationError):
        service.mark("e1", "01/03/2025", AttendanceStatus.PRESENT)


def test_mark_accepts_missing_overtime(service):
    rec = service.mark("e1", "2025-03-01", AttendanceStatus.PRESENT, overtime_hours=None)
    assert rec.overtime_hours == 0


def test_mark_all_defaults_to_active_employees(service, attendance_repo):
    service.mark_all("2025-03-01", AttendanceStatus.PRESENT)

    marked = {r.employee_id for r in attendance_repo.list_all()}
    assert marked == {"e1", "e2"}


def test_mark_all_keeps_overtime_of_existing_marks(service, attendance_repo):
    service.mark("e1", "2025-03-01", AttendanceStatus.ABSENT, overtime_hours=4)

    service.mark_all("2025-03-01", AttendanceStatus.PRESENT, employee_ids=["e1", "e3"])

    rec = attendance_repo.get_for_employee_and_date("e1", "2025-03-01")
    assert rec.status == AttendanceStatus.PRESENT
    assert rec.overtime_hours == 4
    assert attendance_repo.get_for_employee_and_date("e3", "2025-03-01") is not None


def test_save_day_and_stats(service):
    service.save_day(
        "2025-03-01",
        [
            DayMark("e1", AttendanceStatus.LATE, 1.0),
            DayMark("e2", AttendanceStatus.HALF_DAY),
            DayMark("e3", AttendanceStatus.ABSENT, notes="sick"),
        ],
    )

    stats = service.day_stats("2025-03-01")
    sheet = {r.employee_id: r for r in service.day_sheet("2025-03-01")}

    assert (stats.present, stats.absent, stats.half) == (1, 1, 1)
    assert sheet["e1"].overtime_hours == 1.0
    assert sheet["e3"].notes == "sick"


def test_day_sheet_lists_unmarked_employees(service):
    sheet = service.day_sheet("2025-03-02")

    assert [r.employee_name for r in sheet] == ["Rahul", "Priya", "Amit"]
    assert all(r.status is None for r in sheet)


def test_history_validates_bounds(service):
    with pytest.raises(ValidationError):
        service.history(start="yesterday")
