from src.shopkeeper.shopkeeper.core.enums import AttendanceStatus
from src.shopkeeper.shopkeeper.payroll.export import CSV_HEADERS, export_filename, report_to_csv
from src.shopkeeper.shopkeeper.payroll.service import PayrollReport, compute_payroll
from tests.factories import make_employee, month_of


def test_csv_has_header_and_one_row_per_entry(scenario_a_statuses):
    employees = [make_employee("e1", name="Priya Sharma"), make_employee("e2", name="Amit Singh", base_salary=12000)]
    records = month_of("e1", 2025, 3, scenario_a_statuses, overtime={1: 10})
    report = PayrollReport(year=2025, month=3, entries=compute_payroll(employees, records, 2025, 3))

    lines = report_to_csv(report).splitlines()

    assert lines[0] == ",".join(CSV_HEADERS)
    assert lines[1] == "e1,Priya Sharma,18000,26,5,2,10,667,3600,15067"
    assert lines[2] == "e2,Amit Singh,12000,0,0,0,0,0,0,12000"
    assert len(lines) == 3


def test_names_with_commas_are_quoted():
    report = PayrollReport(year=2025, month=3, entries=compute_payroll([make_employee(name="Kumar, Rahul")], [], 2025, 3))

    assert '"Kumar, Rahul"' in report_to_csv(report)


def test_export_filename():
    assert export_filename(PayrollReport(year=2025, month=3, entries=[])) == "payroll_2025-03.csv"
