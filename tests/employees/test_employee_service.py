import pytest

from src.shopkeeper.shopkeeper.core.constants import EMPLOYEES_KEY
from src.shopkeeper.shopkeeper.core.exceptions import NotFoundError, ValidationError
from src.shopkeeper.shopkeeper.employees.model import SAMPLE_EMPLOYEES
from src.shopkeeper.shopkeeper.employees.service import EmployeeService
from src.shopkeeper.shopkeeper.employees.store_employee_repository import StoreEmployeeRepository
from src.shopkeeper.shopkeeper.storage.store import InMemoryStore


@pytest.fixture
def service(employees_repo):
    return EmployeeService(employees_repo)


def test_empty_store_is_seeded_with_sample_staff():
    store = InMemoryStore()
    repo = StoreEmployeeRepository(store)

    names = [e.name for e in repo.list_all()]

    assert names == [e.name for e in SAMPLE_EMPLOYEES]
    assert len(store.get(EMPLOYEES_KEY)) == 3


def test_existing_empty_collection_is_not_reseeded():
    store = InMemoryStore({EMPLOYEES_KEY: []})
    assert StoreEmployeeRepository(store).list_all() == []


def test_create_assigns_id_and_defaults(service, fixed_today, monkeypatch):
    monkeypatch.setattr(
        "src.shopkeeper.shopkeeper.employees.service.today_local", lambda: fixed_today
    )

    emp = service.create(name="  Neha ", role="Cashier", base_salary="15000")

    assert emp.employee_id
    assert emp.name == "Neha"
    assert emp.base_salary == 15000
    assert emp.joining_date == "2025-03-15"
    assert emp.is_active is True
    assert service.get(emp.employee_id) == emp


@pytest.mark.parametrize("salary", [-1, "abc", None, float("nan")])
def test_create_rejects_bad_salary(service, salary):
    with pytest.raises(ValidationError):
        service.create(name="X", base_salary=salary)


def test_create_requires_name(service):
    with pytest.raises(ValidationError):
        service.create(name="   ", base_salary=100)


def test_update_keeps_id_and_changes_fields(service):
    emp = service.create(name="Neha", base_salary=15000, joining_date="2024-01-01")

    updated = service.update(emp.employee_id, base_salary=16000, role="Senior Cashier")

    assert updated.employee_id == emp.employee_id
    assert updated.base_salary == 16000
    assert updated.role == "Senior Cashier"
    assert updated.name == "Neha"
    assert len(service.list_employees()) == 1


def test_update_unknown_employee(service):
    with pytest.raises(NotFoundError):
        service.update("missing", name="X")


def test_set_active_and_active_filter(service):
    a = service.create(name="A", base_salary=1)
    service.create(name="B", base_salary=1)

    service.set_active(a.employee_id, is_active=False)

    assert [e.name for e in service.list_employees(active_only=True)] == ["B"]
    assert len(service.list_employees()) == 2


def test_delete(service):
    emp = service.create(name="A", base_salary=1)
    service.delete(emp.employee_id)

    assert service.list_employees() == []
    with pytest.raises(NotFoundError):
        service.delete(emp.employee_id)


def test_search_matches_name_or_role(service):
    service.create(name="Rahul Kumar", role="Sales Manager", base_salary=1)
    service.create(name="Priya", role="Cashier", base_salary=1)

    assert [e.name for e in service.search("kumar")] == ["Rahul Kumar"]
    assert [e.name for e in service.search("CASH")] == ["Priya"]
    assert len(service.search("")) == 2


def test_require_known(service):
    emp = service.create(name="A", base_salary=1)

    assert service.require_known([emp.employee_id]) == [emp.employee_id]
    with pytest.raises(ValidationError):
        service.require_known([emp.employee_id, "ghost"])


def test_unreadable_employee_entries_survive_writes():
    odd = {"name": "no id here", "baseSalary": 100}
    store = InMemoryStore({EMPLOYEES_KEY: [odd]})
    repo = StoreEmployeeRepository(store)

    EmployeeService(repo).create(name="Ravi", role="Helper", phone="1", base_salary=9000)

    stored = store.get(EMPLOYEES_KEY)
    assert odd in stored
    assert [e.name for e in repo.list_all()] == ["Ravi"]


@pytest.mark.parametrize(
    "raw, expected",
    [("false", False), ("False", False), ("0", False), (0, False), ("true", True), (None, True), ("junk", True)],
)
def test_is_active_is_read_permissively(raw, expected):
    store = InMemoryStore({EMPLOYEES_KEY: [{"id": "e1", "name": "Ravi", "isActive": raw}]})

    (emp,) = StoreEmployeeRepository(store).list_all()

    assert emp.is_active is expected
