from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

from .assistant.service import AssistantService
from .attendance.service import AttendanceService
from .attendance.store_attendance_repository import StoreAttendanceRepository
from .core.constants import DEFAULT_ASSISTANT_MODEL, DEFAULT_ASSISTANT_TIMEOUT_SECONDS
from .dashboard.service import DashboardService
from .database.connection import DatabaseConnection, DBConfig
from .employees.service import EmployeeService
from .employees.store_employee_repository import StoreEmployeeRepository
from .payroll.service import PayrollService
from .storage.json_store import JsonFileStore
from .storage.mysql_store import MySQLStore
from .storage.store import InMemoryStore, Store

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Container:
    store: Store

    employees_repo: StoreEmployeeRepository
    attendance_repo: StoreAttendanceRepository

    employee_service: EmployeeService
    attendance_service: AttendanceService
    payroll_service: PayrollService
    dashboard_service: DashboardService
    assistant_service: AssistantService


def build_store(settings: Any) -> Store:
    backend = str(getattr(settings, "STORAGE_BACKEND", "json")).lower()
    if backend == "memory":
        return InMemoryStore()
    if backend == "mysql":
        return MySQLStore(DatabaseConnection.get_instance(DBConfig.from_dict(settings.DB_CONFIG)))
    if backend == "json":
        return JsonFileStore(getattr(settings, "DATA_DIR", "data"))
    raise ValueError(f"Unknown STORAGE_BACKEND: {backend!r}")


def build_container(settings: Any, *, store: Optional[Store] = None, assistant: Optional[AssistantService] = None) -> Container:
    store = store or build_store(settings)

    employees_repo = StoreEmployeeRepository(store)
    attendance_repo = StoreAttendanceRepository(store)

    employee_service = EmployeeService(employees_repo)
    attendance_service = AttendanceService(attendance_repo, employees_repo)
    payroll_service = PayrollService(employees_repo, attendance_repo)
    dashboard_service = DashboardService(employees_repo, attendance_repo)
    assistant_service = assistant or AssistantService(
        getattr(settings, "GEMINI_API_KEY", None),
        model=getattr(settings, "GEMINI_MODEL", DEFAULT_ASSISTANT_MODEL),
        timeout=float(getattr(settings, "ASSISTANT_TIMEOUT_SECONDS", DEFAULT_ASSISTANT_TIMEOUT_SECONDS)),
    )

    logger.debug("Container built with %s", type(store).__name__)

    return Container(
        store=store,
        employees_repo=employees_repo,
        attendance_repo=attendance_repo,
        employee_service=employee_service,
        attendance_service=attendance_service,
        payroll_service=payroll_service,
        dashboard_service=dashboard_service,
        assistant_service=assistant_service,
    )
