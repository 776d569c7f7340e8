from __future__ import annotations

from dataclasses import dataclass

from .attendance.factory import AttendanceStrategyFactory
from .attendance.policy import WorkdayPolicy
from .attendance.preferences_repository import PreferencesAttendanceRepository
from .attendance.repository import PreferencesStore
from .attendance.service import AttendanceService
from .common.datetime_utils import DEFAULT_CONVENTIONS, DateConventions
from .core.constants import MAX_STORED_RECORDS
from .database.connection import DatabaseConnection, DBConfig
from .reports.service import MonthlyReportService
from .storage.memory_preferences import InMemoryPreferencesStore
from .storage.mysql_preferences import MySQLPreferencesStore


@dataclass(frozen=True)
class Container:
    store: PreferencesStore
    attendance_repo: PreferencesAttendanceRepository

    attendance_service: AttendanceService
    monthly_report_service: MonthlyReportService


def build_store(*, backend: str, db_config: dict | None = None) -> PreferencesStore:
    backend = (backend or "memory").lower()
    if backend == "memory":
        return InMemoryPreferencesStore.get_instance()
    if backend == "mysql":
        if not db_config:
            raise ValueError("DB_CONFIG is required for the mysql backend")
        return MySQLPreferencesStore(DatabaseConnection.get_instance(DBConfig.from_dict(db_config)))
    raise ValueError(f"Unknown store backend: {backend}")


def build_container(
    *,
    store: PreferencesStore,
    policy: WorkdayPolicy | None = None,
    max_records: int = MAX_STORED_RECORDS,
    conventions: DateConventions = DEFAULT_CONVENTIONS,
) -> Container:
    attendance_repo = PreferencesAttendanceRepository(store, max_records=max_records)
    attendance_service = AttendanceService(
        attendance_repo,
        strategy_factory=AttendanceStrategyFactory(policy or WorkdayPolicy()),
        conventions=conventions,
    )
    monthly_report_service = MonthlyReportService(attendance_service)

    return Container(
        store=store,
        attendance_repo=attendance_repo,
        attendance_service=attendance_service,
        monthly_report_service=monthly_report_service,
    )
