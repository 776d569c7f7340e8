from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from ..attendance.model import AttendanceRecord
from ..core.enums import DayKind


@dataclass(frozen=True)
class AttendanceSummary:
    """Monthly counters shown on the history screen."""

    no_attendance: int = 0
    late: int = 0
    early_leave: int = 0
    permission: int = 0
    leave: int = 0
    missing_check_out: int = 0


@dataclass(frozen=True)
class DayRow:
    """Read-model for one row of the monthly history table."""

    date: str
    display_date: str
    check_in_time: str
    check_out_time: str
    day_kind: DayKind
    check_in: Optional[AttendanceRecord] = None
    check_out: Optional[AttendanceRecord] = None

    @property
    def is_holiday(self) -> bool:
        return self.day_kind == DayKind.HOLIDAY

    @property
    def has_data(self) -> bool:
        return self.check_in is not None or self.check_out is not None


@dataclass(frozen=True)
class MonthReport:
    month: int
    year: int
    rows: List[DayRow] = field(default_factory=list)
    summary: AttendanceSummary = field(default_factory=AttendanceSummary)
