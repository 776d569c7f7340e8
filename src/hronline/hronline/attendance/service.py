from __future__ import annotations

import logging
from datetime import datetime
from typing import Dict, Iterable, List, Mapping, Optional

from ..common.datetime_utils import (
    DEFAULT_CONVENTIONS,
    DateConventions,
    clock_of,
    epoch_millis,
    format_date,
    format_time,
    now_local,
    parse_date,
)
from ..common.validators import require_non_empty, require_no_separators
from ..core.enums import AttendanceType
from ..reports.calculator.base import SummaryCalculator
from ..reports.calculator.standard_calculator import StandardSummaryCalculator
from ..reports.model import AttendanceSummary
from .factory import AttendanceStrategyFactory
from .model import AttendanceRecord, DayPunches, PunchResult
from .policy import WorkdayPolicy
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class AttendanceService:
    def __init__(
        self,
        attendance: AttendanceRepository,
        *,
        strategy_factory: AttendanceStrategyFactory | None = None,
        calculator: SummaryCalculator | None = None,
        conventions: DateConventions = DEFAULT_CONVENTIONS,
    ):
        self._attendance = attendance
        self._factory = strategy_factory or AttendanceStrategyFactory()
        self._calculator = calculator or StandardSummaryCalculator(self._factory)
        self._conventions = conventions

    @property
    def policy(self) -> WorkdayPolicy:
        return self._factory.policy

    @property
    def conventions(self) -> DateConventions:
        return self._conventions

    def today_string(self, *, now: datetime | None = None) -> str:
        return format_date(now or now_local(), self._conventions)

    def record_punch(
        self,
        attendance_type: AttendanceType,
        *,
        location: str,
        face_verified: bool = True,
        now: datetime | None = None,
    ) -> PunchResult:
        now = now or now_local()
        location = require_non_empty(location, "Lokasi")
        require_no_separators(location, "Lokasi")

        millis = epoch_millis(now)
        record = AttendanceRecord(
            record_id=self._next_record_id(millis),
            type=attendance_type,
            date=format_date(now, self._conventions),
            time=format_time(now, self._conventions),
            location=location,
            timestamp=millis,
            face_verified=bool(face_verified),
        )
        self._attendance.append(record)

        hour, minute = clock_of(now)
        decision = self._factory.decide(attendance_type, hour=hour, minute=minute)
        return PunchResult(record=record, status=decision.status, note=decision.note)

    def _next_record_id(self, millis: int) -> str:
        # Two punches in the same millisecond get "<millis>-1", "<millis>-2", ...
        taken = {r.record_id for r in self._attendance.load_all()}
        candidate = str(millis)
        suffix = 0
        while candidate in taken:
            suffix += 1
            candidate = f"{millis}-{suffix}"
        return candidate

    def history(self) -> List[AttendanceRecord]:
        return list(self._attendance.load_all())

    def today(self, *, now: datetime | None = None) -> List[AttendanceRecord]:
        today = self.today_string(now=now)
        return [r for r in self.history() if r.date == today]

    def last_check_in(self) -> Optional[AttendanceRecord]:
        for record in self.history():
            if record.type == AttendanceType.CHECK_IN:
                return record
        return None

    def can_check_out(self, *, now: datetime | None = None) -> bool:
        """True when today has a check-in and no check-out yet."""
        records = self.today(now=now)
        has_check_in = any(r.type == AttendanceType.CHECK_IN for r in records)
        has_check_out = any(r.type == AttendanceType.CHECK_OUT for r in records)
        return has_check_in and not has_check_out

    def check_out_allowed(self, *, now: datetime | None = None) -> bool:
        """Advisory clock gate for the check-out button; the store never enforces it."""
        hour, minute = clock_of(now or now_local())
        return self.policy.check_out_allowed(hour, minute)

    def by_month(self, month: int, year: int) -> List[AttendanceRecord]:
        out: List[AttendanceRecord] = []
        for record in self.history():
            parsed = parse_date(record.date, self._conventions)
            if parsed is None:
                logger.debug("Ignoring record %s with unreadable date %r", record.record_id, record.date)
                continue
            if parsed.month == month and parsed.year == year:
                out.append(record)
        return out

    def group_by_date(self, records: Iterable[AttendanceRecord]) -> Dict[str, DayPunches]:
        """Pair check-in/check-out per date string.

        When a date has several punches of one type, the newest timestamp is kept.
        """
        grouped: Dict[str, DayPunches] = {}
        for record in records:
            current = grouped.get(record.date, DayPunches())
            if record.type == AttendanceType.CHECK_IN:
                if current.check_in is None or record.timestamp > current.check_in.timestamp:
                    current = DayPunches(check_in=record, check_out=current.check_out)
            else:
                if current.check_out is None or record.timestamp > current.check_out.timestamp:
                    current = DayPunches(check_in=current.check_in, check_out=record)
            grouped[record.date] = current
        return grouped

    def summarize(self, grouped: Mapping[str, DayPunches]) -> AttendanceSummary:
        return self._calculator.summarize(grouped)
