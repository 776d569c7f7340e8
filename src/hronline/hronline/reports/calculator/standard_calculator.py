from __future__ import annotations

from typing import Mapping, Optional

from ...attendance.factory import AttendanceStrategyFactory
from ...attendance.model import DayPunches
from ...common.datetime_utils import parse_clock
from ...core.enums import AttendanceType, PunchStatus
from ..model import AttendanceSummary
from .base import SummaryCalculator


class StandardSummaryCalculator(SummaryCalculator):
    """Standard rule, evaluated per day in this order:

    - no punches at all -> no attendance
    - check-in without check-out -> missing check-out (lateness is not checked)
    - both punches -> late and/or early leave
    - check-out only -> not counted

    Permission and leave come from outside this store and stay 0.
    """

    def __init__(self, strategy_factory: Optional[AttendanceStrategyFactory] = None):
        self._factory = strategy_factory or AttendanceStrategyFactory()

    def _status(self, attendance_type: AttendanceType, time_text: str) -> PunchStatus:
        hour, minute = parse_clock(time_text)
        return self._factory.decide(attendance_type, hour=hour, minute=minute).status

    def summarize(self, grouped: Mapping[str, DayPunches]) -> AttendanceSummary:
        no_attendance = 0
        late = 0
        early_leave = 0
        missing_check_out = 0

        for punches in grouped.values():
            check_in, check_out = punches.check_in, punches.check_out

            if check_in is None and check_out is None:
                no_attendance += 1
            elif check_in is not None and check_out is None:
                missing_check_out += 1
            elif check_in is not None and check_out is not None:
                if self._status(AttendanceType.CHECK_IN, check_in.time) == PunchStatus.LATE:
                    late += 1
                if self._status(AttendanceType.CHECK_OUT, check_out.time) == PunchStatus.EARLY_LEAVE:
                    early_leave += 1

        return AttendanceSummary(
            no_attendance=no_attendance,
            late=late,
            early_leave=early_leave,
            missing_check_out=missing_check_out,
        )
