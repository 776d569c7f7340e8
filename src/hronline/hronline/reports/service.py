from __future__ import annotations

from datetime import date
from typing import List, Mapping, Tuple

from ..attendance.model import DayPunches
from ..attendance.service import AttendanceService
from ..common.datetime_utils import format_date_display, is_weekend, parse_date, time_part
from ..common.validators import require_month
from ..core.constants import EMPTY_TIME_PLACEHOLDER
from ..core.enums import DayKind
from .model import DayRow, MonthReport


class MonthlyReportService:
    """Builds the monthly history view: one row per date plus the summary counters."""

    def __init__(self, attendance: AttendanceService):
        self._attendance = attendance

    def build_month_report(self, *, month: int, year: int) -> MonthReport:
        month = require_month(month)
        records = self._attendance.by_month(month, int(year))
        grouped = self._attendance.group_by_date(records)

        return MonthReport(
            month=month,
            year=int(year),
            rows=self.build_rows(grouped),
            summary=self._attendance.summarize(grouped),
        )

    def build_rows(self, grouped: Mapping[str, DayPunches]) -> List[DayRow]:
        conventions = self._attendance.conventions

        def sort_key(item: Tuple[str, DayPunches]):
            parsed = parse_date(item[0], conventions)
            return (parsed is not None, parsed or date.min)

        rows: List[DayRow] = []
        for date_text, punches in sorted(grouped.items(), key=sort_key, reverse=True):
            holiday = not punches.has_data and is_weekend(date_text, conventions)
            rows.append(
                DayRow(
                    date=date_text,
                    display_date=format_date_display(date_text, conventions),
                    check_in_time=time_part(punches.check_in.time) if punches.check_in else EMPTY_TIME_PLACEHOLDER,
                    check_out_time=time_part(punches.check_out.time) if punches.check_out else EMPTY_TIME_PLACEHOLDER,
                    day_kind=DayKind.HOLIDAY if holiday else DayKind.WORKDAY,
                    check_in=punches.check_in,
                    check_out=punches.check_out,
                )
            )
        return rows
