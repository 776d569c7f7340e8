from __future__ import annotations

from dataclasses import dataclass
from datetime import time

from ..core.constants import DEFAULT_WORK_END, DEFAULT_WORK_START


def parse_hhmm(value: str) -> time:
    hour, minute = value.strip().split(":")
    return time(int(hour), int(minute))


@dataclass(frozen=True)
class WorkdayPolicy:
    """Workday window used for lateness, early leave and the check-out gate."""

    work_start: time = parse_hhmm(DEFAULT_WORK_START)
    work_end: time = parse_hhmm(DEFAULT_WORK_END)

    @classmethod
    def from_strings(cls, work_start: str, work_end: str) -> "WorkdayPolicy":
        return cls(work_start=parse_hhmm(work_start), work_end=parse_hhmm(work_end))

    def is_late(self, hour: int, minute: int) -> bool:
        """Strictly after the start of the workday."""
        start = self.work_start
        return hour > start.hour or (hour == start.hour and minute > start.minute)

    def is_early_leave(self, hour: int, minute: int) -> bool:
        # Only the hour is compared: 16:59 is early, 17:00 and 17:30 are not.
        return hour < self.work_end.hour

    def check_out_allowed(self, hour: int, minute: int) -> bool:
        return hour >= self.work_end.hour
