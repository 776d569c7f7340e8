from __future__ import annotations

from ...core.enums import PunchStatus
from ..policy import WorkdayPolicy
from .base import AttendanceStrategy, StatusDecision


class LateStrategy(AttendanceStrategy):
    """Check-in after the start of the workday."""

    def decide_checkin(self, *, hour: int, minute: int, policy: WorkdayPolicy) -> StatusDecision:
        start = policy.work_start
        late_minutes = (hour * 60 + minute) - (start.hour * 60 + start.minute)
        return StatusDecision(status=PunchStatus.LATE, note=f"Terlambat {late_minutes} menit")

    def decide_checkout(self, *, hour: int, minute: int, policy: WorkdayPolicy) -> StatusDecision:
        return StatusDecision(status=PunchStatus.UNKNOWN)
