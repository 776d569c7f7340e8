from __future__ import annotations

from ...core.enums import PunchStatus
from ..policy import WorkdayPolicy
from .base import AttendanceStrategy, StatusDecision


class EarlyLeaveStrategy(AttendanceStrategy):
    """Check-out before the end of the workday."""

    def decide_checkin(self, *, hour: int, minute: int, policy: WorkdayPolicy) -> StatusDecision:
        return StatusDecision(status=PunchStatus.UNKNOWN)

    def decide_checkout(self, *, hour: int, minute: int, policy: WorkdayPolicy) -> StatusDecision:
        return StatusDecision(status=PunchStatus.EARLY_LEAVE, note="Pulang awal")
