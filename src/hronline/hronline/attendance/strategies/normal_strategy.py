from __future__ import annotations

from ...core.enums import PunchStatus
from ..policy import WorkdayPolicy
from .base import AttendanceStrategy, StatusDecision


class NormalStrategy(AttendanceStrategy):
    """On-time check-in, normal check-out."""

    def decide_checkin(self, *, hour: int, minute: int, policy: WorkdayPolicy) -> StatusDecision:
        return StatusDecision(status=PunchStatus.ON_TIME)

    def decide_checkout(self, *, hour: int, minute: int, policy: WorkdayPolicy) -> StatusDecision:
        return StatusDecision(status=PunchStatus.ON_TIME)
