from __future__ import annotations

from dataclasses import dataclass, field

from ..core.enums import AttendanceType
from .policy import WorkdayPolicy
from .strategies.base import AttendanceStrategy, StatusDecision
from .strategies.early_strategy import EarlyLeaveStrategy
from .strategies.late_strategy import LateStrategy
from .strategies.normal_strategy import NormalStrategy


@dataclass
class AttendanceStrategyFactory:
    """Factory Pattern: choose appropriate strategy based on the workday policy."""

    policy: WorkdayPolicy = field(default_factory=WorkdayPolicy)

    def for_checkin(self, *, hour: int, minute: int) -> AttendanceStrategy:
        if self.policy.is_late(hour, minute):
            return LateStrategy()
        return NormalStrategy()

    def for_checkout(self, *, hour: int, minute: int) -> AttendanceStrategy:
        if self.policy.is_early_leave(hour, minute):
            return EarlyLeaveStrategy()
        return NormalStrategy()

    def decide(self, attendance_type: AttendanceType, *, hour: int, minute: int) -> StatusDecision:
        if attendance_type == AttendanceType.CHECK_IN:
            strategy = self.for_checkin(hour=hour, minute=minute)
            return strategy.decide_checkin(hour=hour, minute=minute, policy=self.policy)

        strategy = self.for_checkout(hour=hour, minute=minute)
        return strategy.decide_checkout(hour=hour, minute=minute, policy=self.policy)
