from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from ...core.enums import PunchStatus
from ..policy import WorkdayPolicy


@dataclass(frozen=True)
class StatusDecision:
    status: PunchStatus
    note: Optional[str] = None


class AttendanceStrategy(ABC):
    """Strategy Pattern: encapsulate how we decide a punch status."""

    @abstractmethod
    def decide_checkin(self, *, hour: int, minute: int, policy: WorkdayPolicy) -> StatusDecision:
        raise NotImplementedError

    @abstractmethod
    def decide_checkout(self, *, hour: int, minute: int, policy: WorkdayPolicy) -> StatusDecision:
        raise NotImplementedError
