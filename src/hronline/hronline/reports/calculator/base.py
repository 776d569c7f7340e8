from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Mapping

from ...attendance.model import DayPunches
from ..model import AttendanceSummary


class SummaryCalculator(ABC):
    """Calculator interface (Strategy Pattern for monthly summaries)."""

    @abstractmethod
    def summarize(self, grouped: Mapping[str, DayPunches]) -> AttendanceSummary:
        raise NotImplementedError
