from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import AttendanceType, PunchStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """Entitas domain: satu kali absen (masuk atau pulang).

    ``date`` is the grouping key and is trusted as written; ``timestamp``
    (epoch millis) is only used for ordering.
    """

    record_id: str
    type: AttendanceType
    date: str
    time: str
    location: str
    timestamp: int
    face_verified: bool = True


@dataclass(frozen=True)
class DayPunches:
    """A day's two expected punches; either slot may be empty."""

    check_in: Optional[AttendanceRecord] = None
    check_out: Optional[AttendanceRecord] = None

    @property
    def has_data(self) -> bool:
        return self.check_in is not None or self.check_out is not None


@dataclass(frozen=True)
class PunchResult:
    record: AttendanceRecord
    status: PunchStatus
    note: Optional[str] = None

    @property
    def is_late(self) -> bool:
        return self.status == PunchStatus.LATE
