from __future__ import annotations

from enum import Enum


class AttendanceType(str, Enum):
    """Jenis absen: masuk atau pulang."""

    CHECK_IN = "CHECK_IN"
    CHECK_OUT = "CHECK_OUT"


class PunchStatus(str, Enum):
    """Status satu kali absen terhadap jam kerja."""

    ON_TIME = "ON_TIME"
    LATE = "LATE"
    EARLY_LEAVE = "EARLY_LEAVE"
    UNKNOWN = "UNKNOWN"


class DayKind(str, Enum):
    WORKDAY = "Hari Kerja"
    HOLIDAY = "Hari Libur"
