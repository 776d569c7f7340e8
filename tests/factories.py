from __future__ import annotations

from hronline.attendance.model import AttendanceRecord
from hronline.core.enums import AttendanceType


def make_record(
    record_id: str,
    *,
    type: AttendanceType = AttendanceType.CHECK_IN,
    date: str = "3 Mei 2025",
    time: str = "08:00 WIB",
    location: str = "Jl. Thamrin, Jakarta",
    timestamp: int = 0,
    face_verified: bool = True,
) -> AttendanceRecord:
    return AttendanceRecord(
        record_id=record_id,
        type=type,
        date=date,
        time=time,
        location=location,
        timestamp=timestamp,
        face_verified=face_verified,
    )
