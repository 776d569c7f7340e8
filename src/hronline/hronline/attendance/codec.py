"""Flat line codec for attendance records.

One record per line: ``id|TYPE|date|time|location|timestamp|faceVerified``.
Lines written before face verification existed have six fields and decode
with ``face_verified=True``. Nothing is escaped.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from ..common.validators import parse_plain_int
from ..core.constants import FIELD_SEPARATOR, RECORD_SEPARATOR
from ..core.enums import AttendanceType
from .model import AttendanceRecord

logger = logging.getLogger(__name__)


def encode_record(record: AttendanceRecord) -> str:
    return FIELD_SEPARATOR.join(
        [
            record.record_id,
            record.type.value,
            record.date,
            record.time,
            record.location,
            str(int(record.timestamp)),
            "true" if record.face_verified else "false",
        ]
    )


def decode_record(line: str) -> Optional[AttendanceRecord]:
    """Decode one line; returns None for anything that is not a valid record."""
    parts = line.split(FIELD_SEPARATOR)
    if len(parts) not in (6, 7):
        return None

    try:
        record_type = AttendanceType(parts[1])
    except ValueError:
        return None

    timestamp = parse_plain_int(parts[5])
    if timestamp is None:
        return None

    face_verified = parts[6].strip().lower() == "true" if len(parts) == 7 else True

    return AttendanceRecord(
        record_id=parts[0],
        type=record_type,
        date=parts[2],
        time=parts[3],
        location=parts[4],
        timestamp=timestamp,
        face_verified=face_verified,
    )


def encode_records(records: Iterable[AttendanceRecord]) -> str:
    return RECORD_SEPARATOR.join(encode_record(r) for r in records)


def decode_records(value: str) -> List[AttendanceRecord]:
    """Decode a stored value, keeping stored order and dropping bad chunks."""
    if not value:
        return []

    records: List[AttendanceRecord] = []
    for chunk in value.split(RECORD_SEPARATOR):
        record = decode_record(chunk)
        if record is None:
            logger.debug("Skipping undecodable attendance entry: %r", chunk)
            continue
        records.append(record)
    return records
