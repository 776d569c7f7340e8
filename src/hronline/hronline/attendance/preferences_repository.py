from __future__ import annotations

import logging
import threading
from typing import List

from ..core.constants import KEY_ATTENDANCE_LIST, MAX_STORED_RECORDS, PREFS_NAME
from .codec import decode_records, encode_records
from .model import AttendanceRecord
from .repository import AttendanceRepository, PreferencesStore

logger = logging.getLogger(__name__)


class PreferencesAttendanceRepository(AttendanceRepository):
    """Bounded punch list kept as one string value in the host store.

    Only the most recent ``max_records`` appends are retained.
    """

    def __init__(
        self,
        store: PreferencesStore,
        *,
        namespace: str = PREFS_NAME,
        key: str = KEY_ATTENDANCE_LIST,
        max_records: int = MAX_STORED_RECORDS,
    ):
        if max_records < 1:
            raise ValueError("max_records must be positive")
        self._store = store
        self._namespace = namespace
        self._key = key
        self._max_records = int(max_records)
        self._lock = threading.Lock()

    def _read_stored(self) -> List[AttendanceRecord]:
        return decode_records(self._store.get(self._namespace, self._key) or "")

    def append(self, record: AttendanceRecord) -> None:
        with self._lock:
            # Trim by position, so the load must keep stored (append) order.
            existing = self._read_stored()
            existing.append(record)

            if len(existing) > self._max_records:
                dropped = len(existing) - self._max_records
                existing = existing[-self._max_records:]
                logger.debug("Trimmed %d oldest attendance entries", dropped)

            self._store.put(self._namespace, self._key, encode_records(existing))

        logger.info("Stored %s %s at %s %s", record.type.value, record.record_id, record.date, record.time)

    def load_all(self) -> List[AttendanceRecord]:
        records = self._read_stored()
        records.sort(key=lambda r: r.timestamp, reverse=True)
        return records
