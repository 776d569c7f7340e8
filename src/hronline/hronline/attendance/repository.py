from __future__ import annotations

from typing import Protocol, Sequence

from .model import AttendanceRecord


class PreferencesStore(Protocol):
    """Host key/value bag. Missing keys read as an empty string."""

    def get(self, namespace: str, key: str) -> str:
        raise NotImplementedError

    def put(self, namespace: str, key: str, value: str) -> None:
        raise NotImplementedError


class AttendanceRepository(Protocol):
    def append(self, record: AttendanceRecord) -> None:
        raise NotImplementedError

    def load_all(self) -> Sequence[AttendanceRecord]:
        """All stored records, newest ``timestamp`` first."""

        raise NotImplementedError
