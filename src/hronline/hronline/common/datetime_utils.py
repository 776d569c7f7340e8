from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional, Tuple

from ..core.constants import TIME_ZONE_TAG
from .validators import parse_plain_int

MONTH_NAMES_ID: Tuple[str, ...] = (
    "Januari",
    "Februari",
    "Maret",
    "April",
    "Mei",
    "Juni",
    "Juli",
    "Agustus",
    "September",
    "Oktober",
    "November",
    "Desember",
)


@dataclass(frozen=True)
class DateConventions:
    """Textual date/time conventions shared by records and queries.

    Record dates look like ``"3 Mei 2025"`` and record times like ``"08:05 WIB"``.
    The month table is configurable so nothing depends on a system locale.
    """

    month_names: Tuple[str, ...] = MONTH_NAMES_ID
    zone_tag: str = TIME_ZONE_TAG

    def __post_init__(self) -> None:
        if len(self.month_names) != 12:
            raise ValueError(f"Expected 12 month names, got {len(self.month_names)}")

    def month_name(self, month: int) -> str:
        return self.month_names[month - 1]

    def month_number(self, name: str) -> Optional[int]:
        wanted = name.strip().lower()
        for index, candidate in enumerate(self.month_names):
            if candidate.lower() == wanted:
                return index + 1
        return None


DEFAULT_CONVENTIONS = DateConventions()


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def epoch_millis(value: datetime) -> int:
    return int(value.timestamp() * 1000)


def format_date(value: date, conventions: DateConventions = DEFAULT_CONVENTIONS) -> str:
    """Format as ``d MMMM yyyy`` (no leading zero on the day)."""
    return f"{value.day} {conventions.month_name(value.month)} {value.year:04d}"


def format_time(value: datetime, conventions: DateConventions = DEFAULT_CONVENTIONS) -> str:
    """Format as ``HH:mm WIB``."""
    return f"{value:%H:%M} {conventions.zone_tag}"


def parse_date(value: str, conventions: DateConventions = DEFAULT_CONVENTIONS) -> Optional[date]:
    """Parse a record date string; returns None when it cannot be read.

    Accepts the day with or without a leading zero, so older ``"03 Mei 2025"``
    values parse as well.
    """
    if not value:
        return None

    parts = value.split()
    if len(parts) != 3:
        return None

    day_part, month_part, year_part = parts
    month = conventions.month_number(month_part)
    if month is None:
        return None

    try:
        return date(int(year_part), month, int(day_part))
    except ValueError:
        return None


def format_date_display(value: str, conventions: DateConventions = DEFAULT_CONVENTIONS) -> str:
    """Short ``d MMMM`` label for a record date; unparseable input is returned as is."""
    parsed = parse_date(value, conventions)
    if parsed is None:
        return value
    return f"{parsed.day} {conventions.month_name(parsed.month)}"


def time_part(value: str) -> str:
    """Strip the zone tag: ``"08:05 WIB"`` -> ``"08:05"``."""
    return value.split(" ")[0]


def _to_int_or_zero(value: str) -> int:
    parsed = parse_plain_int(value)
    return 0 if parsed is None else parsed


def parse_clock(value: str) -> Tuple[int, int]:
    """Read ``(hour, minute)`` from a record time.

    Components that are missing or not numeric count as 0.
    """
    parts = time_part(value).split(":")
    hour = _to_int_or_zero(parts[0])
    minute = _to_int_or_zero(parts[1]) if len(parts) > 1 else 0
    return hour, minute


def clock_of(value: datetime) -> Tuple[int, int]:
    return value.hour, value.minute


def is_weekend(value: str, conventions: DateConventions = DEFAULT_CONVENTIONS) -> bool:
    """Saturday/Sunday check on a record date. Unparseable dates are not weekends."""
    parsed = parse_date(value, conventions)
    if parsed is None:
        return False
    return parsed.weekday() >= 5
