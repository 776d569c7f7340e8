from __future__ import annotations

import re
from typing import Iterable, Optional

from ..core.constants import FIELD_SEPARATOR, RECORD_SEPARATOR
from ..core.exceptions import ValidationError

_PLAIN_INTEGER = re.compile(r"-?[0-9]+")


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} tidak boleh kosong")
    return value.strip()


def require_no_separators(
    value: str,
    field_name: str,
    separators: Iterable[str] = (FIELD_SEPARATOR, RECORD_SEPARATOR),
) -> str:
    for sep in separators:
        if sep in value:
            raise ValidationError(f"{field_name} tidak boleh mengandung '{sep}'")
    return value


def require_month(month: int) -> int:
    if not 1 <= int(month) <= 12:
        raise ValidationError(f"Bulan tidak valid: {month}")
    return int(month)


def format_coordinates(latitude: float, longitude: float) -> str:
    """Location label used when geocoding gives no street name."""
    return f"Lat: {latitude:.4f}, Lon: {longitude:.4f}"


def parse_plain_int(value: str) -> Optional[int]:
    """Digits with an optional leading minus only; no spaces, ``+`` or ``_``."""
    if not _PLAIN_INTEGER.fullmatch(value):
        return None
    return int(value)
