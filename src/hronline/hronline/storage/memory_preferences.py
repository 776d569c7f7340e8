from __future__ import annotations

import threading
from typing import Dict, Optional, Tuple

from ..attendance.repository import PreferencesStore


class InMemoryPreferencesStore(PreferencesStore):
    """Process-wide key/value bag held in a dict.

    ``get_instance`` hands out one shared store per process, the same way the
    platform preferences behave; tests usually build their own instance.
    """

    _instance: Optional["InMemoryPreferencesStore"] = None

    def __init__(self, initial: Optional[Dict[Tuple[str, str], str]] = None):
        self._values: Dict[Tuple[str, str], str] = dict(initial or {})
        self._lock = threading.Lock()

    @classmethod
    def get_instance(cls) -> "InMemoryPreferencesStore":
        if cls._instance is None:
            cls._instance = InMemoryPreferencesStore()
        return cls._instance

    def get(self, namespace: str, key: str) -> str:
        with self._lock:
            return self._values.get((namespace, key), "")

    def put(self, namespace: str, key: str, value: str) -> None:
        with self._lock:
            self._values[(namespace, key)] = value
