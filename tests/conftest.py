from __future__ import annotations

from datetime import datetime

import pytest

from hronline.storage.memory_preferences import InMemoryPreferencesStore


@pytest.fixture
def fixed_now() -> datetime:
    # Saturday
    return datetime(2025, 5, 3, 8, 5, 0)


@pytest.fixture
def store() -> InMemoryPreferencesStore:
    return InMemoryPreferencesStore()
