from __future__ import annotations

import threading

import pytest

from hronline.attendance.codec import encode_records
from hronline.attendance.preferences_repository import PreferencesAttendanceRepository
from hronline.storage.memory_preferences import InMemoryPreferencesStore

from tests.factories import make_record


class RecordingStore(InMemoryPreferencesStore):
    def __init__(self):
        super().__init__()
        self.puts: list[tuple[str, str]] = []

    def put(self, namespace: str, key: str, value: str) -> None:
        self.puts.append((namespace, key))
        super().put(namespace, key, value)


def test_append_then_load_round_trips_one_record(store):
    repo = PreferencesAttendanceRepository(store)
    record = make_record("A1", timestamp=1714694400000)

    repo.append(record)

    assert repo.load_all() == [record]
    assert store.get("attendance_prefs", "attendance_list") == (
        "A1|CHECK_IN|3 Mei 2025|08:00 WIB|Jl. Thamrin, Jakarta|1714694400000|true"
    )


def test_append_writes_single_key_once_per_call():
    store = RecordingStore()
    repo = PreferencesAttendanceRepository(store)

    repo.append(make_record("1", timestamp=1))
    repo.append(make_record("2", timestamp=2))

    assert store.puts == [("attendance_prefs", "attendance_list")] * 2


def test_load_all_sorts_newest_first(store):
    repo = PreferencesAttendanceRepository(store)
    r1 = make_record("r1", timestamp=100)
    r2 = make_record("r2", timestamp=300)
    r3 = make_record("r3", timestamp=200)

    for r in (r1, r2, r3):
        repo.append(r)

    assert repo.load_all() == [r2, r3, r1]


def test_load_all_reads_preexisting_value(store):
    records = [make_record(str(i), timestamp=ts) for i, ts in enumerate([5, 50, 7, 12])]
    store.put("attendance_prefs", "attendance_list", encode_records(records))

    loaded = PreferencesAttendanceRepository(store).load_all()

    assert loaded == sorted(records, key=lambda r: r.timestamp, reverse=True)


def test_empty_store_loads_nothing(store):
    assert PreferencesAttendanceRepository(store).load_all() == []


def test_retention_keeps_last_hundred(store):
    repo = PreferencesAttendanceRepository(store)
    for ts in range(1, 102):
        repo.append(make_record(f"id-{ts}", timestamp=ts))

    loaded = repo.load_all()
    assert len(loaded) == 100
    assert min(r.timestamp for r in loaded) == 2


def test_retention_follows_append_order_not_timestamps(store):
    repo = PreferencesAttendanceRepository(store)
    # Timestamps deliberately unrelated to append order.
    appended = [make_record(f"id-{i}", timestamp=(i * 37) % 151) for i in range(150)]
    for r in appended:
        repo.append(r)

    kept = {r.record_id for r in repo.load_all()}
    assert len(kept) == 100
    assert kept == {r.record_id for r in appended[-100:]}


def test_legacy_line_loads_as_face_verified(store):
    store.put("attendance_prefs", "attendance_list", "X|CHECK_IN|1 Januari 2024|08:00 WIB|Office|1704067200000")

    loaded = PreferencesAttendanceRepository(store).load_all()

    assert len(loaded) == 1
    assert loaded[0].face_verified is True


def test_corrupt_chunk_is_dropped_on_append(store):
    store.put("attendance_prefs", "attendance_list", "broken;;" + encode_records([make_record("ok", timestamp=1)]))
    repo = PreferencesAttendanceRepository(store)

    repo.append(make_record("new", timestamp=2))

    assert [r.record_id for r in repo.load_all()] == ["new", "ok"]
    assert "broken" not in store.get("attendance_prefs", "attendance_list")


def test_custom_namespace_and_capacity(store):
    repo = PreferencesAttendanceRepository(store, namespace="ns", key="k", max_records=2)
    for ts in (1, 2, 3):
        repo.append(make_record(str(ts), timestamp=ts))

    assert [r.timestamp for r in repo.load_all()] == [3, 2]
    assert store.get("attendance_prefs", "attendance_list") == ""


def test_capacity_must_be_positive(store):
    with pytest.raises(ValueError):
        PreferencesAttendanceRepository(store, max_records=0)


def test_concurrent_appends_are_not_lost(store):
    repo = PreferencesAttendanceRepository(store, max_records=1000)

    def worker(n):
        for i in range(25):
            repo.append(make_record(f"t{n}-{i}", timestamp=n * 100 + i))

    threads = [threading.Thread(target=worker, args=(n,)) for n in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    loaded = repo.load_all()
    assert len(loaded) == 200
    assert len({r.record_id for r in loaded}) == 200
