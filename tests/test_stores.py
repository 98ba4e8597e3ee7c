"""Tests for the in-memory record stores."""

from dataclasses import replace

from conftest import make_ticket

from epay_pro.models import MaintenanceStatus
from epay_pro.stores import RecordStore


class TestRecordStore:
    """Tests for RecordStore."""

    def test_append_to_back_by_default(self):
        store = RecordStore("clients", ["a"])
        store.append("b")

        assert store.snapshot() == ("a", "b")

    def test_newest_first_appends_to_front(self):
        store = RecordStore("transactions", ["old"], newest_first=True)
        store.append("new")

        assert list(store) == ["new", "old"]

    def test_replace_where_swaps_matching_records(self):
        store = RecordStore("maintenance", [make_ticket("m1"), make_ticket("m2")])

        count = store.replace_where(
            lambda r: r.id == "m2",
            lambda r: replace(r, status=MaintenanceStatus.FIXED),
        )

        assert count == 1
        assert [r.status for r in store] == [MaintenanceStatus.PENDING, MaintenanceStatus.FIXED]

    def test_replace_where_without_match_changes_nothing(self):
        store = RecordStore("maintenance", [make_ticket("m1")])
        version = store.version

        assert store.replace_where(lambda r: False, lambda r: r) == 0
        assert store.version == version

    def test_version_bumps_on_mutation(self):
        store = RecordStore("clients")
        assert store.version == 0

        store.append("a")
        store.replace_where(lambda r: True, lambda r: r.upper())

        assert store.version == 2
        assert len(store) == 1

    def test_snapshot_is_detached(self):
        store = RecordStore("clients", ["a"])
        snap = store.snapshot()
        store.append("b")

        assert snap == ("a",)
