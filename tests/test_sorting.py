"""Tests for maintenance ticket ordering."""

from datetime import date, datetime

import pytest
from conftest import make_ticket

from epay_pro.sorting import MaintenanceSort, compare, sort_maintenance, to_calendar_day


class TestCompare:
    """Tests for the comparator."""

    def test_date_modes(self):
        older = make_ticket("a", "2024-05-20")
        newer = make_ticket("b", "2024-05-21")

        assert compare(older, newer, MaintenanceSort.DATE_ASC) == -1
        assert compare(older, newer, MaintenanceSort.DATE_DESC) == 1
        assert compare(newer, newer, MaintenanceSort.DATE_DESC) == 0

    def test_cost_modes(self):
        cheap = make_ticket("a", cost="80")
        dear = make_ticket("b", cost="450")

        assert compare(cheap, dear, MaintenanceSort.COST_ASC) == -1
        assert compare(cheap, dear, MaintenanceSort.COST_DESC) == 1
        assert compare(cheap, cheap, MaintenanceSort.COST_ASC) == 0


class TestCalendarDay:
    """Tests for date normalisation."""

    def test_iso_date_string(self):
        assert to_calendar_day("2024-05-21") == date(2024, 5, 21)

    def test_iso_timestamp_string_drops_time(self):
        assert to_calendar_day("2024-05-21T23:59:00") == date(2024, 5, 21)

    def test_datetime_drops_time(self):
        assert to_calendar_day(datetime(2024, 5, 21, 8, 0)) == date(2024, 5, 21)


class TestSortMaintenance:
    """Tests for sorting whole lists."""

    def test_date_descending_is_default(self, tickets):
        result = sort_maintenance(tickets)

        assert [r.id for r in result] == ["m4", "m1", "m2", "m3"]

    def test_date_ascending_keeps_ties_in_input_order(self, tickets):
        result = sort_maintenance(tickets, MaintenanceSort.DATE_ASC)

        assert [r.id for r in result] == ["m2", "m3", "m1", "m4"]

    def test_cost_descending_is_stable(self, tickets):
        result = sort_maintenance(tickets, MaintenanceSort.COST_DESC)

        # m1 and m3 both cost 150 and keep their input order
        assert [r.id for r in result] == ["m2", "m1", "m3", "m4"]

    def test_cost_ascending_is_stable(self, tickets):
        result = sort_maintenance(tickets, "cost_asc")

        assert [r.id for r in result] == ["m4", "m1", "m3", "m2"]

    def test_descending_reversed_matches_ascending_without_ties(self):
        records = [
            make_ticket("a", cost="300"),
            make_ticket("b", cost="10"),
            make_ticket("c", cost="75"),
        ]

        desc = sort_maintenance(records, MaintenanceSort.COST_DESC)
        asc = sort_maintenance(desc, MaintenanceSort.COST_ASC)

        assert list(reversed(desc)) == asc

    def test_does_not_mutate_input(self, tickets):
        before = list(tickets)
        sort_maintenance(tickets, MaintenanceSort.COST_ASC)

        assert tickets == before

    def test_unknown_mode_rejected(self, tickets):
        with pytest.raises(ValueError):
            sort_maintenance(tickets, "by_colour")
