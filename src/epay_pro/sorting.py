"""Ordering of maintenance tickets for the list view."""

from collections.abc import Iterable
from datetime import date, datetime
from enum import Enum
from functools import cmp_to_key

from epay_pro.models import MaintenanceRecord


class MaintenanceSort(str, Enum):
    """Sort modes offered on the maintenance list."""

    DATE_DESC = "date_desc"
    DATE_ASC = "date_asc"
    COST_DESC = "cost_desc"
    COST_ASC = "cost_asc"


DEFAULT_SORT = MaintenanceSort.DATE_DESC


def to_calendar_day(value: date | datetime | str) -> date:
    """Reduce a date, datetime or ISO string to its calendar day."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return datetime.fromisoformat(value).date()


def _sign(delta: int) -> int:
    return (delta > 0) - (delta < 0)


def compare(a: MaintenanceRecord, b: MaintenanceRecord, mode: MaintenanceSort) -> int:
    """Compare two tickets for ``mode``; returns -1, 0 or 1."""
    if mode in (MaintenanceSort.DATE_ASC, MaintenanceSort.DATE_DESC):
        delta = (to_calendar_day(a.received_date) - to_calendar_day(b.received_date)).days
        result = _sign(delta)
    elif mode in (MaintenanceSort.COST_ASC, MaintenanceSort.COST_DESC):
        result = (a.cost > b.cost) - (a.cost < b.cost)
    else:
        raise ValueError(f"Unknown sort mode: {mode!r}")

    if mode in (MaintenanceSort.DATE_DESC, MaintenanceSort.COST_DESC):
        return -result
    return result


def sort_maintenance(
    records: Iterable[MaintenanceRecord],
    mode: MaintenanceSort | str = DEFAULT_SORT,
) -> list[MaintenanceRecord]:
    """Return tickets ordered by ``mode``.

    The sort is stable in both directions: tickets that compare equal keep
    the relative order they had in ``records``.
    """
    mode = MaintenanceSort(mode)
    return sorted(records, key=cmp_to_key(lambda a, b: compare(a, b, mode)))
