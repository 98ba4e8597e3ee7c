"""Search and category predicates for the transaction and ticket lists.

A record is shown when it matches the free-text query AND the category
filter. The query is a case-insensitive substring test over a few text
fields; an empty query matches everything. The category is either
``"all"`` or the exact provider (transactions) or status (tickets).
"""

from collections.abc import Iterable

from epay_pro.models import (
    ALL_CATEGORIES,
    MaintenanceRecord,
    MaintenanceStatus,
    Provider,
    Transaction,
)


def _text_matches(query: str, fields: Iterable[str]) -> bool:
    needle = query.lower()
    if not needle:
        return True
    return any(needle in field.lower() for field in fields)


def _category_matches(value: str, category: str) -> bool:
    # Enum members compare equal to their value strings, so either form works
    return category == ALL_CATEGORIES or value == category


def transaction_matches(
    tx: Transaction,
    query: str = "",
    provider: Provider | str = ALL_CATEGORIES,
) -> bool:
    """Check a transaction against the search box and provider filter."""
    searchable = (tx.client_name, tx.provider.value, tx.type.value)
    return _text_matches(query, searchable) and _category_matches(tx.provider, provider)


def maintenance_matches(
    record: MaintenanceRecord,
    query: str = "",
    status: MaintenanceStatus | str = ALL_CATEGORIES,
) -> bool:
    """Check a maintenance ticket against the search box and status filter."""
    searchable = (record.client_name, record.serial_number, record.issue)
    return _text_matches(query, searchable) and _category_matches(record.status, status)


def filter_transactions(
    transactions: Iterable[Transaction],
    query: str = "",
    provider: Provider | str = ALL_CATEGORIES,
) -> list[Transaction]:
    """Return the matching transactions in their input order."""
    return [tx for tx in transactions if transaction_matches(tx, query, provider)]


def filter_maintenance(
    records: Iterable[MaintenanceRecord],
    query: str = "",
    status: MaintenanceStatus | str = ALL_CATEGORIES,
) -> list[MaintenanceRecord]:
    """Return the matching tickets in their input order."""
    return [r for r in records if maintenance_matches(r, query, status)]
