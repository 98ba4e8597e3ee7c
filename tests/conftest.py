"""Pytest configuration and fixtures."""

import os
from datetime import UTC, date, datetime
from decimal import Decimal

import pytest

# Set test environment variables before importing settings
os.environ.setdefault("GOOGLE_API_KEY", "test-key")
os.environ.setdefault("SEED_DEMO_DATA", "true")

from epay_pro.models import (  # noqa: E402
    Client,
    MaintenanceRecord,
    MaintenanceStatus,
    Provider,
    Supplier,
    Transaction,
    TransactionType,
)


def make_transaction(
    provider: Provider = Provider.FAWRY,
    amount: str = "100",
    commission: str = "1",
    client_name: str = "Test Shop",
    type: TransactionType = TransactionType.PAYOUT,
    id: str = "tx",
) -> Transaction:
    return Transaction(
        id=id,
        date=datetime(2024, 5, 20, 10, 30, tzinfo=UTC),
        provider=provider,
        type=type,
        amount=Decimal(amount),
        commission=Decimal(commission),
        client_name=client_name,
    )


def make_ticket(
    id: str,
    received: str = "2024-05-20",
    cost: str = "0",
    status: MaintenanceStatus = MaintenanceStatus.PENDING,
    serial_number: str = "SN-1",
    client_name: str = "Test Shop",
    issue: str = "screen",
) -> MaintenanceRecord:
    return MaintenanceRecord(
        id=id,
        serial_number=serial_number,
        client_name=client_name,
        issue=issue,
        received_date=date.fromisoformat(received),
        status=status,
        cost=Decimal(cost),
    )


@pytest.fixture
def transactions() -> list[Transaction]:
    """A small mixed ledger."""
    return [
        make_transaction(Provider.FAWRY, "1000", "15", "Happy Mobile", id="t1"),
        make_transaction(
            Provider.VODAFONE_CASH, "500", "5", "Hope Central", TransactionType.CASH_OUT, id="t2"
        ),
        make_transaction(Provider.FAWRY, "-250.50", "0", "Star Telecom", id="t3"),
        make_transaction(
            Provider.AMAN, "2000", "20", "Happy Mobile", TransactionType.DEPOSIT, id="t4"
        ),
    ]


@pytest.fixture
def suppliers() -> list[Supplier]:
    return [
        Supplier("1", Provider.FAWRY, Decimal("15400"), Decimal("2000")),
        Supplier("2", Provider.AMAN, Decimal("1500"), Decimal("2000")),
        Supplier("3", Provider.OPAY, Decimal("3000"), Decimal("3000")),
    ]


@pytest.fixture
def clients() -> list[Client]:
    return [
        Client("c1", "1001", "Happy Mobile", "01012345678", Decimal("500")),
        Client("c2", "1002", "Hope Central", "01198765432", Decimal("-200")),
    ]


@pytest.fixture
def tickets() -> list[MaintenanceRecord]:
    return [
        make_ticket("m1", "2024-05-21", "150", MaintenanceStatus.IN_PROGRESS, "VX-520-998",
                    "Happy Mobile", "card reader fault"),
        make_ticket("m2", "2024-05-20", "450", MaintenanceStatus.PENDING, "PAX-A920-12",
                    "Star Telecom", "battery replacement"),
        make_ticket("m3", "2024-05-20", "150", MaintenanceStatus.FIXED, "VX-675-001",
                    "Hope Central", "keypad"),
        make_ticket("m4", "2024-05-22", "80", MaintenanceStatus.DELIVERED, "PAX-S90-77",
                    "Happy Mobile", "battery swollen"),
    ]
