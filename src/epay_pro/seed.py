"""Demo records the dashboard starts with."""

from datetime import UTC, date, datetime
from decimal import Decimal

from epay_pro.models import (
    Client,
    MaintenanceRecord,
    MaintenanceStatus,
    Provider,
    Supplier,
    Transaction,
    TransactionStatus,
    TransactionType,
)


def initial_suppliers() -> list[Supplier]:
    return [
        Supplier("1", Provider.FAWRY, Decimal("15400"), Decimal("2000")),
        Supplier("2", Provider.AMAN, Decimal("8200"), Decimal("1500")),
        Supplier("3", Provider.OPAY, Decimal("12000"), Decimal("3000")),
        Supplier("4", Provider.VODAFONE_CASH, Decimal("4500"), Decimal("1000")),
    ]


def initial_clients() -> list[Client]:
    return [
        Client("c1", "1001", "محل السعادة موبايل", "01012345678", Decimal("500"), "2024-05-20"),
        Client("c2", "1002", "سنترال الأمل", "01198765432", Decimal("-200"), "2024-05-19"),
        Client("c3", "1003", "النجم للاتصالات", "01234567890", Decimal("1200"), "2024-05-20"),
    ]


def initial_maintenance() -> list[MaintenanceRecord]:
    return [
        MaintenanceRecord(
            id="m1",
            serial_number="VX-520-998",
            client_name="محل السعادة موبايل",
            issue="عطل في بيت الكارت",
            received_date=date(2024, 5, 21),
            status=MaintenanceStatus.IN_PROGRESS,
            cost=Decimal("150"),
        ),
        MaintenanceRecord(
            id="m2",
            serial_number="PAX-A920-12",
            client_name="النجم للاتصالات",
            issue="تغيير بطارية",
            received_date=date(2024, 5, 20),
            status=MaintenanceStatus.PENDING,
            cost=Decimal("450"),
        ),
    ]


def initial_transactions(now: datetime | None = None) -> list[Transaction]:
    stamp = now or datetime.now(UTC)
    return [
        Transaction(
            id="t1",
            date=stamp,
            provider=Provider.FAWRY,
            type=TransactionType.PAYOUT,
            amount=Decimal("1000"),
            commission=Decimal("15"),
            client_name="محل السعادة موبايل",
            status=TransactionStatus.COMPLETED,
        ),
        Transaction(
            id="t2",
            date=stamp,
            provider=Provider.VODAFONE_CASH,
            type=TransactionType.CASH_OUT,
            amount=Decimal("500"),
            commission=Decimal("5"),
            client_name="سنترال الأمل",
            status=TransactionStatus.COMPLETED,
        ),
    ]
