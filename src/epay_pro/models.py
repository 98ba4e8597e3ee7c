"""Domain records for the e-payment distribution ledger.

All records are frozen dataclasses. A change to a record is expressed by
building a new instance with ``dataclasses.replace`` and swapping it into
its store; nothing is edited in place.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from uuid import uuid4

# Shown as a client's last transaction before they have any
NO_TRANSACTION_LABEL = "لا يوجد"

# Category filter value that disables the provider/status filter
ALL_CATEGORIES = "all"


class Provider(str, Enum):
    """Payment and cash-transfer companies the agent works through."""

    FAWRY = "فوري"
    AMAN = "أمان"
    OPAY = "أوباي"
    MOMKEN = "ممكن"
    VODAFONE_CASH = "فودافون كاش"
    ORANGE_CASH = "أورانج كاش"
    ETISALAT_CASH = "اتصالات كاش"
    WEE_PAY = "وي باي"


class TransactionType(str, Enum):
    """Kinds of money movement recorded in the ledger."""

    DEPOSIT = "شحن رصيد مورد"  # top-up of a supplier float
    PAYOUT = "تحويل لعميل"  # transfer to a client
    COMMISSION = "عمولة"
    CASH_OUT = "سحب كاش"


class TransactionStatus(str, Enum):
    """Settlement state of a transaction."""

    COMPLETED = "completed"
    PENDING = "pending"
    FAILED = "failed"


class MaintenanceStatus(str, Enum):
    """Repair ticket states.

    The usual flow is pending -> in progress -> fixed -> delivered, but any
    state may be selected from any other and delivered tickets can reopen.
    """

    PENDING = "قيد الانتظار"
    IN_PROGRESS = "جاري الإصلاح"
    FIXED = "تم الإصلاح"
    DELIVERED = "تم التسليم"


def new_record_id() -> str:
    """Return a short random identifier for a new record."""
    return uuid4().hex[:9]


@dataclass(frozen=True)
class Transaction:
    """A single money movement through a provider."""

    id: str
    date: datetime
    provider: Provider
    type: TransactionType
    amount: Decimal
    commission: Decimal
    client_name: str
    status: TransactionStatus = TransactionStatus.COMPLETED
    note: str | None = None


@dataclass(frozen=True)
class Client:
    """A reseller shop tracked by a running balance.

    A negative balance means the client owes the agent.
    """

    id: str
    code: str
    name: str
    phone: str
    balance: Decimal
    last_transaction: str = NO_TRANSACTION_LABEL


@dataclass(frozen=True)
class Supplier:
    """The agent's prepaid float with one provider."""

    id: str
    provider: Provider
    current_balance: Decimal
    threshold: Decimal

    @property
    def is_low(self) -> bool:
        """True when the float has dropped strictly below its alert floor."""
        return self.current_balance < self.threshold


@dataclass(frozen=True)
class MaintenanceRecord:
    """A repair ticket for a point-of-sale terminal."""

    id: str
    serial_number: str
    client_name: str
    issue: str
    received_date: date
    status: MaintenanceStatus = MaintenanceStatus.PENDING
    cost: Decimal = Decimal("0")
