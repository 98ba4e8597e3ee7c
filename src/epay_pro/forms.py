"""Form boundary: turn raw submitted strings into new records.

Required text fields must be non-blank. Numbers are parsed as ``Decimal``;
an optional number left blank becomes zero, while anything that does not
parse to a finite number is rejected so it can never leak into a sum.
"""

from __future__ import annotations

from datetime import UTC, date, datetime
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import TypeVar

from epay_pro.exceptions import FormValidationError
from epay_pro.models import (
    NO_TRANSACTION_LABEL,
    Client,
    MaintenanceRecord,
    MaintenanceStatus,
    Provider,
    Transaction,
    TransactionStatus,
    TransactionType,
    new_record_id,
)

E = TypeVar("E", bound=Enum)


def require_text(field: str, value: str | None) -> str:
    """Return ``value`` stripped, or raise if it is blank."""
    text = (value or "").strip()
    if not text:
        raise FormValidationError(field, "this field is required")
    return text


def parse_amount(
    field: str,
    value: str | int | float | Decimal | None,
    required: bool = True,
) -> Decimal:
    """Parse a money field.

    Args:
        field: Field name used in the error.
        value: Raw input.
        required: When False a blank value becomes ``Decimal("0")``.

    Raises:
        FormValidationError: Blank required value, or not a finite number.
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        if required:
            raise FormValidationError(field, "this field is required")
        return Decimal("0")

    try:
        amount = Decimal(value.strip() if isinstance(value, str) else str(value))
    except InvalidOperation:
        raise FormValidationError(field, f"not a number: {value!r}") from None

    if not amount.is_finite():
        raise FormValidationError(field, f"not a number: {value!r}")
    return amount


def parse_choice(field: str, enum_cls: type[E], value: E | str) -> E:
    """Resolve an enum member from itself, its value or its name."""
    if isinstance(value, enum_cls):
        return value
    text = str(value).strip()
    for member in enum_cls:
        if text == member.value or text.upper() == member.name:
            return member
    raise FormValidationError(field, f"unknown choice: {value!r}")


def build_transaction(
    provider: Provider | str,
    type: TransactionType | str,
    amount: str | Decimal,
    commission: str | Decimal | None,
    client_name: str,
    note: str | None = None,
    now: datetime | None = None,
) -> Transaction:
    """Build a completed transaction stamped with the current time."""
    parsed_commission = parse_amount("commission", commission, required=False)
    if parsed_commission < 0:
        raise FormValidationError("commission", "must not be negative")

    return Transaction(
        id=new_record_id(),
        date=now or datetime.now(UTC),
        provider=parse_choice("provider", Provider, provider),
        type=parse_choice("type", TransactionType, type),
        amount=parse_amount("amount", amount),
        commission=parsed_commission,
        client_name=require_text("client_name", client_name),
        status=TransactionStatus.COMPLETED,
        note=(note or "").strip() or None,
    )


def build_client(
    code: str,
    name: str,
    phone: str,
    balance: str | Decimal = "0",
) -> Client:
    """Build a client that has not transacted yet."""
    return Client(
        id=new_record_id(),
        code=require_text("code", code),
        name=require_text("name", name),
        phone=require_text("phone", phone),
        balance=parse_amount("balance", balance),
        last_transaction=NO_TRANSACTION_LABEL,
    )


def build_maintenance_record(
    serial_number: str,
    client_name: str,
    issue: str,
    cost: str | Decimal | None = "0",
    received_date: date | str | None = None,
) -> MaintenanceRecord:
    """Build a new ticket; it always starts as pending."""
    if isinstance(received_date, str):
        try:
            received = date.fromisoformat(received_date.strip())
        except ValueError:
            raise FormValidationError(
                "received_date", f"not an ISO date: {received_date!r}"
            ) from None
    else:
        received = received_date or date.today()

    return MaintenanceRecord(
        id=new_record_id(),
        serial_number=require_text("serial_number", serial_number),
        client_name=require_text("client_name", client_name),
        issue=require_text("issue", issue),
        received_date=received,
        status=MaintenanceStatus.PENDING,
        cost=parse_amount("cost", cost, required=False),
    )
