"""Summary figures for the dashboard and the AI financial summary.

Every function here works on the full collections, never on a filtered
list view, and recomputes from scratch on each call.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from decimal import Decimal
from typing import Any

from epay_pro.models import Client, Provider, Supplier, Transaction

# Client codes start after this value
BASE_CLIENT_CODE = 1000

CLIENT_CODE_PATTERN = re.compile(r"[+-]?[0-9]+")

ZERO = Decimal("0")


def total_volume(transactions: Iterable[Transaction]) -> Decimal:
    """Sum of transaction amounts."""
    return sum((tx.amount for tx in transactions), ZERO)


def total_commission(transactions: Iterable[Transaction]) -> Decimal:
    """Sum of recorded commissions."""
    return sum((tx.commission for tx in transactions), ZERO)


def transaction_count(transactions: Sequence[Transaction]) -> int:
    return len(transactions)


def total_supplier_balance(suppliers: Iterable[Supplier]) -> Decimal:
    """Combined float held across all suppliers."""
    return sum((s.current_balance for s in suppliers), ZERO)


def low_balance_suppliers(suppliers: Iterable[Supplier]) -> list[Supplier]:
    """Suppliers whose float is strictly below their alert threshold."""
    return [s for s in suppliers if s.is_low]


def next_client_code(clients: Iterable[Client]) -> str:
    """Return the code the next new client will get.

    Only plain ASCII integers count (surrounding whitespace and a sign are
    allowed); any other code is ignored. This is a plain read: calling it
    again before a client is added returns the same code.
    """
    codes = [
        int(client.code)
        for client in clients
        if isinstance(client.code, str) and CLIENT_CODE_PATTERN.fullmatch(client.code.strip())
    ]
    highest = max(codes) if codes else BASE_CLIENT_CODE
    return str(highest + 1)


def provider_activity_set(transactions: Iterable[Transaction]) -> list[Provider]:
    """Distinct providers that appear in ``transactions``.

    This is a set, not a ranking by volume or count. Order is first
    appearance so that text built from it is reproducible.
    """
    return list(dict.fromkeys(tx.provider for tx in transactions))


def provider_balances(suppliers: Iterable[Supplier]) -> list[tuple[Provider, Decimal]]:
    """(provider, balance) pairs in supplier order, for the balance chart."""
    return [(s.provider, s.current_balance) for s in suppliers]


@dataclass(frozen=True)
class DashboardStats:
    """Figures shown on the dashboard stat cards, chart and alert panel."""

    total_volume: Decimal
    total_commission: Decimal
    transaction_count: int
    total_supplier_balance: Decimal
    provider_balances: tuple[tuple[Provider, Decimal], ...] = ()
    low_balance_suppliers: tuple[Supplier, ...] = ()


def dashboard_stats(
    transactions: Sequence[Transaction],
    suppliers: Sequence[Supplier],
) -> DashboardStats:
    """Compute every dashboard figure in one pass over the collections."""
    return DashboardStats(
        total_volume=total_volume(transactions),
        total_commission=total_commission(transactions),
        transaction_count=transaction_count(transactions),
        total_supplier_balance=total_supplier_balance(suppliers),
        provider_balances=tuple(provider_balances(suppliers)),
        low_balance_suppliers=tuple(low_balance_suppliers(suppliers)),
    )


@dataclass(frozen=True)
class FinancialSummary:
    """Figures handed to the AI summary prompt."""

    total_transactions: int
    total_volume: Decimal
    total_commission: Decimal
    low_balances: tuple[str, ...]
    top_providers: tuple[str, ...]

    def to_dict(self) -> dict[str, Any]:
        """Serialize with the field names used in the prompt payload."""
        return {
            "totalTransactions": self.total_transactions,
            "totalVolume": str(self.total_volume),
            "totalCommission": str(self.total_commission),
            "lowBalances": list(self.low_balances),
            "topProviders": list(self.top_providers),
        }


def build_financial_summary(
    transactions: Sequence[Transaction],
    suppliers: Sequence[Supplier],
) -> FinancialSummary:
    """Collect the summary the AI request is built from."""
    return FinancialSummary(
        total_transactions=transaction_count(transactions),
        total_volume=total_volume(transactions),
        total_commission=total_commission(transactions),
        low_balances=tuple(s.provider.value for s in low_balance_suppliers(suppliers)),
        top_providers=tuple(p.value for p in provider_activity_set(transactions)),
    )
