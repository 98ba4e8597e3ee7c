"""Application state for the dashboard.

``DashboardState`` is the single owner of the four record stores, the list
view controls and the AI insight panel. Every mutation a user can trigger
goes through one of its methods; list views and dashboard figures are
derived from the current stores each time they are read.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import replace
from decimal import Decimal

import structlog

from epay_pro import aggregation, seed
from epay_pro.aggregation import DashboardStats, FinancialSummary
from epay_pro.config import get_settings
from epay_pro.exceptions import UnknownRecordError
from epay_pro.filters import filter_maintenance, filter_transactions
from epay_pro.forms import parse_choice
from epay_pro.insights import InsightService
from epay_pro.models import (
    ALL_CATEGORIES,
    Client,
    MaintenanceRecord,
    MaintenanceStatus,
    Provider,
    Supplier,
    Transaction,
)
from epay_pro.sorting import DEFAULT_SORT, MaintenanceSort, sort_maintenance
from epay_pro.stores import RecordStore

logger = structlog.get_logger(__name__)


class DashboardState:
    """Controller over the ledger, client, supplier and ticket stores."""

    def __init__(
        self,
        transactions: Iterable[Transaction] = (),
        clients: Iterable[Client] = (),
        suppliers: Iterable[Supplier] = (),
        maintenance: Iterable[MaintenanceRecord] = (),
        insight_service: InsightService | None = None,
    ):
        self.transactions: RecordStore[Transaction] = RecordStore(
            "transactions", transactions, newest_first=True
        )
        self.clients: RecordStore[Client] = RecordStore("clients", clients)
        self.suppliers: RecordStore[Supplier] = RecordStore("suppliers", suppliers)
        self.maintenance: RecordStore[MaintenanceRecord] = RecordStore(
            "maintenance", maintenance, newest_first=True
        )
        self.insights = insight_service or InsightService()

        # Transaction list controls
        self.search_term = ""
        self.provider_filter: Provider | str = ALL_CATEGORIES

        # Maintenance list controls
        self.maintenance_search = ""
        self.maintenance_status_filter: MaintenanceStatus | str = ALL_CATEGORIES
        self.maintenance_sort: MaintenanceSort = DEFAULT_SORT

        self._stats_cache: tuple[tuple[int, int], DashboardStats] | None = None
        self._logger = logger.bind(component="dashboard_state")

    @classmethod
    def with_demo_data(cls, insight_service: InsightService | None = None) -> DashboardState:
        """Build a state preloaded with the demo records."""
        return cls(
            transactions=seed.initial_transactions(),
            clients=seed.initial_clients(),
            suppliers=seed.initial_suppliers(),
            maintenance=seed.initial_maintenance(),
            insight_service=insight_service,
        )

    @classmethod
    def create(cls, seed_demo_data: bool | None = None) -> DashboardState:
        """Build a state, seeding demo data unless settings turn it off."""
        if seed_demo_data is None:
            seed_demo_data = get_settings().seed_demo_data
        return cls.with_demo_data() if seed_demo_data else cls()

    # Mutations

    def add_transaction(self, tx: Transaction) -> Transaction:
        """Record a transaction and debit its provider's supplier float.

        The float is reduced by the full ``amount``; commission is tracked on
        its own and not netted against the supplier balance.
        """
        self.transactions.append(tx)

        def debit(supplier: Supplier) -> Supplier:
            return replace(supplier, current_balance=supplier.current_balance - tx.amount)

        debited = self.suppliers.replace_where(lambda s: s.provider == tx.provider, debit)
        self._logger.info(
            "transaction_added",
            transaction_id=tx.id,
            provider=tx.provider.name,
            amount=str(tx.amount),
            suppliers_debited=debited,
        )
        if not debited:
            self._logger.warning("no_supplier_for_provider", provider=tx.provider.name)
        return tx

    def add_client(self, client: Client) -> Client:
        self.clients.append(client)
        self._logger.info("client_added", client_id=client.id, code=client.code)
        return client

    def add_supplier(self, supplier: Supplier) -> Supplier:
        self.suppliers.append(supplier)
        self._logger.info("supplier_added", provider=supplier.provider.name)
        return supplier

    def add_maintenance(self, record: MaintenanceRecord) -> MaintenanceRecord:
        self.maintenance.append(record)
        self._logger.info(
            "maintenance_added",
            record_id=record.id,
            serial_number=record.serial_number,
            status=record.status.name,
        )
        return record

    def update_maintenance_status(
        self, record_id: str, status: MaintenanceStatus | str
    ) -> MaintenanceRecord:
        """Move a ticket to ``status``; any state may follow any other.

        Raises:
            UnknownRecordError: No ticket has ``record_id``.
            FormValidationError: ``status`` is not a ticket state.
        """
        new_status = parse_choice("status", MaintenanceStatus, status)
        replaced = self.maintenance.replace_where(
            lambda r: r.id == record_id,
            lambda r: replace(r, status=new_status),
        )
        if not replaced:
            raise UnknownRecordError("maintenance record", record_id)

        self._logger.info(
            "maintenance_status_changed", record_id=record_id, status=new_status.name
        )
        return next(r for r in self.maintenance if r.id == record_id)

    # List views

    def next_client_code(self) -> str:
        return aggregation.next_client_code(self.clients)

    def filtered_transactions(self) -> list[Transaction]:
        return filter_transactions(self.transactions, self.search_term, self.provider_filter)

    def visible_maintenance(self) -> list[MaintenanceRecord]:
        """Tickets matching the search and status filter, then sorted."""
        matching = filter_maintenance(
            self.maintenance, self.maintenance_search, self.maintenance_status_filter
        )
        return sort_maintenance(matching, self.maintenance_sort)

    # Dashboard figures

    def stats(self) -> DashboardStats:
        """Dashboard figures, reused until a transaction or supplier changes."""
        key = (self.transactions.version, self.suppliers.version)
        if self._stats_cache is None or self._stats_cache[0] != key:
            stats = aggregation.dashboard_stats(
                self.transactions.snapshot(), self.suppliers.snapshot()
            )
            self._stats_cache = (key, stats)
        return self._stats_cache[1]

    def low_balance_suppliers(self) -> list[Supplier]:
        return aggregation.low_balance_suppliers(self.suppliers)

    def total_supplier_balance(self) -> Decimal:
        return aggregation.total_supplier_balance(self.suppliers)

    def financial_summary(self) -> FinancialSummary:
        return aggregation.build_financial_summary(
            self.transactions.snapshot(), self.suppliers.snapshot()
        )

    # Insight panel

    async def request_insight(self) -> str | None:
        """Ask for an AI summary of the current ledger.

        Returns None without doing anything while a previous request is
        still running.
        """
        return await self.insights.request(
            self.transactions.snapshot(), self.suppliers.snapshot()
        )

    def dismiss_insight(self) -> None:
        self.insights.dismiss()
