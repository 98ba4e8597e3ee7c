"""E-Pay Pro - ledger, supplier float and terminal maintenance engine for an e-payment agent."""

__version__ = "0.1.0"

from epay_pro.aggregation import (
    DashboardStats,
    FinancialSummary,
    build_financial_summary,
    dashboard_stats,
    low_balance_suppliers,
    next_client_code,
    provider_activity_set,
    total_commission,
    total_supplier_balance,
    total_volume,
    transaction_count,
)
from epay_pro.clients import GeminiClient
from epay_pro.config import configure_logging, get_settings
from epay_pro.dashboard import DashboardState
from epay_pro.exceptions import (
    EPayError,
    FormValidationError,
    InsightsUnavailableError,
    UnknownRecordError,
)
from epay_pro.filters import filter_maintenance, filter_transactions
from epay_pro.insights import INSIGHT_FALLBACK_MESSAGE, InsightService, build_prompt
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
from epay_pro.sorting import MaintenanceSort, sort_maintenance
from epay_pro.stores import RecordStore

__all__ = [
    # Version
    "__version__",
    # Records
    "Provider",
    "TransactionType",
    "TransactionStatus",
    "MaintenanceStatus",
    "Transaction",
    "Client",
    "Supplier",
    "MaintenanceRecord",
    # Stores & state
    "RecordStore",
    "DashboardState",
    # Views
    "filter_transactions",
    "filter_maintenance",
    "MaintenanceSort",
    "sort_maintenance",
    # Aggregates
    "DashboardStats",
    "FinancialSummary",
    "dashboard_stats",
    "build_financial_summary",
    "total_volume",
    "total_commission",
    "transaction_count",
    "total_supplier_balance",
    "low_balance_suppliers",
    "next_client_code",
    "provider_activity_set",
    # Insights
    "GeminiClient",
    "InsightService",
    "INSIGHT_FALLBACK_MESSAGE",
    "build_prompt",
    # Errors
    "EPayError",
    "FormValidationError",
    "UnknownRecordError",
    "InsightsUnavailableError",
    # Config
    "get_settings",
    "configure_logging",
]
