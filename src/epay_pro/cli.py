"""Command line views over the dashboard state.

Usage:
    epay-pro dashboard
    epay-pro transactions --search فوري
    epay-pro maintenance --status PENDING --sort cost_desc
    epay-pro insights
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from collections.abc import Sequence
from decimal import Decimal

import structlog

from epay_pro.config import configure_logging
from epay_pro.dashboard import DashboardState
from epay_pro.exceptions import FormValidationError
from epay_pro.forms import parse_choice
from epay_pro.models import ALL_CATEGORIES, MaintenanceStatus, Provider
from epay_pro.sorting import DEFAULT_SORT, MaintenanceSort

logger = structlog.get_logger(__name__)

CURRENCY = "ج.م"


def format_money(amount: Decimal) -> str:
    return f"{amount:,} {CURRENCY}"


def _category(enum_cls: type, value: str | None) -> str:
    if not value or value == ALL_CATEGORIES:
        return ALL_CATEGORIES
    try:
        return parse_choice("category", enum_cls, value)
    except FormValidationError as e:
        raise argparse.ArgumentTypeError(str(e)) from None


def render_dashboard(state: DashboardState) -> str:
    stats = state.stats()
    lines = [
        f"إجمالي حجم التداول: {format_money(stats.total_volume)}",
        f"إجمالي العمولات: {format_money(stats.total_commission)}",
        f"عدد العمليات: {stats.transaction_count}",
        f"رصيد الموردين الكلي: {format_money(stats.total_supplier_balance)}",
        "",
        "أرصدة الشركات:",
    ]
    lines += [
        f"  {provider.value}: {format_money(balance)}"
        for provider, balance in stats.provider_balances
    ]
    lines += ["", "تنبيهات الأرصدة:"]
    if stats.low_balance_suppliers:
        lines += [
            f"  ! {s.provider.value}: {format_money(s.current_balance)}"
            f" (الحد {format_money(s.threshold)})"
            for s in stats.low_balance_suppliers
        ]
    else:
        lines.append("  لا توجد تنبيهات")
    return "\n".join(lines)


def render_transactions(state: DashboardState) -> str:
    rows = state.filtered_transactions()
    if not rows:
        return "لا توجد عمليات مطابقة"
    return "\n".join(
        f"{tx.date:%Y-%m-%d %H:%M}  {tx.provider.value}  {tx.type.value}  "
        f"{tx.client_name}  {format_money(tx.amount)}  +{tx.commission}  {tx.status.value}"
        for tx in rows
    )


def render_maintenance(state: DashboardState) -> str:
    rows = state.visible_maintenance()
    if not rows:
        return "لا توجد بلاغات صيانة مطابقة"
    return "\n".join(
        f"{r.received_date.isoformat()}  {r.serial_number}  {r.client_name}  "
        f"{r.issue}  {r.status.value}  {format_money(r.cost)}"
        for r in rows
    )


def render_clients(state: DashboardState) -> str:
    lines = [
        f"{c.code}  {c.name}  {c.phone}  {format_money(c.balance)}  {c.last_transaction}"
        for c in state.clients
    ]
    lines.append(f"كود العميل التالي: {state.next_client_code()}")
    return "\n".join(lines)


def render_suppliers(state: DashboardState) -> str:
    return "\n".join(
        f"{'!' if s.is_low else ' '} {s.provider.value}  {format_money(s.current_balance)}"
        f"  (الحد {format_money(s.threshold)})"
        for s in state.suppliers
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="epay-pro",
        description="E-Pay Pro distribution agent dashboard",
    )
    parser.add_argument(
        "--empty",
        action="store_true",
        help="Start without the demo records",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Override LOG_LEVEL",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    commands.add_parser("dashboard", help="Stat cards, provider balances and alerts")

    tx = commands.add_parser("transactions", help="Transaction log")
    tx.add_argument("--search", default="", help="Client, provider or type text")
    tx.add_argument(
        "--provider",
        type=lambda v: _category(Provider, v),
        default=ALL_CATEGORIES,
        help="Provider name or label (default: all)",
    )

    mt = commands.add_parser("maintenance", help="Terminal maintenance tickets")
    mt.add_argument("--search", default="", help="Client, serial number or issue text")
    mt.add_argument(
        "--status",
        type=lambda v: _category(MaintenanceStatus, v),
        default=ALL_CATEGORIES,
        help="Ticket status name or label (default: all)",
    )
    mt.add_argument(
        "--sort",
        choices=[mode.value for mode in MaintenanceSort],
        default=DEFAULT_SORT.value,
    )

    commands.add_parser("clients", help="Clients and the next client code")
    commands.add_parser("suppliers", help="Supplier floats")
    commands.add_parser("insights", help="AI financial summary")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(level=args.log_level)

    state = DashboardState.create(seed_demo_data=False if args.empty else None)

    if args.command == "dashboard":
        output = render_dashboard(state)
    elif args.command == "transactions":
        state.search_term = args.search
        state.provider_filter = args.provider
        output = render_transactions(state)
    elif args.command == "maintenance":
        state.maintenance_search = args.search
        state.maintenance_status_filter = args.status
        state.maintenance_sort = MaintenanceSort(args.sort)
        output = render_maintenance(state)
    elif args.command == "clients":
        output = render_clients(state)
    elif args.command == "suppliers":
        output = render_suppliers(state)
    else:
        output = asyncio.run(state.request_insight()) or ""

    print(output)
    return 0


def run() -> None:
    """Console script entry point."""
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        logger.info("interrupted")
        sys.exit(130)


if __name__ == "__main__":
    run()
