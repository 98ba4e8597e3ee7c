"""AI financial-health summary.

Builds an Arabic prompt from the ledger figures, asks the text model for
three profitability tips plus a low-balance warning, and keeps the result
for the insight panel. Any failure on the way becomes a fixed fallback
message; nothing raised while building or sending the request reaches
the caller.
"""

from __future__ import annotations

from collections.abc import Sequence
from decimal import Decimal
from typing import Protocol

import structlog

from epay_pro.aggregation import FinancialSummary, build_financial_summary
from epay_pro.clients.gemini import GeminiClient
from epay_pro.models import Supplier, Transaction

logger = structlog.get_logger(__name__)

INSIGHT_FALLBACK_MESSAGE = (
    "عذراً، تعذر تحليل البيانات حالياً. يرجى التحقق من اتصالك بالإنترنت."
)


class TextGenerator(Protocol):
    async def generate_text(self, prompt: str) -> str: ...


def _plain_number(value: Decimal) -> str:
    text = format(value.normalize(), "f")
    return "0" if text in ("-0", "") else text


def build_prompt(summary: FinancialSummary) -> str:
    """Render the summary into the prompt sent to the model."""
    return (
        "بصفتك خبير محاسبي مالي لموزع دفع إلكتروني في مصر، "
        "حلل البيانات التالية وقدم تقريراً مختصراً باللغة العربية:\n"
        f"عدد العمليات: {summary.total_transactions}\n"
        f"إجمالي حجم التداول: {_plain_number(summary.total_volume)} جنيه\n"
        f"إجمالي الأرباح (العمولات): {_plain_number(summary.total_commission)} جنيه\n"
        f"شركات رصيدها منخفض: {', '.join(summary.low_balances)}\n"
        f"الشركات الأكثر نشاطاً: {', '.join(summary.top_providers)}\n"
        "\n"
        "المطلوب: تقديم 3 نصائح لتحسين الربحية وتنبيه بخصوص الأرصدة المنخفضة "
        "بشكل احترافي ومختصر جداً."
    )


class InsightService:
    """Holds the insight panel state and runs one summary request at a time.

    While a request is in flight ``is_loading`` is True and further requests
    are ignored. A request cannot be cancelled; if the panel is dismissed
    before it settles, its text is returned to the caller but not kept.
    """

    def __init__(self, client: TextGenerator | None = None):
        self._client = client
        self._loading = False
        self._insight = ""
        self._generation = 0
        self._logger = logger.bind(component="insight_service")

    @property
    def is_loading(self) -> bool:
        return self._loading

    @property
    def insight(self) -> str:
        """Text currently shown in the insight panel ("" when closed)."""
        return self._insight

    def _get_client(self) -> TextGenerator:
        if self._client is None:
            self._client = GeminiClient()
        return self._client

    async def request(
        self,
        transactions: Sequence[Transaction],
        suppliers: Sequence[Supplier],
    ) -> str | None:
        """Generate a summary for the given ledger snapshot.

        Returns:
            The summary text (or the fallback message on failure), or None
            when another request is still outstanding.
        """
        if self._loading:
            self._logger.info("insight_request_ignored", reason="already_loading")
            return None

        self._loading = True
        generation = self._generation

        try:
            summary = build_financial_summary(transactions, suppliers)
            self._logger.info("insight_requested", **summary.to_dict())
            text = await self._get_client().generate_text(build_prompt(summary))
        except Exception as e:
            self._logger.warning("insight_failed", error=str(e), error_type=type(e).__name__)
            text = INSIGHT_FALLBACK_MESSAGE
        finally:
            self._loading = False

        if generation != self._generation:
            self._logger.info("insight_discarded", reason="dismissed")
        else:
            self._insight = text
        return text

    def dismiss(self) -> None:
        """Close the insight panel and drop any result still in flight."""
        self._insight = ""
        self._generation += 1
