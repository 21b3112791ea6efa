"""Category rollups and monthly balance series for the reports charts."""

from __future__ import annotations

import logging
from collections import defaultdict
from datetime import date
from decimal import Decimal
from typing import Iterable, Optional, Sequence
from uuid import UUID

from finwise.domain.ledger.entities import CategoryRecord, TransactionRecord
from finwise.domain.ledger.value_objects import (
    REALIZED_STATUS,
    TransactionType,
)
from finwise.domain.reporting.services.color_palette import fallback_color
from finwise.domain.reporting.value_objects import (
    AggregationResult,
    CategoryTotal,
    MonthlyBalancePoint,
)
from finwise.domain.shared.exceptions import InvalidParameterError
from finwise.domain.shared.numbers import ZERO, round_money
from finwise.domain.shared.time import month_key, month_label, shift_month, today_utc

logger = logging.getLogger(__name__)


class AggregationService:
    """Pure reductions over transaction snapshots.

    Only realized transactions count: paid expenses and received income.
    Sums are exact Decimal additions; results are rounded to cents when
    they are emitted.
    """

    @staticmethod
    def aggregate_expenses_by_category(
        transactions: Iterable[TransactionRecord],
        categories: Iterable[CategoryRecord],
    ) -> list[CategoryTotal]:
        """Total paid expenses per expense category.

        ``categories`` may hold both types; income categories are skipped
        here. Categories whose total is zero are left out. Output follows
        the order of ``categories``.
        """
        return AggregationService._totals_by_category(
            transactions,
            categories,
            TransactionType.EXPENSE,
        )

    @staticmethod
    def aggregate_income_by_category(
        transactions: Iterable[TransactionRecord],
        categories: Iterable[CategoryRecord],
        limit: Optional[int] = None,
    ) -> list[CategoryTotal]:
        """Total received income per income category, largest first.

        Categories with no received income are left out, as in the expense
        rollup.
        """
        if limit is not None and limit < 1:
            raise InvalidParameterError("limit", limit, "must be at least 1")

        totals = AggregationService._totals_by_category(
            transactions,
            categories,
            TransactionType.INCOME,
        )
        # sorted() is stable, so equal totals keep category order
        totals = sorted(totals, key=lambda item: item.value, reverse=True)
        if limit is not None:
            totals = totals[:limit]
        return totals

    @staticmethod
    def _totals_by_category(
        transactions: Iterable[TransactionRecord],
        categories: Iterable[CategoryRecord],
        category_type: TransactionType,
    ) -> list[CategoryTotal]:
        realized = REALIZED_STATUS[category_type]
        sums: dict[UUID, Decimal] = defaultdict(Decimal)
        for txn in transactions:
            if txn.type == category_type and txn.status == realized:
                sums[txn.category_id] += txn.amount

        matching = [c for c in categories if c.type == category_type]
        result: list[CategoryTotal] = []
        for position, category in enumerate(matching):
            total = sums.get(category.id, ZERO)
            if total == ZERO:
                continue
            result.append(
                CategoryTotal(
                    name=category.name,
                    value=round_money(total),
                    color=category.color or fallback_color(position),
                ),
            )
        return result

    @staticmethod
    def aggregate_monthly_balance_evolution(
        transactions: Iterable[TransactionRecord],
        window_months: int,
        as_of: Optional[date] = None,
    ) -> list[MonthlyBalancePoint]:
        """Rolling window of ``window_months`` months ending at ``as_of``.

        Every month of the window is present (zero-filled) in ascending
        order. The running balance starts at zero on the first month of
        the window. Transactions outside the window are ignored.
        """
        if window_months < 1:
            raise InvalidParameterError(
                "window_months",
                window_months,
                "must be at least 1",
            )

        anchor = as_of or today_utc()
        months = [
            shift_month(anchor.year, anchor.month, offset)
            for offset in range(-(window_months - 1), 1)
        ]
        window = set(months)

        income: dict[tuple[int, int], Decimal] = defaultdict(Decimal)
        expenses: dict[tuple[int, int], Decimal] = defaultdict(Decimal)
        for txn in transactions:
            bucket = (txn.date.year, txn.date.month)
            if bucket not in window or not txn.is_realized:
                continue
            if txn.is_income:
                income[bucket] += txn.amount
            else:
                expenses[bucket] += txn.amount

        points: list[MonthlyBalancePoint] = []
        running = ZERO
        for year, month in months:
            month_income = income.get((year, month), ZERO)
            month_expenses = expenses.get((year, month), ZERO)
            running += month_income - month_expenses
            points.append(
                MonthlyBalancePoint(
                    month=month_key(year, month),
                    label=month_label(year, month),
                    income=round_money(month_income),
                    expenses=round_money(month_expenses),
                    balance=round_money(running),
                ),
            )
        return points

    @staticmethod
    def build_chart_data(
        all_transactions: Sequence[TransactionRecord],
        range_transactions: Sequence[TransactionRecord],
        categories: Sequence[CategoryRecord],
        window_months: int,
        as_of: Optional[date] = None,
    ) -> AggregationResult:
        """Combine the category rollup and the balance series.

        ``range_transactions`` is the caller's date-filtered subset used for
        the category rollup; the balance series always uses the rolling
        window over ``all_transactions``. With no transactions at all the
        result is empty and ``has_data`` is False.
        """
        if not all_transactions:
            logger.debug("No transactions recorded; returning empty chart data")
            return AggregationResult(has_data=False)

        return AggregationResult(
            expenses_by_category=AggregationService.aggregate_expenses_by_category(
                range_transactions,
                categories,
            ),
            balance_evolution=AggregationService.aggregate_monthly_balance_evolution(
                all_transactions,
                window_months,
                as_of,
            ),
            has_data=True,
        )
