"""Dashboard KPI reduction."""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Optional, Sequence

from finwise.domain.ledger.entities import (
    GoalRecord,
    InvestmentRecord,
    TransactionRecord,
)
from finwise.domain.ledger.value_objects import TransactionStatus
from finwise.domain.reporting.value_objects import DashboardSummary, GoalProgress
from finwise.domain.shared.date_range import DateRange
from finwise.domain.shared.numbers import ZERO, round_money

logger = logging.getLogger(__name__)

HUNDRED = Decimal("100")


class SummaryService:
    """Reduce transactions, goals and investments into dashboard KPIs.

    Income and expense figures only include realized transactions
    (received income, paid expenses). Unsettled amounts are reported
    separately as ``pending_income``/``pending_expenses``; overdue
    expenses count as pending.
    """

    @staticmethod
    def compute_summary(
        transactions: Sequence[TransactionRecord],
        goals: Sequence[GoalRecord],
        investments: Sequence[InvestmentRecord],
        date_filter: Optional[DateRange] = None,
    ) -> DashboardSummary:
        total_investments = round_money(
            sum((i.amount for i in investments), ZERO),
        )
        goals_progress = SummaryService.aggregate_goals_progress(goals)

        if not transactions:
            return DashboardSummary(
                current_balance=round_money(ZERO),
                monthly_income=round_money(ZERO),
                monthly_expenses=round_money(ZERO),
                pending_income=round_money(ZERO),
                pending_expenses=round_money(ZERO),
                goals_progress=goals_progress,
                total_investments=total_investments,
                goals_count=len(goals),
                transactions_count=0,
                has_transactions=False,
            )

        # Balance is all-time, independent of the KPI period
        balance = ZERO
        for txn in transactions:
            if txn.is_realized:
                balance += txn.amount if txn.is_income else -txn.amount

        period = (
            [t for t in transactions if date_filter.contains(t.date)]
            if date_filter is not None
            else list(transactions)
        )

        income = expenses = pending_income = pending_expenses = ZERO
        for txn in period:
            if txn.is_income:
                if txn.status == TransactionStatus.RECEIVED:
                    income += txn.amount
                else:
                    pending_income += txn.amount
            elif txn.status == TransactionStatus.PAID:
                expenses += txn.amount
            else:
                pending_expenses += txn.amount

        logger.debug(
            "Summary over %d of %d transactions (filter=%s)",
            len(period),
            len(transactions),
            date_filter,
        )

        return DashboardSummary(
            current_balance=round_money(balance),
            monthly_income=round_money(income),
            monthly_expenses=round_money(expenses),
            pending_income=round_money(pending_income),
            pending_expenses=round_money(pending_expenses),
            goals_progress=goals_progress,
            total_investments=total_investments,
            goals_count=len(goals),
            transactions_count=len(transactions),
            has_transactions=True,
        )

    @staticmethod
    def aggregate_goals_progress(goals: Sequence[GoalRecord]) -> Decimal:
        """sum(current) / sum(target) * 100, deliberately not clamped.

        Overshooting goals can push the aggregate above 100.
        """
        target = sum((g.target_amount for g in goals), ZERO)
        if target == ZERO:
            return round_money(ZERO)
        current = sum((g.current_amount for g in goals), ZERO)
        return round_money(current / target * HUNDRED)

    @staticmethod
    def goal_progress(goal: GoalRecord) -> GoalProgress:
        """Completion percentage of a single goal, clamped to [0, 100]."""
        if goal.target_amount == ZERO:
            progress = ZERO
        else:
            progress = goal.current_amount / goal.target_amount * HUNDRED
        progress = min(max(progress, ZERO), HUNDRED)
        return GoalProgress(
            goal_id=str(goal.id),
            name=goal.name,
            target_amount=goal.target_amount,
            current_amount=goal.current_amount,
            progress=round_money(progress),
        )
