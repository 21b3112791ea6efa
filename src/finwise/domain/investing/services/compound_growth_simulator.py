"""Compound-growth projections for the investments page."""

from __future__ import annotations

import logging
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Union

from finwise.domain.investing.value_objects import (
    AccumulationPoint,
    AccumulationProjection,
    SimulationYearResult,
)
from finwise.domain.shared.exceptions import InvalidParameterError
from finwise.domain.shared.numbers import ZERO, round_money

logger = logging.getLogger(__name__)

Number = Union[Decimal, int]

ONE = Decimal("1")
HUNDRED = Decimal("100")
MONTHS_PER_YEAR = 12

# Input bounds; within them every intermediate value stays finite
MAX_YEARS = 100
MAX_RATE_PERCENT = Decimal("1000")
MAX_AMOUNT = Decimal("1000000000000000")

# Significant digits for the running balances
SIMULATION_PRECISION = 60


def _require_non_negative(name: str, value: Number) -> None:
    if value < 0:
        raise InvalidParameterError(name, value, "cannot be negative")


def _require_at_most(name: str, value: Number, limit: Number) -> None:
    if value > limit:
        raise InvalidParameterError(name, value, f"cannot exceed {limit}")


def _check_amount(name: str, value: Number) -> None:
    _require_non_negative(name, value)
    _require_at_most(name, value, MAX_AMOUNT)


def _check_rate(name: str, value: Number) -> None:
    _require_non_negative(name, value)
    _require_at_most(name, value, MAX_RATE_PERCENT)


class CompoundGrowthSimulator:
    """Year-by-year and month-by-month compound growth.

    All arithmetic is Decimal at ``SIMULATION_PRECISION`` digits. The
    running balance is carried unrounded; only the emitted figures are
    rounded half-up to cents.
    """

    @staticmethod
    def simulate(
        principal: Number,
        annual_rate_percent: Number,
        years: int,
        monthly_contribution: Number = ZERO,
    ) -> list[SimulationYearResult]:
        """Project an investment with yearly compounding.

        Each year first adds twelve monthly contributions, then applies the
        annual rate to the whole balance.

        Raises
        ------
        InvalidParameterError
            If ``years`` is outside ``1..MAX_YEARS``, any amount is negative
            or above ``MAX_AMOUNT``, or the rate is negative or above
            ``MAX_RATE_PERCENT``.
        """
        if years < 1:
            raise InvalidParameterError("years", years, "must be at least 1")
        _require_at_most("years", years, MAX_YEARS)
        _check_amount("principal", principal)
        _check_rate("annual_rate_percent", annual_rate_percent)
        _check_amount("monthly_contribution", monthly_contribution)

        results: list[SimulationYearResult] = []
        with localcontext() as ctx:
            ctx.prec = SIMULATION_PRECISION
            principal = Decimal(principal)
            yearly_contribution = Decimal(monthly_contribution) * MONTHS_PER_YEAR
            growth = ONE + Decimal(annual_rate_percent) / HUNDRED

            current = principal
            for year in range(1, years + 1):
                current += yearly_contribution
                current *= growth
                contributed = principal + yearly_contribution * year
                results.append(
                    SimulationYearResult(
                        year=year,
                        amount=round_money(current),
                        total_contributed=round_money(contributed),
                        total_return=round_money(current - contributed),
                    ),
                )

        logger.debug(
            "Simulated %d years at %s%% from %s",
            years,
            annual_rate_percent,
            principal,
        )
        return results

    @staticmethod
    def project_accumulation(
        initial: Number,
        monthly_contribution: Number,
        annual_rate_percent: Number,
        years: Number,
        inflation_percent: Number = ZERO,
    ) -> AccumulationProjection:
        """Project a savings plan with monthly compounding.

        The annual rate is converted to its equivalent monthly rate
        ``(1 + annual) ** (1/12) - 1``. The real series uses the
        inflation-adjusted rate ``(1 + nominal) / (1 + inflation) - 1``.
        Contributions land at the end of each month. ``years`` may be
        fractional up to ``MAX_YEARS``; it is rounded to whole months, with
        a minimum of one.
        """
        if years <= 0:
            raise InvalidParameterError("years", years, "must be positive")
        _require_at_most("years", years, MAX_YEARS)
        _check_amount("initial", initial)
        _check_amount("monthly_contribution", monthly_contribution)
        _check_rate("annual_rate_percent", annual_rate_percent)
        _check_rate("inflation_percent", inflation_percent)

        with localcontext() as ctx:
            ctx.prec = SIMULATION_PRECISION
            initial = Decimal(initial)
            contribution = Decimal(monthly_contribution)
            nominal_annual = Decimal(annual_rate_percent) / HUNDRED
            real_annual = (ONE + nominal_annual) / (
                ONE + Decimal(inflation_percent) / HUNDRED
            ) - ONE

            twelfth = ONE / MONTHS_PER_YEAR
            nominal_monthly = (ONE + nominal_annual) ** twelfth - ONE
            real_monthly = (ONE + real_annual) ** twelfth - ONE

            months = max(
                1,
                int(
                    (Decimal(years) * MONTHS_PER_YEAR).to_integral_value(
                        rounding=ROUND_HALF_UP,
                    ),
                ),
            )

            nominal = real = initial
            points: list[AccumulationPoint] = []
            for month in range(1, months + 1):
                nominal = nominal * (ONE + nominal_monthly) + contribution
                real = real * (ONE + real_monthly) + contribution
                points.append(
                    AccumulationPoint(
                        month=month,
                        nominal=round_money(nominal),
                        real=round_money(real),
                    ),
                )

            invested = initial + contribution * months
            return AccumulationProjection(
                months=months,
                total_invested=round_money(invested),
                final_nominal=round_money(nominal),
                final_real=round_money(real),
                nominal_return=round_money(nominal - invested),
                real_return=round_money(real - invested),
                points=points,
            )
