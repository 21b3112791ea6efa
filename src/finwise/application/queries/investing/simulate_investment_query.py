"""Investment simulations over raw request values."""

from __future__ import annotations

import logging
from typing import Any, Optional

from finwise.domain.investing.services import CompoundGrowthSimulator
from finwise.domain.investing.value_objects import (
    AccumulationProjection,
    SimulationYearResult,
)
from finwise.domain.shared.numbers import ZERO, parse_decimal, parse_int

logger = logging.getLogger(__name__)


class SimulateInvestmentQuery:
    """Yearly compound growth projection.

    Inputs arrive as they were sent (numbers or numeric strings) and are
    parsed strictly: a malformed value raises ParseError instead of being
    treated as zero. An omitted monthly contribution means no contribution.
    """

    def __init__(self, simulator: Optional[CompoundGrowthSimulator] = None):
        self._simulator = simulator or CompoundGrowthSimulator()

    async def execute(
        self,
        amount: Any,
        interest_rate: Any,
        years: Any,
        monthly_contribution: Any = None,
    ) -> list[SimulationYearResult]:
        principal = parse_decimal(amount, "amount")
        rate = parse_decimal(interest_rate, "interest_rate")
        year_count = parse_int(years, "years")
        contribution = (
            ZERO
            if monthly_contribution is None
            else parse_decimal(monthly_contribution, "monthly_contribution")
        )
        return self._simulator.simulate(
            principal,
            rate,
            year_count,
            monthly_contribution=contribution,
        )


class AccumulationQuery:
    """Monthly accumulation plan, nominal and inflation-adjusted."""

    def __init__(self, simulator: Optional[CompoundGrowthSimulator] = None):
        self._simulator = simulator or CompoundGrowthSimulator()

    async def execute(  # NOQA: PLR0913
        self,
        initial_amount: Any,
        monthly_contribution: Any,
        interest_rate: Any,
        years: Any,
        inflation_rate: Any = None,
    ) -> AccumulationProjection:
        inflation = (
            ZERO
            if inflation_rate is None
            else parse_decimal(inflation_rate, "inflation_rate")
        )
        projection = self._simulator.project_accumulation(
            initial=parse_decimal(initial_amount, "initial_amount"),
            monthly_contribution=parse_decimal(
                monthly_contribution,
                "monthly_contribution",
            ),
            annual_rate_percent=parse_decimal(interest_rate, "interest_rate"),
            years=parse_decimal(years, "years"),
            inflation_percent=inflation,
        )
        logger.debug("Projected accumulation over %d months", projection.months)
        return projection
