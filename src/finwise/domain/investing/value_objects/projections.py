"""Results of the investment simulators."""

from dataclasses import dataclass, field
from decimal import Decimal


@dataclass(frozen=True)
class SimulationYearResult:
    """Position at the end of one simulated year."""

    year: int
    amount: Decimal
    total_contributed: Decimal
    total_return: Decimal


@dataclass(frozen=True)
class AccumulationPoint:
    """Nominal and inflation-adjusted balance after ``month`` months."""

    month: int
    nominal: Decimal
    real: Decimal


@dataclass(frozen=True)
class AccumulationProjection:
    """Month-by-month accumulation plan with its totals."""

    months: int
    total_invested: Decimal
    final_nominal: Decimal
    final_real: Decimal
    nominal_return: Decimal
    real_return: Decimal
    points: list[AccumulationPoint] = field(default_factory=list)
