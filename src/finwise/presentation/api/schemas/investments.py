"""Investment and simulation schemas."""

import datetime as dt
from decimal import Decimal
from typing import Any, Optional
from uuid import UUID

from pydantic import ConfigDict, Field

from finwise.domain.investing.value_objects import (
    AccumulationPoint,
    AccumulationProjection,
    SimulationYearResult,
)
from finwise.domain.ledger.entities import InvestmentRecord
from finwise.domain.ledger.value_objects import InvestmentType
from finwise.presentation.api.schemas.common import CamelModel


class InvestmentCreateRequest(CamelModel):
    name: str = Field(..., min_length=1, max_length=255)
    type: InvestmentType
    amount: Decimal = Field(..., description="Invested amount")
    interest_rate: Decimal = Field(..., description="Annual rate in percent")
    start_date: dt.date
    maturity_date: Optional[dt.date] = None


class InvestmentUpdateRequest(CamelModel):
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    type: Optional[InvestmentType] = None
    amount: Optional[Decimal] = None
    interest_rate: Optional[Decimal] = None
    start_date: Optional[dt.date] = None
    maturity_date: Optional[dt.date] = None


class InvestmentResponse(CamelModel):
    id: UUID
    name: str
    type: InvestmentType
    amount: Decimal
    interest_rate: Decimal
    start_date: dt.date
    maturity_date: Optional[dt.date] = None

    @classmethod
    def from_record(cls, record: InvestmentRecord) -> "InvestmentResponse":
        return cls(
            id=record.id,
            name=record.name,
            type=record.type,
            amount=record.amount,
            interest_rate=record.interest_rate,
            start_date=record.start_date,
            maturity_date=record.maturity_date,
        )


class SimulationRequest(CamelModel):
    """Simulation inputs as sent by the client.

    Values may be numbers or numeric strings. They are parsed strictly by
    the simulator, so malformed values are reported as PARSE_ERROR rather
    than rejected by schema validation.
    """

    amount: Any = Field(..., description="Initial principal")
    interest_rate: Any = Field(..., description="Annual rate in percent")
    years: Any = Field(..., description="Whole number of years (1 to 100)")
    monthly_contribution: Any = Field(None, description="Optional monthly deposit")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "amount": "1000",
                "interestRate": "10",
                "years": 2,
                "monthlyContribution": "0",
            },
        },
    )


class SimulationYearResponse(CamelModel):
    year: int
    amount: Decimal = Field(..., description="Balance at the end of the year")
    total_contributed: Decimal
    total_return: Decimal

    @classmethod
    def from_result(cls, result: SimulationYearResult) -> "SimulationYearResponse":
        return cls(
            year=result.year,
            amount=result.amount,
            total_contributed=result.total_contributed,
            total_return=result.total_return,
        )


class AccumulationRequest(CamelModel):
    """Monthly savings plan inputs (numbers or numeric strings)."""

    initial_amount: Any = Field(..., description="Starting balance")
    monthly_contribution: Any = Field(..., description="Deposit per month")
    interest_rate: Any = Field(..., description="Annual rate in percent")
    years: Any = Field(..., description="Duration in years, fractional, at most 100")
    inflation_rate: Any = Field(None, description="Annual inflation in percent")


class AccumulationPointResponse(CamelModel):
    month: int
    nominal: Decimal
    real: Decimal

    @classmethod
    def from_point(cls, point: AccumulationPoint) -> "AccumulationPointResponse":
        return cls(month=point.month, nominal=point.nominal, real=point.real)


class AccumulationResponse(CamelModel):
    months: int
    total_invested: Decimal
    final_nominal: Decimal
    final_real: Decimal
    nominal_return: Decimal
    real_return: Decimal
    points: list[AccumulationPointResponse]

    @classmethod
    def from_projection(
        cls,
        projection: AccumulationProjection,
    ) -> "AccumulationResponse":
        return cls(
            months=projection.months,
            total_invested=projection.total_invested,
            final_nominal=projection.final_nominal,
            final_real=projection.final_real,
            nominal_return=projection.nominal_return,
            real_return=projection.real_return,
            points=[AccumulationPointResponse.from_point(p) for p in projection.points],
        )
