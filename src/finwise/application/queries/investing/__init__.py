"""Investing queries - growth simulations."""

from finwise.application.queries.investing.simulate_investment_query import (
    AccumulationQuery,
    SimulateInvestmentQuery,
)

__all__ = ["AccumulationQuery", "SimulateInvestmentQuery"]
