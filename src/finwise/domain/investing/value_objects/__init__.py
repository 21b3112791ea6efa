from finwise.domain.investing.value_objects.projections import (
    AccumulationPoint,
    AccumulationProjection,
    SimulationYearResult,
)

__all__ = [
    "AccumulationPoint",
    "AccumulationProjection",
    "SimulationYearResult",
]
