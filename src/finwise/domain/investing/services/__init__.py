from finwise.domain.investing.services.compound_growth_simulator import (
    CompoundGrowthSimulator,
)

__all__ = ["CompoundGrowthSimulator"]
