from finwise.domain.reporting.services.aggregation_service import AggregationService
from finwise.domain.reporting.services.bills_service import BillsService
from finwise.domain.reporting.services.color_palette import (
    FALLBACK_PALETTE,
    fallback_color,
)
from finwise.domain.reporting.services.summary_service import SummaryService

__all__ = [
    "FALLBACK_PALETTE",
    "AggregationService",
    "BillsService",
    "SummaryService",
    "fallback_color",
]
