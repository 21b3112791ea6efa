from finwise.presentation.api.routers.alerts import router as alerts_router
from finwise.presentation.api.routers.categories import router as categories_router
from finwise.presentation.api.routers.dashboard import router as dashboard_router
from finwise.presentation.api.routers.goals import router as goals_router
from finwise.presentation.api.routers.investments import router as investments_router
from finwise.presentation.api.routers.reports import router as reports_router
from finwise.presentation.api.routers.transactions import (
    router as transactions_router,
)

__all__ = [
    "alerts_router",
    "categories_router",
    "dashboard_router",
    "goals_router",
    "investments_router",
    "reports_router",
    "transactions_router",
]
