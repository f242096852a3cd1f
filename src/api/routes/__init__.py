"""API route modules."""

from src.api.routes.health import router as health_router
from src.api.routes.reorder import router as reorder_router
from src.api.routes.reports import router as reports_router

__all__ = [
    "health_router",
    "reorder_router",
    "reports_router",
]
