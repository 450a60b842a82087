from .analytics import router as analytics_router
from .orders import router as orders_router
from .payments import router as payments_router

__all__ = [
    "analytics_router",
    "orders_router",
    "payments_router",
]
