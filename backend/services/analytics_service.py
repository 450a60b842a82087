import asyncio
from typing import Any, Dict, List

from repositories.orders_repository import fetch_all_orders
from repositories.products_repository import fetch_all_products
from repositories.users_repository import fetch_all_users
from schemas import AnalyticsResponse

RECENT_ORDERS_LIMIT = 10


def _revenue(orders: List[Dict[str, Any]]) -> float:
    return sum(order.get("total") or 0 for order in orders)


def recent_orders(
    orders: List[Dict[str, Any]],
    limit: int = RECENT_ORDERS_LIMIT,
) -> List[Dict[str, Any]]:
    """Newest orders first; orders without ``createdAt`` go last."""
    ordered = sorted(
        orders,
        key=lambda order: (
            order.get("createdAt") is not None,
            order.get("createdAt"),
        ),
        reverse=True,
    )
    return ordered[:limit]


async def build_analytics(db) -> AnalyticsResponse:
    # Full scans; cost grows with every collection.
    orders = await asyncio.to_thread(fetch_all_orders, db)
    products = await asyncio.to_thread(fetch_all_products, db)
    users = await asyncio.to_thread(fetch_all_users, db)
    return AnalyticsResponse(
        totalOrders=len(orders),
        totalProducts=len(products),
        totalUsers=len(users),
        totalRevenue=_revenue(orders),
        recentOrders=recent_orders(orders),
    )
