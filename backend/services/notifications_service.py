import logging
from typing import Any, Dict

from repositories.users_repository import fetch_user

logger = logging.getLogger("storefront")


def send_order_confirmation(db, order_id: str, order: Dict[str, Any]) -> None:
    user_id = order.get("userId")
    user = fetch_user(db, user_id) if user_id else None
    if user is None:
        raise RuntimeError(f"User {user_id} not found for order {order_id}")
    # No mail provider is wired in; the intent is recorded in the log only.
    logger.info(
        "Order confirmation email should be sent to %s for order %s",
        user.get("email"),
        order_id,
    )
