import asyncio
import logging

from fastapi import HTTPException, status

from repositories.carts_repository import delete_cart
from repositories.orders_repository import insert_order
from repositories.products_repository import decrement_stock
from schemas import ProcessOrderRequest, ProcessOrderResponse

logger = logging.getLogger("storefront")

PAYMENT_SUCCEEDED = "succeeded"
ORDER_CONFIRMED = "confirmed"


async def process_order(db, payments, payload: ProcessOrderRequest) -> ProcessOrderResponse:
    # Steps run in order with no compensation: a failed stock batch leaves
    # the order document in place.
    intent = await asyncio.to_thread(
        payments.retrieve_payment_intent, payload.paymentIntentId
    )
    if intent.status != PAYMENT_SUCCEEDED:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Payment not completed",
        )

    items = [item.model_dump() for item in payload.items]
    record = {
        "userId": payload.userId,
        "items": items,
        "total": payload.total,
        "shippingAddress": payload.shippingAddress,
        "paymentIntentId": payload.paymentIntentId,
        "status": ORDER_CONFIRMED,
    }
    order_id = await asyncio.to_thread(insert_order, db, record)
    logger.info("process_order stored order=%s user=%s", order_id, payload.userId)

    updated = await asyncio.to_thread(decrement_stock, db, items)
    logger.info("process_order stock batch order=%s products=%s", order_id, updated)

    await asyncio.to_thread(delete_cart, db, payload.userId)
    logger.info("process_order cleared cart user=%s", payload.userId)

    return ProcessOrderResponse(orderId=order_id, status="success")
