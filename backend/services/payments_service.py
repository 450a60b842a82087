import asyncio
import logging
from decimal import ROUND_FLOOR, Decimal
from typing import Dict

from schemas import PaymentIntentRequest, PaymentIntentResponse

logger = logging.getLogger("storefront")


def to_minor_units(amount: float) -> int:
    """Convert a major-unit amount to minor units, rounding halves up.

    Halves go towards positive infinity, so -5.555 becomes -555. The amount
    is rounded on its decimal text rather than on the binary float product,
    so 19.995 becomes 2000 and not 1999.
    """
    cents = Decimal(str(amount)) * 100
    return int((cents + Decimal("0.5")).to_integral_value(rounding=ROUND_FLOOR))


async def create_payment_intent(
    payments,
    payload: PaymentIntentRequest,
) -> PaymentIntentResponse:
    amount = to_minor_units(payload.amount)
    metadata: Dict[str, str] = {}
    if payload.orderId is not None:
        metadata["orderId"] = payload.orderId
    intent = await asyncio.to_thread(
        payments.create_payment_intent, amount, payload.currency, metadata
    )
    logger.info(
        "create_payment_intent intent=%s amount=%s currency=%s order=%s",
        intent.id,
        amount,
        payload.currency,
        payload.orderId,
    )
    return PaymentIntentResponse(clientSecret=intent.client_secret)
