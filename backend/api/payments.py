import logging

from fastapi import APIRouter, Depends, HTTPException

from dependencies import get_payments
from schemas import PaymentIntentRequest, PaymentIntentResponse
from services import payments_service

logger = logging.getLogger("storefront")

router = APIRouter(tags=["payments"])


@router.post("/create-payment-intent", response_model=PaymentIntentResponse)
async def create_payment_intent(
    payload: PaymentIntentRequest,
    payments=Depends(get_payments),
) -> PaymentIntentResponse:
    try:
        return await payments_service.create_payment_intent(payments, payload)
    except Exception as exc:
        logger.exception("create_payment_intent failed: %s", exc)
        raise HTTPException(status_code=500, detail=str(exc)) from exc
